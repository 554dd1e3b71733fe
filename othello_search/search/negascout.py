"""
NegaScout (Principal Variation Search)

Negascout combines scout-style null-window probing with alpha-beta:

    1. The first child is searched with the full window (-beta, -alpha).
    2. Every later child is probed with the null window (-alpha-1, -alpha),
       which only proves whether it beats alpha.
    3. A probe landing strictly inside (alpha, beta) proved an improvement
       without its exact magnitude, so the child is re-searched with
       (-beta, -score).

References:
    - NegaScout: https://www.chessprogramming.org/NegaScout
    - A. Reinefeld, "An Improvement to the Scout Tree Search Algorithm",
      ICCA Journal 6(4) (1983)
"""

from typing import Optional

from othello_search.state.base import GameState
from othello_search.search.stats import SearchStats
from othello_search.search.transposition import TranspositionTable, bound_type


def negascout(
    state: GameState,
    depth: int,
    alpha: float,
    beta: float,
    color: int,
    stats: Optional[SearchStats] = None,
    transposition_table: Optional[TranspositionTable] = None,
) -> int:
    """
    Negascout search.

    Args:
        state: Current position
        depth: Remaining search depth
        alpha: Lower edge of the window
        beta: Upper edge of the window
        color: Player to move, 1 for MAX, -1 for MIN
        stats: Optional counters for expanded/generated nodes
        transposition_table: Optional table the result is written to

    Returns:
        int: Exact value from `color`'s perspective if it lies inside
        (alpha, beta). On a fail high, a lower bound at or above beta. On a
        fail low, alpha itself, or the static value (at or below alpha) when
        the position is a leaf or depth is 0
    """
    if stats is not None:
        stats.expanded += 1

    if depth == 0 or state.is_terminal():
        return color * state.static_value()

    alpha_orig = alpha
    maximizer_to_move = color == 1
    no_moves = True
    is_first_child = True
    for pos in range(state.DIM):
        if state.is_legal_move(maximizer_to_move, pos):
            if stats is not None:
                stats.generated += 1
            no_moves = False
            child = state.apply_move(maximizer_to_move, pos)
            if is_first_child:
                score = -negascout(child, depth - 1, -beta, -alpha, -color, stats, transposition_table)
                is_first_child = False
            else:
                score = -negascout(child, depth - 1, -alpha - 1, -alpha, -color, stats, transposition_table)
                if alpha < score < beta:
                    score = -negascout(child, depth - 1, -beta, -score, -color, stats, transposition_table)
            alpha = max(alpha, score)

            if alpha >= beta:
                break

    if no_moves:
        if stats is not None:
            stats.generated += 1
        score = -negascout(state, depth - 1, -beta, -alpha, -color, stats, transposition_table)
        alpha = max(alpha, score)

    if transposition_table is not None:
        transposition_table.store(
            state.hash(), color, depth, alpha, bound_type(alpha, alpha_orig, beta)
        )
    return alpha
