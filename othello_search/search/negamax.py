"""
Negamax Search

This module implements the two negamax engines:

    - negamax: brute-force full-depth search, no pruning. It is the
      correctness oracle for every other engine.
    - negamax_ab: negamax with alpha-beta pruning.

Key Concepts:
    - Negamax: both players maximize; a child's score is negated on the way
      up, so color * static_value is the score from the mover's perspective
    - Alpha-Beta: the window (alpha, beta) of still-relevant scores; once
      alpha >= beta the remaining siblings cannot matter (beta cutoff)
    - Pass: a player without legal moves passes; the same position is
      searched one ply deeper with the opponent to move

Algorithm Complexity:
    - Negamax: O(b^d) where b=branching factor, d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

References:
    - Negamax: https://www.chessprogramming.org/Negamax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

from typing import Optional

from othello_search.state.base import GameState
from othello_search.search.stats import SearchStats
from othello_search.search.transposition import TranspositionTable, NodeType, bound_type


def negamax(
    state: GameState,
    depth: int,
    color: int,
    stats: Optional[SearchStats] = None,
    transposition_table: Optional[TranspositionTable] = None,
) -> int:
    """
    Plain negamax search.

    Args:
        state: Current position
        depth: Remaining search depth (decrements each ply, passes included)
        color: Player to move, 1 for MAX, -1 for MIN
        stats: Optional counters for expanded/generated nodes
        transposition_table: Optional table the result is written to

    Returns:
        int: Value of the position from `color`'s perspective
    """
    if stats is not None:
        stats.expanded += 1

    if depth == 0 or state.is_terminal():
        return color * state.static_value()

    alpha = -float("inf")
    maximizer_to_move = color == 1
    no_moves = True
    for pos in range(state.DIM):
        if state.is_legal_move(maximizer_to_move, pos):
            if stats is not None:
                stats.generated += 1
            child = state.apply_move(maximizer_to_move, pos)
            alpha = max(alpha, -negamax(child, depth - 1, -color, stats, transposition_table))
            no_moves = False

    if no_moves:
        if stats is not None:
            stats.generated += 1
        alpha = max(alpha, -negamax(state, depth - 1, -color, stats, transposition_table))

    if transposition_table is not None:
        transposition_table.store(state.hash(), color, depth, alpha, NodeType.EXACT)
    return alpha


def negamax_ab(
    state: GameState,
    depth: int,
    alpha: float,
    beta: float,
    color: int,
    stats: Optional[SearchStats] = None,
    transposition_table: Optional[TranspositionTable] = None,
) -> int:
    """
    Negamax search with alpha-beta pruning (fail-soft).

    Args:
        state: Current position
        depth: Remaining search depth
        alpha: Lower edge of the window (best score the mover is assured of)
        beta: Upper edge of the window (best score the opponent allows)
        color: Player to move, 1 for MAX, -1 for MIN
        stats: Optional counters for expanded/generated nodes
        transposition_table: Optional table the result is written to

    Returns:
        int: Exact value from `color`'s perspective if it lies inside
        (alpha, beta); otherwise a bound on the side the window was missed

    Example:
        If the mover already has a child scoring 5 and beta is 3, the
        opponent will never allow this position, so the remaining children
        are skipped (beta cutoff).
    """
    if stats is not None:
        stats.expanded += 1

    if depth == 0 or state.is_terminal():
        return color * state.static_value()

    alpha_orig = alpha
    value = -float("inf")
    maximizer_to_move = color == 1
    no_moves = True
    for pos in range(state.DIM):
        if state.is_legal_move(maximizer_to_move, pos):
            if stats is not None:
                stats.generated += 1
            child = state.apply_move(maximizer_to_move, pos)
            value = max(
                value,
                -negamax_ab(child, depth - 1, -beta, -alpha, -color, stats, transposition_table),
            )
            alpha = max(alpha, value)
            no_moves = False

            # Beta cutoff: the opponent won't allow this position
            if alpha >= beta:
                break

    if no_moves:
        if stats is not None:
            stats.generated += 1
        value = max(
            value,
            -negamax_ab(state, depth - 1, -beta, -alpha, -color, stats, transposition_table),
        )
        alpha = max(alpha, value)

    if transposition_table is not None:
        transposition_table.store(
            state.hash(), color, depth, value, bound_type(value, alpha_orig, beta)
        )
    return value
