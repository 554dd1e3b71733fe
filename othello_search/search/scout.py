"""
Scout Search

Scout determines the exact minimax value of a position through cheap
boolean threshold tests:

    - test(state, depth, threshold, comparator, color) decides whether the
      minimax value satisfies `value > threshold` or `value >= threshold`
      without computing it.
    - scout evaluates the first child exactly; every later child is first
      tested against the best value so far, and only searched exactly when
      the test shows it improves on that value.

Values inside this module are absolute (maximizer-positive), as in the
classic formulation. The public scout() converts its result to the
mover's perspective so it agrees with the negamax-family engines.

References:
    - Scout: https://www.chessprogramming.org/Scout
    - J. Pearl, "Asymptotic properties of minimax trees and game-searching
      procedures", Artificial Intelligence 14 (1980)
"""

from enum import Enum
from typing import Optional

from othello_search.state.base import GameState
from othello_search.search.stats import SearchStats
from othello_search.search.transposition import TranspositionTable, NodeType


class Comparator(str, Enum):
    """Comparison applied by test(): `value <comparator> threshold`."""
    GREATER = ">"
    GREATER_EQUAL = ">="


def _compare(value: int, threshold: int, comparator: Comparator) -> bool:
    if comparator is Comparator.GREATER:
        return value > threshold
    return value >= threshold


def _test(
    state: GameState,
    depth: int,
    threshold: int,
    comparator: Comparator,
    color: int,
    stats: Optional[SearchStats],
) -> bool:
    if stats is not None:
        stats.expanded += 1

    if depth == 0 or state.is_terminal():
        return _compare(state.static_value(), threshold, comparator)

    is_max = color == 1
    no_moves = True
    for pos in range(state.DIM):
        if state.is_legal_move(is_max, pos):
            if stats is not None:
                stats.generated += 1
            no_moves = False
            child = state.apply_move(is_max, pos)
            result = _test(child, depth - 1, threshold, comparator, -color, stats)
            # MAX needs one child passing, MIN needs every child passing
            if is_max and result:
                return True
            if not is_max and not result:
                return False

    if no_moves:
        if stats is not None:
            stats.generated += 1
        return _test(state, depth - 1, threshold, comparator, -color, stats)

    return not is_max


def test(
    state: GameState,
    depth: int,
    threshold: int,
    comparator: str | Comparator,
    color: int,
    stats: Optional[SearchStats] = None,
) -> bool:
    """
    Test the minimax value of a position against a threshold.

    Args:
        state: Current position
        depth: Remaining search depth
        threshold: Value to compare against (absolute, maximizer-positive)
        comparator: ">" or ">=" (or a Comparator)
        color: Player to move, 1 for MAX, -1 for MIN
        stats: Optional counters for expanded/generated nodes

    Returns:
        bool: True if `minimax value <comparator> threshold`

    Raises:
        ValueError: If comparator is not ">" or ">="
    """
    return _test(state, depth, threshold, Comparator(comparator), color, stats)


# Not collected by pytest when imported into test modules
test.__test__ = False


def _scout(
    state: GameState,
    depth: int,
    color: int,
    stats: Optional[SearchStats],
    transposition_table: Optional[TranspositionTable],
) -> int:
    if stats is not None:
        stats.expanded += 1

    if depth == 0 or state.is_terminal():
        return state.static_value()

    score = 0
    is_first_child = True
    is_max = color == 1
    no_moves = True
    for pos in range(state.DIM):
        if state.is_legal_move(is_max, pos):
            if stats is not None:
                stats.generated += 1
            no_moves = False
            child = state.apply_move(is_max, pos)
            if is_first_child:
                score = _scout(child, depth - 1, -color, stats, transposition_table)
                is_first_child = False
            elif is_max:
                if _test(child, depth - 1, score, Comparator.GREATER, -color, stats):
                    score = _scout(child, depth - 1, -color, stats, transposition_table)
            else:
                if not _test(child, depth - 1, score, Comparator.GREATER_EQUAL, -color, stats):
                    score = _scout(child, depth - 1, -color, stats, transposition_table)

    if no_moves:
        if stats is not None:
            stats.generated += 1
        score = _scout(state, depth - 1, -color, stats, transposition_table)

    if transposition_table is not None:
        transposition_table.store(state.hash(), color, depth, color * score, NodeType.EXACT)
    return score


def scout(
    state: GameState,
    depth: int,
    color: int,
    stats: Optional[SearchStats] = None,
    transposition_table: Optional[TranspositionTable] = None,
) -> int:
    """
    Scout search.

    Args:
        state: Current position
        depth: Remaining search depth
        color: Player to move, 1 for MAX, -1 for MIN
        stats: Optional counters; test() probes are counted too
        transposition_table: Optional table the results are written to

    Returns:
        int: Exact value of the position from `color`'s perspective
    """
    return color * _scout(state, depth, color, stats, transposition_table)
