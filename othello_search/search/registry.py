"""
Algorithm selection for the benchmark driver.

Maps the four engines onto one calling convention:

    run_search(algorithm, state, depth, color) -> value from color's perspective

The windowed engines are called with the non-restrictive root window
(-bound, +bound), where bound defaults to the state class's SCORE_BOUND.
"""

from enum import Enum
from typing import Optional

from othello_search.state.base import GameState
from othello_search.search.stats import SearchStats
from othello_search.search.transposition import TranspositionTable
from othello_search.search.negamax import negamax, negamax_ab
from othello_search.search.scout import scout
from othello_search.search.negascout import negascout


class Algorithm(Enum):
    """Search engines, numbered as on the benchmark command line."""
    NEGAMAX = 1
    ALPHA_BETA = 2
    SCOUT = 3
    NEGASCOUT = 4

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: "str | int | Algorithm") -> "Algorithm":
        """
        Resolve an algorithm from its number, enum name or alias.

        Examples:
            >>> Algorithm.parse(2)
            <Algorithm.ALPHA_BETA: 2>
            >>> Algorithm.parse("negascout")
            <Algorithm.NEGASCOUT: 4>

        Raises:
            ValueError: If the value names no algorithm
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)

        key = str(value).strip().lower().replace("-", "_")
        if key.isdigit():
            return cls(int(key))
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(
            f"Unknown algorithm {value!r}; expected 1-4 or one of {sorted(_ALIASES)}"
        )


_DISPLAY_NAMES = {
    Algorithm.NEGAMAX: "Negamax (minmax version)",
    Algorithm.ALPHA_BETA: "Negamax (alpha-beta version)",
    Algorithm.SCOUT: "Scout",
    Algorithm.NEGASCOUT: "Negascout",
}

_ALIASES = {
    "negamax": Algorithm.NEGAMAX,
    "minmax": Algorithm.NEGAMAX,
    "alpha_beta": Algorithm.ALPHA_BETA,
    "alphabeta": Algorithm.ALPHA_BETA,
    "negamax_ab": Algorithm.ALPHA_BETA,
    "scout": Algorithm.SCOUT,
    "negascout": Algorithm.NEGASCOUT,
    "pvs": Algorithm.NEGASCOUT,
}


def run_search(
    algorithm: Algorithm,
    state: GameState,
    depth: int,
    color: int,
    stats: Optional[SearchStats] = None,
    transposition_table: Optional[TranspositionTable] = None,
    bound: Optional[int] = None,
) -> int:
    """
    Run one top-level search with the selected engine.

    Args:
        algorithm: Engine to run
        state: Root position
        depth: Search depth
        color: Player to move at the root, 1 for MAX, -1 for MIN
        stats: Optional counters (not reset here)
        transposition_table: Optional table the engine writes to
        bound: Absolute score bound for the root window (default: state.SCORE_BOUND)

    Returns:
        int: Value of the root from `color`'s perspective
    """
    if bound is None:
        bound = state.SCORE_BOUND

    if algorithm is Algorithm.NEGAMAX:
        return negamax(state, depth, color, stats, transposition_table)
    if algorithm is Algorithm.ALPHA_BETA:
        return negamax_ab(state, depth, -bound, bound, color, stats, transposition_table)
    if algorithm is Algorithm.SCOUT:
        return scout(state, depth, color, stats, transposition_table)
    return negascout(state, depth, -bound, bound, color, stats, transposition_table)
