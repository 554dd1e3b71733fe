"""
Search Module

This module implements the game-tree search engines. All four depend only on
the GameState interface and share the same pass-move rule: a player without
legal moves passes, and the same position is searched one ply deeper with the
opponent to move.

Key Components:
    - negamax: Full-depth search without pruning (correctness oracle)
    - negamax_ab: Negamax with alpha-beta pruning
    - scout: Exact search driven by boolean threshold tests
    - negascout: Principal variation search (null-window probes + re-search)
    - SearchStats: Expanded/generated node counters
    - TranspositionTable: Optional per-color value store
    - Algorithm / run_search: Uniform selector used by the benchmark
"""

from othello_search.search.stats import SearchStats
from othello_search.search.negamax import negamax, negamax_ab
from othello_search.search.scout import scout, Comparator
from othello_search.search.negascout import negascout
from othello_search.search.transposition import TranspositionTable, TranspositionTableFull, NodeType
from othello_search.search.registry import Algorithm, run_search

__all__ = [
    'SearchStats',
    'negamax',
    'negamax_ab',
    'scout',
    'Comparator',
    'negascout',
    'TranspositionTable',
    'TranspositionTableFull',
    'NodeType',
    'Algorithm',
    'run_search',
]
