"""
Benchmark Module

This module compares the search engines along a principal variation (PV):
the PV is replayed to build a sequence of positions, and every position is
searched with one engine while expanded/generated node counts, wall time
and nodes per second are recorded.

Key Components:
    - BenchmarkConfig: Engine selection, depth, TT and reporting settings
    - extract_principal_variation / default_line: Build the positions
    - run_benchmark: Search the positions, end of the line first
    - BenchmarkResult: Per-position value, counts and timing
"""

from othello_search.benchmark.config import BenchmarkConfig
from othello_search.benchmark.driver import (
    BenchmarkResult,
    IllegalMoveError,
    default_line,
    extract_principal_variation,
    run_benchmark,
    summarize,
)

__all__ = [
    'BenchmarkConfig',
    'BenchmarkResult',
    'IllegalMoveError',
    'default_line',
    'extract_principal_variation',
    'run_benchmark',
    'summarize',
]
