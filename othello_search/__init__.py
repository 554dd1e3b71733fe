"""
Othello Search

A library of adversarial game-tree search algorithms for two-player,
zero-sum, perfect-information games, with a benchmark that compares them
along a principal variation of 6x6 Othello.

## Architecture

The library is organized into three modules:

1. **state**: Game positions
   - Abstract GameState interface (swappable design)
   - OthelloState: 6x6 Othello reference game
   - numpy plane encoding and text rendering

2. **search**: Search algorithms
   - Negamax (no pruning, correctness oracle)
   - Negamax with alpha-beta pruning
   - Scout
   - Negascout (principal variation search)
   - Node counters and an optional transposition table

3. **benchmark**: Principal-variation benchmark
   - Replays a line of play and searches every position
   - Reports value, expanded/generated nodes, time and nodes/second

## Quick Start

### As a Python Library

```python
from othello_search.state import OthelloState
from othello_search.search import negascout, SearchStats

state = OthelloState.initial()
stats = SearchStats()
value = negascout(state, 6, -36, 36, 1, stats)
print(f"value={value} expanded={stats.expanded} generated={stats.generated}")
```

### As a Benchmark

```bash
python -m othello_search.benchmark 4 --depth 33
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from othello_search.state import GameState, OthelloState
from othello_search.search import (
    SearchStats,
    negamax,
    negamax_ab,
    scout,
    negascout,
    Algorithm,
    run_search,
)

__all__ = [
    'GameState',
    'OthelloState',
    'SearchStats',
    'negamax',
    'negamax_ab',
    'scout',
    'negascout',
    'Algorithm',
    'run_search',
]
