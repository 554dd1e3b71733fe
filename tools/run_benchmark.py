#!/usr/bin/env python3
"""
Principal-Variation Benchmark Runner

Runs one search engine on every position of a 6x6 Othello line of play and
prints value, node counts and speed per position.

Usage:
    python tools/run_benchmark.py [1|2|3|4] [--depth 33] [--tt] [--verbose]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from othello_search.benchmark.cli import main


if __name__ == "__main__":
    sys.exit(main())
