"""
Main entry point for running the principal-variation benchmark.

Usage:
    python -m othello_search.benchmark 4 --depth 10
"""

import sys

from othello_search.benchmark.cli import main

if __name__ == "__main__":
    sys.exit(main())
