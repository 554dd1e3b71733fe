"""
Command line front end for the principal-variation benchmark.

Usage:
    python -m othello_search.benchmark [ALGORITHM] [--depth 33] [--tt]
        [--pv 8,9,...] [--max-positions N] [--config benchmark.toml]

ALGORITHM is 1 (negamax), 2 (alpha-beta), 3 (scout) or 4 (negascout), or
one of their names.
"""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from othello_search.benchmark.config import BenchmarkConfig
from othello_search.benchmark.driver import IllegalMoveError, run_benchmark, summarize

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def parse_pv(text: str) -> List[int]:
    """Parse a comma-separated list of move indices."""
    return [int(move.strip()) for move in text.split(",") if move.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search every position of a principal variation and report node counts"
    )
    parser.add_argument(
        "algorithm",
        nargs="?",
        default=None,
        help="1: negamax, 2: alpha-beta, 3: scout, 4: negascout (default: 1)"
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Search depth (default: 33)"
    )
    parser.add_argument(
        "--tt",
        action="store_true",
        default=None,
        help="Record values in a transposition table"
    )
    parser.add_argument(
        "--tt-max-size",
        type=int,
        default=None,
        help="Maximum transposition table entries"
    )
    parser.add_argument(
        "--pv",
        type=str,
        default=None,
        help="Comma-separated move indices of the line (default: lowest-index line)"
    )
    parser.add_argument(
        "--max-positions",
        type=int,
        default=None,
        help="Only search this many positions, from the end of the line"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="benchmark.toml",
        help="TOML file with a [benchmark] table (default: benchmark.toml)"
    )
    parser.add_argument(
        "--show-boards",
        action="store_true",
        default=None,
        help="Print each position before searching it"
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> BenchmarkConfig:
    """Merge command line arguments over the TOML configuration."""
    return BenchmarkConfig.from_toml(
        args.config,
        algorithm=args.algorithm,
        depth=args.depth,
        use_tt=args.tt,
        tt_max_size=args.tt_max_size,
        principal_variation=parse_pv(args.pv) if args.pv is not None else None,
        max_positions=args.max_positions,
        show_boards=args.show_boards,
        progress=False if args.no_progress else None,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"Algorithm: {config.algorithm.display_name}"
          f"{' w/ transposition table' if config.use_tt else ''}")
    print("Moving along PV:")

    try:
        results = run_benchmark(config, report=tqdm.write)
    except IllegalMoveError as e:
        print(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        return 1
    except Exception:
        logger.exception("Error running benchmark")
        return 1

    summary = summarize(results)
    print("=" * 80)
    print(f"Positions: {summary['positions']}")
    print(f"Total expanded: {summary['expanded']:,}")
    print(f"Total generated: {summary['generated']:,}")
    print(f"Total time: {format_time(summary['seconds'])}")
    print(f"Generated/sec: {summary['nodes_per_sec']:,.0f}")
    if summary['aborted']:
        print(f"Positions aborted by transposition table exhaustion: {summary['aborted']}")
    print("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
