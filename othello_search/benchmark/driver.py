"""
Principal-Variation Benchmark Driver

Replays a fixed line of play (the principal variation, PV) to build a
sequence of positions, then searches every position with one engine and
records value, node counts and speed.

Procedure:
    1. Replay the PV from the initial position; black (the maximizer) moves
       first and the players strictly alternate.
    2. Walk the resulting positions backwards, from the end of the game to
       the initial position, so the cheap positions come first.
    3. For each position: fresh counters, cleared transposition table,
       timed top-level search.

Evaluation Metrics:
    - value: Minimax value of the position (mover's perspective)
    - #expanded / #generated: Node counts from SearchStats
    - seconds, #generated/second: Wall time and generation speed
"""

import logging
import sys
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from tqdm import tqdm

from othello_search.state.base import GameState
from othello_search.state.othello import OthelloState
from othello_search.state.representation import render_state
from othello_search.search.registry import run_search
from othello_search.search.stats import SearchStats
from othello_search.search.transposition import TranspositionTable
from othello_search.benchmark.config import BenchmarkConfig

logger = logging.getLogger(__name__)

PV_SENTINEL = -1

# Stack frames kept free on top of the search depth
RECURSION_HEADROOM = 200


class IllegalMoveError(ValueError):
    """Raised when a principal variation contains an unplayable move."""


@dataclass
class BenchmarkResult:
    """
    Result of searching a single position of the line.

    Attributes:
        label: Position number as printed (counts down to 1 at the initial position)
        plies: Number of moves played to reach the position
        color: Player to move, 1 for MAX (black), -1 for MIN (white)
        value: Search result from the mover's perspective (None if aborted)
        expanded: Expanded node count
        generated: Generated node count
        seconds: Wall time of the search
        tt_aborted: True if the search was abandoned because the
            transposition table ran out of memory
    """
    label: int
    plies: int
    color: int
    value: Optional[int]
    expanded: int
    generated: int
    seconds: float
    tt_aborted: bool = False

    @property
    def mover_name(self) -> str:
        return "Black" if self.color == 1 else "White"

    @property
    def absolute_value(self) -> Optional[int]:
        """Value from black's perspective."""
        if self.value is None:
            return None
        return self.color * self.value

    @property
    def nodes_per_second(self) -> float:
        return self.generated / self.seconds if self.seconds > 0 else 0.0

    def format(self) -> str:
        value = "n/a" if self.value is None else str(self.absolute_value)
        line = (
            f"{self.label}. {self.mover_name} moves: value={value}, "
            f"#expanded={self.expanded}, #generated={self.generated}, "
            f"seconds={self.seconds:.6g}, #generated/second={self.nodes_per_second:.6g}"
        )
        if self.tt_aborted:
            line += " (transposition table exhausted)"
        return line


def extract_principal_variation(initial: GameState, moves: Sequence[int]) -> List[GameState]:
    """
    Replay a line of play.

    Args:
        initial: Starting position
        moves: Move indices, maximizer first, strictly alternating; an
            optional -1 terminates the line

    Returns:
        List of positions after 0, 1, ..., n moves

    Raises:
        IllegalMoveError: If a move is out of range or not legal
    """
    states = [initial]
    state = initial
    for ply, move in enumerate(moves):
        if move == PV_SENTINEL:
            break
        maximizer_to_move = ply % 2 == 0
        if not 0 <= move < state.DIM or not state.is_legal_move(maximizer_to_move, move):
            player = "maximizer" if maximizer_to_move else "minimizer"
            raise IllegalMoveError(f"Move {move} at ply {ply} is not legal for the {player}")
        state = state.apply_move(maximizer_to_move, move)
        states.append(state)
    return states


def default_line(initial: GameState) -> List[int]:
    """
    Build a deterministic line by always playing the lowest legal move index.

    The line stops at the end of the game or at the first position where the
    player to move would have to pass, so the players strictly alternate.
    """
    moves = []
    state = initial
    maximizer_to_move = True
    while not state.is_terminal():
        legal = state.legal_moves(maximizer_to_move)
        if not legal:
            break
        moves.append(legal[0])
        state = state.apply_move(maximizer_to_move, legal[0])
        maximizer_to_move = not maximizer_to_move
    return moves


def ensure_recursion_limit(depth: int):
    """Raise the interpreter recursion limit if `depth` plies might not fit."""
    needed = depth + RECURSION_HEADROOM
    if sys.getrecursionlimit() < needed:
        logger.debug(f"Raising recursion limit to {needed}")
        sys.setrecursionlimit(needed)


def run_benchmark(
    config: BenchmarkConfig,
    states: Optional[List[GameState]] = None,
    report: Optional[Callable[[str], None]] = None,
) -> List[BenchmarkResult]:
    """
    Search every position of a line with the configured engine.

    Args:
        config: Benchmark configuration
        states: Positions after 0..n moves (default: replay the configured
            or default line from the initial Othello position)
        report: Optional sink for report lines (e.g. tqdm.write)

    Returns:
        List of BenchmarkResult, in search order (end of the line first)
    """
    if states is None:
        initial = OthelloState.initial()
        moves = config.principal_variation
        if moves is None:
            moves = default_line(initial)
        states = extract_principal_variation(initial, moves)
        logger.info(f"Extracted principal variation (PV) with {len(states) - 1} plays")

    npv = len(states) - 1
    logger.debug(
        f"Algorithm: {config.algorithm.display_name}"
        f"{' w/ transposition table' if config.use_tt else ''}, depth={config.depth}"
    )

    tt = None
    if config.use_tt:
        tt = TranspositionTable(max_size=config.tt_max_size, min_depth=config.tt_min_depth)

    ensure_recursion_limit(config.depth)

    count = npv + 1
    if config.max_positions is not None:
        count = min(count, config.max_positions)

    results = []
    for i in tqdm(range(count), desc=config.algorithm.display_name, disable=not config.progress):
        plies = npv - i
        state = states[plies]
        color = 1 if plies % 2 == 0 else -1

        if report is not None and config.show_boards:
            report(render_state(state))

        if tt is not None:
            tt.clear()
        stats = SearchStats()

        value = None
        aborted = False
        start_time = time.perf_counter()
        try:
            value = run_search(config.algorithm, state, config.depth, color, stats, tt)
        except MemoryError:
            if tt is None:
                raise
            logger.warning(
                f"Transposition table exhausted: size TT[max]={tt.size(1)}, "
                f"size TT[min]={tt.size(-1)}; disabling it"
            )
            tt.clear()
            tt = None
            aborted = True
        elapsed_time = time.perf_counter() - start_time

        result = BenchmarkResult(
            label=npv + 1 - i,
            plies=plies,
            color=color,
            value=value,
            expanded=stats.expanded,
            generated=stats.generated,
            seconds=elapsed_time,
            tt_aborted=aborted,
        )
        results.append(result)
        logger.debug(result.format())
        if report is not None:
            report(result.format())

    return results


def summarize(results: List[BenchmarkResult]) -> dict:
    """Aggregate node counts and time over a benchmark run."""
    total_time = sum(r.seconds for r in results)
    total_generated = sum(r.generated for r in results)
    return {
        'positions': len(results),
        'expanded': sum(r.expanded for r in results),
        'generated': total_generated,
        'seconds': total_time,
        'nodes_per_sec': total_generated / total_time if total_time > 0 else 0,
        'aborted': sum(1 for r in results if r.tt_aborted),
    }
