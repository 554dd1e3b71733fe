"""
6x6 Othello Position

This module implements the reference game for the search engines: Othello
played on a 6x6 board. Black moves first and is the maximizer.

Board Layout (row-major move indices):
     0  1  2  3  4  5
     6  7  8  9 10 11
    12 13 14 15 16 17
    18 19 20 21 22 23
    24 25 26 27 28 29
    30 31 32 33 34 35

Initial Position:
    - White discs on 14 and 21
    - Black discs on 15 and 20

Representation:
    Two bitmasks (one bit per cell). A move "outflanks" when it brackets at
    least one straight line of opposing discs between the new disc and an
    existing disc of the mover; every bracketed disc is flipped.

Evaluation:
    static_value() = black discs - white discs, bounded by the cell count.

References:
    - Othello rules: https://www.worldothello.org/about/about-othello/othello-rules
"""

import random
from dataclasses import dataclass

from othello_search.state.base import GameState
from othello_search.state.representation import render_state

BOARD_SIZE = 6
NUM_CELLS = BOARD_SIZE * BOARD_SIZE
FULL_BOARD = (1 << NUM_CELLS) - 1

# (row delta, column delta) for the eight rays
DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

# ============================================================================
# Zobrist Hashing
# ============================================================================
# One random 64-bit number per (color, cell). Hash = XOR over occupied cells.
# The side to move is not part of the position, so it is not hashed; the
# transposition table keeps one table per color instead.
# ============================================================================

_zobrist_rng = random.Random(42)  # Fixed seed for reproducibility

# [0] = black, [1] = white
ZOBRIST_DISCS = [
    [_zobrist_rng.getrandbits(64) for _ in range(NUM_CELLS)] for _ in range(2)
]


def _flips(me: int, opp: int, pos: int) -> int:
    """
    Compute the discs flipped if `me` plays on `pos`.

    Args:
        me: Bitmask of the mover's discs
        opp: Bitmask of the opponent's discs
        pos: Target cell (assumed empty)

    Returns:
        Bitmask of opponent discs that would be flipped (0 if illegal)
    """
    row, col = divmod(pos, BOARD_SIZE)
    flips = 0
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        line = 0
        while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
            bit = 1 << (r * BOARD_SIZE + c)
            if opp & bit:
                line |= bit
            else:
                if me & bit:
                    flips |= line
                break
            r += dr
            c += dc
    return flips


@dataclass(frozen=True)
class OthelloState(GameState):
    """
    Immutable 6x6 Othello position.

    Attributes:
        black: Bitmask of black discs (maximizer)
        white: Bitmask of white discs (minimizer)
    """

    black: int
    white: int

    DIM = NUM_CELLS
    SCORE_BOUND = NUM_CELLS
    SIZE = BOARD_SIZE

    @classmethod
    def initial(cls) -> "OthelloState":
        """Standard starting position."""
        return cls(black=(1 << 15) | (1 << 20), white=(1 << 14) | (1 << 21))

    def _sides(self, maximizer_to_move: bool) -> tuple[int, int]:
        if maximizer_to_move:
            return self.black, self.white
        return self.white, self.black

    def is_free(self, move_index: int) -> bool:
        return not (self.black | self.white) >> move_index & 1

    def is_legal_move(self, maximizer_to_move: bool, move_index: int) -> bool:
        if not self.is_free(move_index):
            return False
        me, opp = self._sides(maximizer_to_move)
        return _flips(me, opp, move_index) != 0

    def apply_move(self, maximizer_to_move: bool, move_index: int) -> "OthelloState":
        me, opp = self._sides(maximizer_to_move)
        flips = _flips(me, opp, move_index)
        me |= flips | (1 << move_index)
        opp &= ~flips
        if maximizer_to_move:
            return OthelloState(black=me, white=opp)
        return OthelloState(black=opp, white=me)

    def is_terminal(self) -> bool:
        if (self.black | self.white) == FULL_BOARD:
            return True
        return not (self.has_legal_move(True) or self.has_legal_move(False))

    def disc_counts(self) -> tuple[int, int]:
        """Return (black discs, white discs)."""
        return self.black.bit_count(), self.white.bit_count()

    def static_value(self) -> int:
        black, white = self.disc_counts()
        return black - white

    def hash(self) -> int:
        h = 0
        for cell in range(NUM_CELLS):
            bit = 1 << cell
            if self.black & bit:
                h ^= ZOBRIST_DISCS[0][cell]
            elif self.white & bit:
                h ^= ZOBRIST_DISCS[1][cell]
        return h

    def __hash__(self) -> int:
        return self.hash()

    def __str__(self) -> str:
        return render_state(self)
