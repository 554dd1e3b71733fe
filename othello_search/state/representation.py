"""
Board Representation Utilities

This module converts Othello positions into numpy arrays and text, for
inspection, debugging and the benchmark's optional board dumps.

2-Channel Representation:
    0: Black discs
    1: White discs

Each channel is a SIZE*SIZE binary mask where 1 indicates disc presence.

Board Orientation:
    - Row 0 = top row (move indices 0..SIZE-1)
    - Column 0 = left column
"""

import numpy as np
from typing import Tuple

# Characters used by render_state
BLACK_CHAR = "x"
WHITE_CHAR = "o"
EMPTY_CHAR = "."


def index_to_coordinates(move_index: int, size: int) -> Tuple[int, int]:
    """
    Convert a row-major move index to (row, column) coordinates.

    Args:
        move_index: Cell index (0 to size*size - 1)
        size: Board side length

    Returns:
        Tuple of (row, column)

    Example:
        >>> index_to_coordinates(14, 6)
        (2, 2)
    """
    return divmod(move_index, size)


def coordinates_to_index(row: int, col: int, size: int) -> int:
    """
    Convert (row, column) coordinates to a row-major move index.

    Example:
        >>> coordinates_to_index(3, 3, 6)
        21
    """
    return row * size + col


def mask_to_array(mask: int, size: int) -> np.ndarray:
    """Unpack a cell bitmask into a (size, size) uint8 array."""
    cells = size * size
    bits = [(mask >> i) & 1 for i in range(cells)]
    return np.array(bits, dtype=np.uint8).reshape(size, size)


def state_to_planes(state) -> np.ndarray:
    """
    Convert a position to a (2, SIZE, SIZE) array.

    Args:
        state: Position exposing `black`, `white` bitmasks and `SIZE`

    Returns:
        np.ndarray of dtype uint8
    """
    size = state.SIZE
    planes = np.zeros((2, size, size), dtype=np.uint8)
    planes[0] = mask_to_array(state.black, size)
    planes[1] = mask_to_array(state.white, size)
    return planes


def render_state(state) -> str:
    """
    Render a position as text, one row per line, with column/row labels.

    Example (initial 6x6 position):
          0 1 2 3 4 5
        0 . . . . . .
        1 . . . . . .
        2 . . o x . .
        3 . . x o . .
        4 . . . . . .
        5 . . . . . .
    """
    planes = state_to_planes(state)
    size = planes.shape[1]

    lines = ["  " + " ".join(str(c) for c in range(size))]
    for row in range(size):
        chars = []
        for col in range(size):
            if planes[0, row, col]:
                chars.append(BLACK_CHAR)
            elif planes[1, row, col]:
                chars.append(WHITE_CHAR)
            else:
                chars.append(EMPTY_CHAR)
        lines.append(f"{row} " + " ".join(chars))
    return "\n".join(lines)
