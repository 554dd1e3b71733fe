"""
Abstract Game State Interface

This module defines the abstract base class for all game positions the
search engines can explore. By defining a common interface, we can swap
between games without modifying the search algorithms.

Key Principles:
    1. States are immutable (apply_move returns a new state)
    2. static_value() is always from the maximizer's perspective
    3. Positive = maximizer advantage, Negative = minimizer advantage
    4. The side to move is NOT part of the state; the search tracks it

Convention:
    - Move indices are integers in [0, DIM)
    - The maximizer plays with color = +1, the minimizer with color = -1
    - maximizer_to_move == (color == 1)
"""

from abc import ABC, abstractmethod


class GameState(ABC):
    """
    Abstract base class for game positions.

    All game implementations must inherit from this class and implement the
    abstract methods. This ensures compatibility with the search algorithms,
    which only ever probe move indices in range(DIM).

    Attributes:
        DIM: Number of move-index slots probed per ply
        SCORE_BOUND: Absolute bound on static_value(), used for the
            non-restrictive root window of the windowed searches
    """

    DIM: int = 0
    SCORE_BOUND: int = 0

    @abstractmethod
    def is_terminal(self) -> bool:
        """
        Check if no further moves are possible for either player.

        Returns:
            bool: True if the game is over
        """
        pass

    @abstractmethod
    def static_value(self) -> int:
        """
        Evaluate the position from the maximizer's perspective.

        Returns:
            int: Score in [-SCORE_BOUND, SCORE_BOUND]
        """
        pass

    @abstractmethod
    def is_legal_move(self, maximizer_to_move: bool, move_index: int) -> bool:
        """
        Check whether the indexed move is playable by the given player.

        Args:
            maximizer_to_move: True if the maximizer is the player to move
            move_index: Move slot in [0, DIM)

        Returns:
            bool: True if the move is legal
        """
        pass

    @abstractmethod
    def apply_move(self, maximizer_to_move: bool, move_index: int) -> "GameState":
        """
        Produce the successor position. Never mutates self.

        Args:
            maximizer_to_move: True if the maximizer is the player to move
            move_index: A legal move slot in [0, DIM)

        Returns:
            GameState: The resulting position
        """
        pass

    @abstractmethod
    def hash(self) -> int:
        """Stable 64-bit hash of the position (for transposition tables)."""
        pass

    def legal_moves(self, maximizer_to_move: bool) -> list[int]:
        """List every legal move index for the given player."""
        return [
            pos for pos in range(self.DIM)
            if self.is_legal_move(maximizer_to_move, pos)
        ]

    def has_legal_move(self, maximizer_to_move: bool) -> bool:
        """Check if the given player has at least one legal move."""
        return any(
            self.is_legal_move(maximizer_to_move, pos) for pos in range(self.DIM)
        )

    def __hash__(self) -> int:
        return self.hash()

    def __repr__(self) -> str:
        """String representation of state."""
        return f"{self.__class__.__name__}(value={self.static_value()})"
