"""
Transposition Table

This module implements an optional transposition table (TT): a hash table
recording the values the engines computed for positions. The engines write
to it when one is supplied, but never consult it; the stored entries are
available for inspection and statistics after a search.

The side to move is not part of a position, so the table keeps one store per
color (+1 maximizer, -1 minimizer).

Capacity:
    The table may be bounded. Storing a new entry into a full table raises
    TranspositionTableFull, a MemoryError; the benchmark driver treats it like
    an allocation failure and disables the table for the remaining positions.

References:
    - Transposition Table: https://www.chessprogramming.org/Transposition_Table
"""

from enum import Enum
from typing import Optional, Dict


class NodeType(Enum):
    """
    Type of value stored for a position.

        - EXACT: The exact value (all moves searched inside the window)
        - LOWER_BOUND: Beta cutoff occurred (value >= beta)
        - UPPER_BOUND: No move raised alpha (value <= alpha)
    """
    EXACT = 0
    LOWER_BOUND = 1  # Value is at least this good
    UPPER_BOUND = 2  # Value is at most this good


class TranspositionTableFull(MemoryError):
    """Raised when storing a new entry would exceed the table capacity."""


class TTEntry:
    """
    Entry in the transposition table.

    Attributes:
        zobrist_hash: 64-bit hash of position
        depth: Remaining search depth of this entry
        value: Score from the perspective of the side to move
        node_type: EXACT, LOWER_BOUND, or UPPER_BOUND
    """

    __slots__ = ("zobrist_hash", "depth", "value", "node_type")

    def __init__(self, zobrist_hash: int, depth: int, value: int, node_type: NodeType):
        self.zobrist_hash = zobrist_hash
        self.depth = depth
        self.value = value
        self.node_type = node_type

    def __repr__(self) -> str:
        return (
            f"TTEntry(hash={self.zobrist_hash}, depth={self.depth}, "
            f"value={self.value}, type={self.node_type})"
        )


def bound_type(value: int, alpha: int, beta: int) -> NodeType:
    """
    Classify a windowed search result against its original window.

    Args:
        value: Value returned by the search
        alpha: Lower edge of the window the node was searched with
        beta: Upper edge of the window the node was searched with
    """
    if value <= alpha:
        return NodeType.UPPER_BOUND
    if value >= beta:
        return NodeType.LOWER_BOUND
    return NodeType.EXACT


class TranspositionTable:
    """
    Per-color store of searched position values.

    Attributes:
        max_size: Maximum number of entries over both colors (None = unbounded)
        min_depth: Entries searched with less remaining depth are not stored
        tables: One dictionary hash → TTEntry per color
    """

    def __init__(self, max_size: Optional[int] = None, min_depth: int = 0):
        """
        Initialize transposition table.

        Args:
            max_size: Maximum number of entries (default: unbounded)
            min_depth: Minimum remaining depth worth storing (default: 0)
        """
        if max_size is not None and max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")

        self.max_size = max_size
        self.min_depth = min_depth
        self.tables: Dict[int, Dict[int, TTEntry]] = {1: {}, -1: {}}
        self.stores = 0

    def store(self, zobrist_hash: int, color: int, depth: int, value: int, node_type: NodeType):
        """
        Store a position value.

        Args:
            zobrist_hash: Hash of the position
            color: Side to move (+1 or -1)
            depth: Remaining depth the value was computed with
            value: Score from `color`'s perspective
            node_type: EXACT, LOWER_BOUND, or UPPER_BOUND

        Raises:
            TranspositionTableFull: If a new entry would exceed max_size
        """
        if depth < self.min_depth:
            return

        table = self.tables[color]
        existing = table.get(zobrist_hash)
        if existing is not None:
            # Only replace if new depth >= old depth
            if depth < existing.depth:
                return
        elif self.max_size is not None and len(self) >= self.max_size:
            raise TranspositionTableFull(
                f"transposition table full ({self.max_size} entries)"
            )

        table[zobrist_hash] = TTEntry(zobrist_hash, depth, value, node_type)
        self.stores += 1

    def lookup(self, zobrist_hash: int, color: int, depth: int = 0) -> Optional[TTEntry]:
        """
        Look up a position.

        Args:
            zobrist_hash: Hash of the position
            color: Side to move (+1 or -1)
            depth: Only return entries searched to at least this depth

        Returns:
            TTEntry if found and deep enough, None otherwise
        """
        entry = self.tables[color].get(zobrist_hash)
        if entry is not None and entry.depth >= depth:
            return entry
        return None

    def clear(self):
        """Clear all entries from both tables."""
        for table in self.tables.values():
            table.clear()
        self.stores = 0

    def size(self, color: int) -> int:
        return len(self.tables[color])

    def __len__(self) -> int:
        return sum(len(table) for table in self.tables.values())

    def get_stats(self) -> Dict[str, int]:
        """Get statistics about transposition table usage."""
        return {
            'entries': len(self),
            'max_entries': self.size(1),
            'min_entries': self.size(-1),
            'stores': self.stores,
        }

    def __repr__(self) -> str:
        stats = self.get_stats()
        return (
            f"TranspositionTable(entries={stats['entries']}, "
            f"max={stats['max_entries']}, min={stats['min_entries']})"
        )
