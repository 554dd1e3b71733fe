"""
Unit Tests for Transposition Table

Tests for storage rules, capacity handling and the engines' writes.
"""

import pytest

from othello_search.search import SearchStats, Algorithm, run_search
from othello_search.search.negamax import negamax, negamax_ab
from othello_search.search.transposition import (
    TranspositionTable,
    TranspositionTableFull,
    NodeType,
    bound_type,
)
from othello_search.state import OthelloState
from tests.helpers import classic_tree


class TestTranspositionTable:
    """Tests for TranspositionTable storage rules."""

    def test_store_and_lookup(self):
        """Test basic store and lookup operations."""
        tt = TranspositionTable(max_size=1000)

        tt.store(12345, 1, depth=5, value=15, node_type=NodeType.EXACT)
        entry = tt.lookup(12345, 1, depth=5)

        assert entry is not None, "Should find stored entry"
        assert entry.value == 15, "Value should match"
        assert entry.depth == 5, "Depth should match"
        assert entry.node_type == NodeType.EXACT, "Node type should match"

    def test_colors_are_separate(self):
        """The same position stores one entry per side to move."""
        tt = TranspositionTable()

        tt.store(42, 1, depth=3, value=7, node_type=NodeType.EXACT)
        tt.store(42, -1, depth=3, value=-7, node_type=NodeType.EXACT)

        assert tt.lookup(42, 1).value == 7
        assert tt.lookup(42, -1).value == -7
        assert len(tt) == 2
        assert tt.size(1) == 1 and tt.size(-1) == 1

    def test_depth_replacement(self):
        """Test that higher depth entries replace lower depth entries."""
        tt = TranspositionTable()

        tt.store(12345, 1, depth=3, value=10, node_type=NodeType.EXACT)
        tt.store(12345, 1, depth=5, value=15, node_type=NodeType.EXACT)
        tt.store(12345, 1, depth=4, value=99, node_type=NodeType.EXACT)

        entry = tt.lookup(12345, 1)
        assert entry.depth == 5, "Should keep higher depth entry"
        assert entry.value == 15, "Value should be from depth 5 entry"

    def test_insufficient_depth_returns_none(self):
        tt = TranspositionTable()
        tt.store(12345, 1, depth=4, value=10, node_type=NodeType.EXACT)

        assert tt.lookup(12345, 1, depth=6) is None
        assert tt.lookup(12345, 1, depth=4) is not None

    def test_min_depth_threshold(self):
        """Entries searched shallower than min_depth are not stored."""
        tt = TranspositionTable(min_depth=32)

        tt.store(1, 1, depth=31, value=0, node_type=NodeType.EXACT)
        tt.store(2, 1, depth=32, value=0, node_type=NodeType.EXACT)

        assert tt.lookup(1, 1) is None
        assert tt.lookup(2, 1) is not None

    def test_full_table_raises(self):
        tt = TranspositionTable(max_size=2)
        tt.store(1, 1, depth=1, value=0, node_type=NodeType.EXACT)
        tt.store(2, -1, depth=1, value=0, node_type=NodeType.EXACT)

        # Replacing an existing entry is still allowed
        tt.store(1, 1, depth=2, value=5, node_type=NodeType.EXACT)
        assert tt.lookup(1, 1).value == 5

        with pytest.raises(TranspositionTableFull):
            tt.store(3, 1, depth=1, value=0, node_type=NodeType.EXACT)

    def test_full_table_is_memory_error(self):
        assert issubclass(TranspositionTableFull, MemoryError)

    def test_invalid_max_size(self):
        with pytest.raises(ValueError):
            TranspositionTable(max_size=0)

    def test_clear_table(self):
        """Test that clearing table removes all entries."""
        tt = TranspositionTable()

        for i in range(10):
            tt.store(i, 1 if i % 2 else -1, depth=5, value=i, node_type=NodeType.EXACT)
        assert len(tt) == 10, "Should have 10 entries"

        tt.clear()

        assert len(tt) == 0, "Table should be empty after clear"
        assert tt.stores == 0, "Stores should be reset"

    def test_stats(self):
        tt = TranspositionTable()
        tt.store(1, 1, depth=1, value=0, node_type=NodeType.EXACT)
        tt.store(2, -1, depth=1, value=0, node_type=NodeType.EXACT)
        tt.store(1, 1, depth=3, value=4, node_type=NodeType.EXACT)

        stats = tt.get_stats()
        assert stats == {"entries": 2, "max_entries": 1, "min_entries": 1, "stores": 3}
        assert "entries=2" in repr(tt)


class TestBoundType:

    @pytest.mark.parametrize("value, expected", [
        (-5, NodeType.UPPER_BOUND),
        (0, NodeType.UPPER_BOUND),
        (3, NodeType.EXACT),
        (10, NodeType.LOWER_BOUND),
        (12, NodeType.LOWER_BOUND),
    ])
    def test_classification(self, value, expected):
        assert bound_type(value, 0, 10) is expected


class TestEngineWrites:
    """The engines record their values but never read them back."""

    def test_negamax_stores_root_value(self):
        state = classic_tree()
        tt = TranspositionTable()

        value = negamax(state, 2, 1, transposition_table=tt)
        entry = tt.lookup(state.hash(), 1)

        assert entry is not None
        assert entry.value == value == 3
        assert entry.node_type == NodeType.EXACT
        assert len(tt) == 4, "Root and three inner nodes; leaves are not stored"

    def test_alpha_beta_stores_bounds(self):
        state = classic_tree()
        tt = TranspositionTable()

        negamax_ab(state, 2, -100, 100, 1, transposition_table=tt)
        pruned = tt.lookup(state.children[1].hash(), -1)

        # B was cut off after its first leaf, so its value is only a lower bound
        assert pruned.node_type == NodeType.LOWER_BOUND
        assert tt.lookup(state.hash(), 1).node_type == NodeType.EXACT

    def test_table_does_not_change_results_or_counts(self):
        state = OthelloState.initial()

        for engine in Algorithm:
            plain = SearchStats()
            value = run_search(engine, state, 3, 1, plain)

            with_tt = SearchStats()
            tt = TranspositionTable()
            value_tt = run_search(engine, state, 3, 1, with_tt, tt)

            assert value == value_tt
            assert plain == with_tt
            assert len(tt) > 0
