"""
Hand-built game trees for search tests.

TreeState is an explicit tree node: every player may play any of its
children, except that a node can be `blocked` for one player, who then
has to pass. Leaves are terminal.
"""

import random
from typing import Optional, Sequence

from othello_search.state.base import GameState


class TreeState(GameState):
    """Explicit game-tree node with a fixed static value."""

    DIM = 4
    SCORE_BOUND = 100

    def __init__(
        self,
        value: int = 0,
        children: Sequence["TreeState"] = (),
        blocked: Optional[bool] = None,
    ):
        """
        Args:
            value: Static value (maximizer-positive)
            children: Successors, reachable through move indices 0..len-1
            blocked: If True the maximizer must pass here, if False the
                minimizer must pass, if None nobody is blocked
        """
        assert len(children) <= self.DIM
        self.value = value
        self.children = tuple(children)
        self.blocked = blocked

    def is_terminal(self) -> bool:
        return not self.children

    def static_value(self) -> int:
        return self.value

    def is_legal_move(self, maximizer_to_move: bool, move_index: int) -> bool:
        if self.blocked is not None and self.blocked == maximizer_to_move:
            return False
        return move_index < len(self.children)

    def apply_move(self, maximizer_to_move: bool, move_index: int) -> "TreeState":
        return self.children[move_index]

    def hash(self) -> int:
        return id(self)


def leaf(value: int) -> TreeState:
    return TreeState(value)


def node(*children: TreeState, value: int = 0, blocked: Optional[bool] = None) -> TreeState:
    return TreeState(value, children, blocked)


def classic_tree() -> TreeState:
    """
    Two-ply textbook tree:

        root: A [3, 12, 8], B [2, 4, 6], C [14, 5, 2]

    Maximizer to move: max(min) = 3. Minimizer to move: min(max) = 6.
    """
    return node(
        node(leaf(3), leaf(12), leaf(8), value=1),
        node(leaf(2), leaf(4), leaf(6), value=-1),
        node(leaf(14), leaf(5), leaf(2), value=4),
        value=2,
    )


def random_tree(
    rng: random.Random,
    depth: int,
    max_branching: int = 3,
    value_range: int = 50,
    block_probability: float = 0.15,
) -> TreeState:
    """
    Build a random tree of at most `depth` plies.

    Inner nodes carry their own random static value, so searches with a
    smaller depth budget than the tree see meaningful cut-off values.
    """
    value = rng.randint(-value_range, value_range)
    if depth == 0:
        return leaf(value)

    branching = rng.randint(0, max_branching)
    if branching == 0:
        return leaf(value)

    children = [
        random_tree(rng, depth - 1, max_branching, value_range, block_probability)
        for _ in range(branching)
    ]
    blocked = None
    if rng.random() < block_probability:
        blocked = rng.random() < 0.5
    return TreeState(value, children, blocked)
