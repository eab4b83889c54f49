"""Tree Node for MCTS."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic

from mctree_src.mcts.state import DEFAULT_RNG, ActionT, StateT, shuffle_actions
from mctree_src.util.tree_node import TreeNode

if TYPE_CHECKING:
    from collections.abc import Iterator

    from mctree_src.mcts.state import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=False, slots=True)
class NodeStats:
    """Visit statistics accumulated by backpropagation."""

    value: float = 0.0  # sum of updates, not an average
    num_visits: int = 0


class MCTSNode(TreeNode, Generic[StateT, ActionT]):
    """
    A node in the Monte-Carlo Tree Search (MCTS) tree.

    Pairs a domain state with the action that produced it and accumulates
    visit statistics. Contains no selection or simulation policy: the search
    loop drives expand() and update() and walks parents for backpropagation.

    Legal actions are fetched from the state on the first expand() call,
    shuffled once with the node's random source, and then consumed in that
    order, one child per call.
    """

    def __init__(
        self,
        state: StateT,
        rng: RandomSource | None = None,
    ):
        """Initialize a root node from an initial state (children are built by expand)."""
        super().__init__()
        self.state: StateT = state
        self.action: ActionT | None = None
        self.actions: list[ActionT] | None = None  # undiscovered until first expansion
        self.stats = NodeStats()
        self.rng: RandomSource = rng if rng is not None else DEFAULT_RNG

    def expand(self) -> MCTSNode[StateT, ActionT] | None:
        """
        Add a child for the next untried action.

        Returns:
            The new child, or None if every discovered action already has a child
            (including the case of a state with no legal actions).
        """
        self._ensure_alive()
        if self.actions is None:
            actions = list(self.state.get_actions())
            shuffle_actions(actions, self.rng)
            self.actions = actions
            logger.debug("Discovered %d actions at depth %d", len(actions), self.depth)

        if len(self.children) >= len(self.actions):
            return None

        return self._spawn_child(self.actions[len(self.children)])

    def _spawn_child(self, action: ActionT) -> MCTSNode[StateT, ActionT]:
        """Clone this state, apply action to the clone, and add the result as a child."""
        child: MCTSNode[StateT, ActionT] = type(self)(copy.deepcopy(self.state), rng=self.rng)
        child.action = action
        child.state.apply_action(action)
        self._adopt(child)
        logger.debug(
            "Expanded child %d/%d at depth %d", len(self.children), len(self.actions), child.depth
        )
        return child

    def update(self, increment: float) -> None:
        """Add increment to the accumulated value and count one visit."""
        self._ensure_alive()
        self.stats.value += increment
        self.stats.num_visits += 1

    def get_state(self) -> StateT:
        """Return the state of this node."""
        self._ensure_alive()
        return self.state

    def get_action(self) -> ActionT | None:
        """Return the action that led to this state (None for the root)."""
        self._ensure_alive()
        return self.action

    def get_actions(self) -> tuple[ActionT, ...] | None:
        """Return the discovered actions in expansion order, or None before the first expansion."""
        self._ensure_alive()
        return tuple(self.actions) if self.actions is not None else None

    def is_fully_expanded(self) -> bool:
        """
        Return True if the node has children and every action has one.

        A node whose state has no legal actions never reports fully expanded;
        use is_exhausted() or is_terminal() to guard expansion loops.
        """
        self._ensure_alive()
        return bool(self.children) and len(self.children) == len(self.actions)

    def is_exhausted(self) -> bool:
        """Return True if actions were discovered and expand() can add no more children."""
        self._ensure_alive()
        return self.actions is not None and len(self.children) == len(self.actions)

    def is_terminal(self) -> bool:
        """Return True if this node ends the search (i.e. the game)."""
        self._ensure_alive()
        return self.state.is_terminal()

    def get_num_visits(self) -> int:
        """Return the number of times the node has been updated."""
        self._ensure_alive()
        return self.stats.num_visits

    def get_value(self) -> float:
        """Return the accumulated value."""
        self._ensure_alive()
        return self.stats.value

    def get_parent(self) -> MCTSNode[StateT, ActionT] | None:
        """Return the parent, or None for the root."""
        return super().get_parent()  # type: ignore[return-value]

    def get_child(self, i: int) -> MCTSNode[StateT, ActionT]:
        """Return the i'th child in expansion order."""
        return super().get_child(i)  # type: ignore[return-value]

    def get_children(self) -> Iterator[MCTSNode[StateT, ActionT]]:
        """Return an iterator over the children in expansion order."""
        return super().get_children()  # type: ignore[return-value]

    def __repr__(self) -> str:
        """Return a string representation of the MCTS node."""
        if self._released:
            return "MCTSNode(released)"
        num_actions = len(self.actions) if self.actions is not None else None
        return (
            f"MCTSNode(depth={self.depth}, action={self.action!r}, "
            f"visits={self.stats.num_visits}, value={self.stats.value}, "
            f"children={len(self.children)}/{num_actions})"
        )
