"""Capabilities a domain state must provide to be searched."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

import numpy as np

from mctree_src.util.config import get_key

if TYPE_CHECKING:
    from collections.abc import Sequence

ActionT = TypeVar("ActionT")

RandomSource = random.Random | np.random.Generator

# Process-wide source used when a root is built without an explicit rng
DEFAULT_RNG = random.Random(get_key("search.seed", None))  # noqa: S311


@runtime_checkable
class SearchState(Protocol[ActionT]):
    """
    A snapshot of the simulated world.

    States are cloned with ``copy.deepcopy`` when a child is created; a domain
    type that needs custom cloning defines ``__deepcopy__``.
    """

    def get_actions(self) -> Sequence[ActionT]:
        """Return the legal actions from this state (may be empty)."""
        ...

    def apply_action(self, action: ActionT) -> None:
        """Transition this state in place by applying action."""
        ...

    def is_terminal(self) -> bool:
        """Return True if no further play is possible from this state."""
        ...


StateT = TypeVar("StateT", bound=SearchState)


def shuffle_actions(actions: list[ActionT], rng: RandomSource) -> None:
    """Apply one uniform random permutation to actions, in place."""
    if isinstance(rng, np.random.Generator):
        order = rng.permutation(len(actions))
        actions[:] = [actions[i] for i in order]
    else:
        rng.shuffle(actions)
