"""Shared fixtures for the test suites."""

from __future__ import annotations

import random

import pytest
from toy_states import BranchingState, FixedActionsState


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for deterministic expansion order."""
    return random.Random(42)


@pytest.fixture
def abc_state() -> FixedActionsState:
    """Root state with exactly three legal actions."""
    return FixedActionsState(["A", "B", "C"])


@pytest.fixture
def terminal_state() -> FixedActionsState:
    """Terminal state with no legal actions."""
    return FixedActionsState([], terminal=True)


@pytest.fixture
def game_state() -> BranchingState:
    """Small game tree: 3 moves per turn, 2 turns."""
    return BranchingState(branching=3, max_depth=2)
