# msm/tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from msm.core.states import State
from msm.core.transitions import Transition
from msm.runtime.graph import StateGraph


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def state_a() -> State:
    return State("A")


@pytest.fixture
def state_b() -> State:
    return State("B")


@pytest.fixture
def graph() -> StateGraph:
    """An empty graph with the default validator."""
    return StateGraph()


@pytest.fixture
def traversal_graph() -> StateGraph:
    """
    A -1b-> B, A -1c-> C(final), B -2-> C, D -3-> E(final).
    """
    g = StateGraph()
    c = State("C", final=True)
    e = State("E", final=True)
    g.add(Transition("A", "1b", "B"))
    g.add(Transition("A", "1c", c))
    g.add(Transition("B", "2", c))
    g.add(Transition("D", "3", e))
    return g


@pytest.fixture
def removal_graph() -> StateGraph:
    """A -1-> B, A -2-> D, B -3-> D, C -4-> D."""
    g = StateGraph()
    g.add_all(
        [
            Transition("A", "1", "B"),
            Transition("A", "2", "D"),
            Transition("B", "3", "D"),
            Transition("C", "4", "D"),
        ]
    )
    return g
