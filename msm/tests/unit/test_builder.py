# msm/tests/unit/test_builder.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from msm.builder import StateMachineBuilder
from msm.core.errors import TransitionInitializationError
from msm.core.messages import EMPTY, StringMessage
from msm.core.state_machine import StateMachine
from msm.core.states import State
from msm.core.transitions import Transition
from msm.runtime.graph import StateGraph


def test_build_initializes_machine() -> None:
    machine = StateMachineBuilder().from_("A").to("B").on("1").from_("B").to("C").on("2").build()
    assert isinstance(machine, StateMachine)
    assert machine.current_state == State("A")
    assert machine.send("1").send("2").current_state == State("C")


def test_missing_on_uses_empty() -> None:
    machine = StateMachine.new_builder().from_("A").to("B").build()
    assert machine.transition_index.get_next(State("A"), EMPTY) == State("B")
    assert machine.next().current_state == State("B")


def test_pending_transition_completed_by_from() -> None:
    builder = StateMachineBuilder().from_("A").to("B").from_("B").to("C").on("x")
    machine = builder.build()
    assert machine.size() == 3
    assert machine.transition_index.get_next(State("A"), EMPTY) == State("B")


def test_self_loop() -> None:
    machine = StateMachineBuilder().self_loop("A").on("again").build()
    assert machine.get_next("again") == State("A")


def test_add_and_add_all() -> None:
    builder = StateMachineBuilder()
    builder.add(Transition("A", "1", "B")).add_all([Transition("B", StringMessage("2"), "C")])
    assert builder.build().size() == 3


def test_builder_uses_given_index() -> None:
    graph = StateGraph()
    StateMachineBuilder(graph).from_("A").to("B").on("1")
    assert graph.size() == 2


def test_builder_rejects_final_origin() -> None:
    with pytest.raises(TransitionInitializationError):
        StateMachineBuilder().from_(State("A", final=True)).to("B").on("1")


def test_empty_builder() -> None:
    machine = StateMachineBuilder().build()
    assert machine.current_state is None
