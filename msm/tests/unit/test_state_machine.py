# msm/tests/unit/test_state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging

import pytest

from msm.core.errors import StateNotFoundError
from msm.core.filtered_states import FilteredState
from msm.core.filters import Event
from msm.core.messages import ANY, EMPTY, StringMessage
from msm.core.state_machine import DEFAULT_MAX_REDIRECTS, StateMachine
from msm.core.states import State
from msm.core.status import Status
from msm.core.transitions import Transition
from msm.interfaces.abc import Transitioner
from msm.runtime.graph import StateGraph

# -----------------------------------------------------------------------------
# TEST FIXTURES
# -----------------------------------------------------------------------------


@pytest.fixture
def machine(traversal_graph) -> StateMachine:
    machine = StateMachine(traversal_graph)
    machine.init()
    return machine


# -----------------------------------------------------------------------------
# CONFIGURATION TESTS
# -----------------------------------------------------------------------------


def test_machine_defaults() -> None:
    machine = StateMachine()
    assert isinstance(machine, Transitioner)
    assert isinstance(machine.transition_index, StateGraph)
    assert machine.max_redirects == DEFAULT_MAX_REDIRECTS
    assert machine.current_state is None
    assert machine.size() == 0


@pytest.mark.parametrize("value", [-1, 1.5, "3"])
def test_invalid_max_redirects(value) -> None:
    with pytest.raises(ValueError):
        StateMachine(max_redirects=value)


def test_init_uses_first_state(machine) -> None:
    assert machine.current_state == State("A")
    assert machine.get_current() is machine.current_state


def test_uninitialized_machine_ignores_messages() -> None:
    machine = StateMachine()
    machine.add(Transition("A", "1", "B"))
    assert machine.get_next("1") is None
    assert machine.current_state is None


def test_set_current(machine) -> None:
    machine.set_current("D")
    assert machine.current_state == State("D")
    machine.set_current(State("B"))
    assert machine.current_state is machine.find("B")


def test_set_current_unknown(machine) -> None:
    with pytest.raises(StateNotFoundError):
        machine.set_current("Z")
    with pytest.raises(ValueError):
        machine.set_current(None)


def test_remove_unknown_state(machine) -> None:
    with pytest.raises(StateNotFoundError):
        machine.remove_state("Z")


# -----------------------------------------------------------------------------
# TRAVERSAL TESTS
# -----------------------------------------------------------------------------


def test_traversal(machine) -> None:
    assert machine.get_next("1b") == State("B")
    assert machine.get_next("2") == State("C")
    assert machine.current_state.final


def test_unknown_message_keeps_state(machine) -> None:
    assert machine.get_next("unknown") is None
    assert machine.current_state == State("A")


def test_final_state_is_absorbing(machine) -> None:
    machine.set_current("E")
    assert machine.get_next("3") is None
    machine.add(Transition("A", ANY, "B"))
    assert machine.send(ANY).current_state == State("E")


def test_send_chains(machine) -> None:
    assert machine.send("1b").send("2").current_state == State("C")


def test_send_any_without_mapping_stays(machine) -> None:
    assert machine.send(ANY).current_state == State("A")


def test_next_sends_empty() -> None:
    machine = StateMachine()
    machine.add(Transition("A", EMPTY, "B"))
    machine.init()
    assert machine.next().current_state == State("B")


def test_any_fallback() -> None:
    machine = StateMachine()
    machine.add(Transition("A", "1", "B"))
    machine.add(Transition("A", ANY, "C"))
    machine.init()
    assert machine.get_next("2") == State("C")
    machine.set_current("A")
    assert machine.get_next("1") == State("B")


def test_prune_keeps_current(machine) -> None:
    machine.remove_all_transitions()
    machine.set_current("B")
    pruned = machine.prune()
    assert {s.name for s in pruned} == {"A", "C", "D", "E"}
    assert machine.transition_index.get_states() == [State("B")]


# -----------------------------------------------------------------------------
# FILTER TESTS
# -----------------------------------------------------------------------------


def test_departure_abort_keeps_state() -> None:
    machine = StateMachine()
    origin = FilteredState(State("A")).set_dispatch_handler(lambda c: Status.ABORT)
    machine.add(Transition(origin, "1", "B"))
    machine.init()
    assert machine.get_next("1") is None
    assert machine.current_state == State("A")


def test_arrival_abort_keeps_state() -> None:
    machine = StateMachine()
    target = FilteredState(State("B")).set_reception_handler(lambda c: Status.ABORT)
    machine.add(Transition("A", "1", target))
    machine.init()
    assert machine.get_next("1") is None
    assert machine.current_state == State("A")


def test_departure_redirect_resolves_from_same_state() -> None:
    dispatch_calls = []

    def redirect(context):
        dispatch_calls.append(context.message)
        return Status.forward(StringMessage("2"))

    machine = StateMachine()
    origin = FilteredState(State("A")).set_dispatch_handler(redirect, "1")
    machine.add_all([Transition(origin, "1", "B"), Transition("A", "2", "C")])
    machine.init()

    assert machine.get_next("1") == State("C")
    assert dispatch_calls == [StringMessage("1")]


def test_arrival_redirect_commits_intermediate_hop() -> None:
    events = []

    def forward(context):
        events.append((context.event, context.target.name))
        return Status.forward(StringMessage("next"))

    machine = StateMachine()
    middle = FilteredState(State("B")).set_reception_handler(forward, "1")
    machine.add_all([Transition("A", "1", middle), Transition("B", "next", "C")])
    machine.init()

    assert machine.get_next("1") == State("C")
    assert events == [(Event.ARRIVAL, "B")]


def test_failed_redirect_restores_start() -> None:
    machine = StateMachine()
    middle = FilteredState(State("B")).set_reception_handler(lambda c: Status.forward(StringMessage("missing")))
    machine.add(Transition("A", "1", middle))
    machine.init()

    assert machine.get_next("1") is None
    assert machine.current_state == State("A")


def test_redirect_loop_is_bounded(caplog) -> None:
    machine = StateMachine(max_redirects=5)
    looping = FilteredState(State("A")).set_reception_handler(lambda c: Status.forward(StringMessage("1")))
    machine.add(Transition(looping, "1", looping))
    machine.init()

    with caplog.at_level(logging.WARNING, logger="msm.core.state_machine"):
        assert machine.get_next("1") is None
    assert machine.current_state == State("A")
    assert "exceeded 5 redirects" in caplog.text


def test_zero_redirects_allows_plain_transitions() -> None:
    machine = StateMachine(max_redirects=0)
    machine.add(Transition("A", "1", "B"))
    machine.init()
    assert machine.get_next("1") == State("B")
