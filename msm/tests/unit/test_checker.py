# msm/tests/unit/test_checker.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from msm.core.checker import Envelope, StateTransitionChecker, TransitionChecker
from msm.core.filtered_states import FilteredState
from msm.core.filters import Event
from msm.core.messages import StringMessage
from msm.core.states import State
from msm.core.status import Status


@pytest.fixture
def checker() -> StateTransitionChecker:
    return StateTransitionChecker()


def test_base_checker_is_abstract() -> None:
    envelope = Envelope(State("A"), StringMessage("1"), State("B"))
    with pytest.raises(NotImplementedError):
        TransitionChecker().validate_departure(envelope)


def test_plain_states_proceed(checker) -> None:
    envelope = Envelope(State("A"), StringMessage("1"), State("B"))
    assert checker.validate_departure(envelope) == Status.PROCEED
    assert checker.validate_arrival(envelope) == Status.PROCEED


def test_departure_from_final_or_missing_origin_aborts(checker) -> None:
    assert checker.validate_departure(Envelope(State("A", final=True), StringMessage("1"), State("B"))) == Status.ABORT
    assert checker.validate_departure(Envelope(None, StringMessage("1"), State("B"))) == Status.ABORT


def test_filters_receive_phase_context(checker) -> None:
    contexts = []

    def record(context):
        contexts.append(context)
        return Status.PROCEED

    origin = FilteredState(State("A")).set_dispatch_handler(record)
    target = FilteredState(State("B")).set_reception_handler(record)
    envelope = Envelope(origin, StringMessage("1"), target)

    checker.validate_departure(envelope)
    checker.validate_arrival(envelope)

    assert [c.event for c in contexts] == [Event.DEPARTURE, Event.ARRIVAL]
    assert all(c.source == origin and c.target == target for c in contexts)
    assert contexts[0].message == StringMessage("1")


def test_filter_status_is_returned(checker) -> None:
    redirect = Status.forward(StringMessage("2"))
    target = FilteredState(State("B")).set_reception_handler(lambda c: redirect)
    assert checker.validate_arrival(Envelope(State("A"), StringMessage("1"), target)) is redirect
