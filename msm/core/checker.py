# msm/core/checker.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from msm.core.filters import Context, Event, MessageFilter
from msm.core.messages import Message
from msm.core.states import State
from msm.core.status import Status

if TYPE_CHECKING:
    from msm.interfaces.abc import TransitionIndex


@dataclass(frozen=True)
class Envelope:
    """
    A single resolution attempt: the candidate hop from origin to target on a
    message, together with the index it was resolved against.
    """

    origin: Optional[State]
    message: Message
    target: Optional[State]
    transition_index: Optional["TransitionIndex"] = None

    def to_context(self, event: Event) -> Context:
        return Context(event=event, source=self.origin, target=self.target, message=self.message)


class TransitionChecker:
    """
    Decides whether a candidate hop may leave its origin and enter its target.
    """

    def validate_departure(self, envelope: Envelope) -> Status:
        raise NotImplementedError()

    def validate_arrival(self, envelope: Envelope) -> Status:
        raise NotImplementedError()


class StateTransitionChecker(TransitionChecker):
    """
    Default checker consulting the message filters carried by the states.
    States without a filter let every transition through.
    """

    def validate_departure(self, envelope: Envelope) -> Status:
        """
        Ask the origin's filter to approve the departure.

        :param envelope: The candidate hop.
        :return: ABORT if the origin is missing or final, the filter's status
            otherwise, PROCEED when the origin carries no filter.
        """
        origin = envelope.origin
        if origin is None or origin.final:
            return Status.ABORT
        if isinstance(origin, MessageFilter):
            return origin.on_dispatch(envelope.to_context(Event.DEPARTURE))
        return Status.PROCEED

    def validate_arrival(self, envelope: Envelope) -> Status:
        """
        Ask the target's filter to approve the arrival.

        :param envelope: The candidate hop.
        :return: The filter's status, PROCEED when the target carries no filter.
        """
        target = envelope.target
        if isinstance(target, MessageFilter):
            return target.on_receive(envelope.to_context(Event.ARRIVAL))
        return Status.PROCEED
