# msm/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple, Union

from msm.core.checker import Envelope, StateTransitionChecker, TransitionChecker
from msm.core.errors import StateNotFoundError
from msm.core.filters import Event
from msm.core.messages import ANY, EMPTY, Message, as_message
from msm.core.states import State
from msm.core.status import Status
from msm.core.transitions import Transition
from msm.interfaces.types import StateName
from msm.runtime.graph import StateGraph

if TYPE_CHECKING:
    from msm.builder import StateMachineBuilder

logger = logging.getLogger(__name__)

DEFAULT_MAX_REDIRECTS = 32


class StateMachine:
    """
    A message-driven state machine over a StateGraph. The machine holds a
    current state and moves along the transition mapped to each message it
    receives, subject to the departure and arrival filters of the states
    involved. Message delivery never raises: a missing or refused transition
    simply leaves the current state unchanged.
    """

    def __init__(
        self,
        transition_index: Optional[StateGraph] = None,
        transition_checker: Optional[TransitionChecker] = None,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
    ) -> None:
        """
        :param transition_index: Graph holding the transitions. A new one is created if omitted.
        :param transition_checker: Checker running the state filters. Defaults to StateTransitionChecker.
        :param max_redirects: Number of chained redirects tolerated by a single
            delivery before it is treated as aborted.
        """
        if not isinstance(max_redirects, int) or max_redirects < 0:
            raise ValueError("max_redirects must be a non-negative integer")
        self._index = transition_index if transition_index is not None else StateGraph()
        self._checker = transition_checker or StateTransitionChecker()
        self._max_redirects = max_redirects
        self._current_state: Optional[State] = None

    @staticmethod
    def new_builder() -> "StateMachineBuilder":
        """Get a fluent builder producing an initialized StateMachine."""
        from msm.builder import StateMachineBuilder

        return StateMachineBuilder()

    @property
    def current_state(self) -> Optional[State]:
        """Get the current state, None until the machine is initialized."""
        return self._current_state

    def get_current(self) -> Optional[State]:
        return self._current_state

    @property
    def transition_index(self) -> StateGraph:
        return self._index

    @property
    def transition_checker(self) -> TransitionChecker:
        return self._checker

    @property
    def max_redirects(self) -> int:
        return self._max_redirects

    def add(self, transition: Transition) -> None:
        """
        Add a transition, replacing silently any mapping from the same origin on
        the same message.
        """
        self._index.add(transition)

    def add_all(self, transitions: Iterable[Transition]) -> None:
        self._index.add_all(transitions)

    def remove_transition(self, transition: Transition) -> None:
        self._index.remove_transition(transition)

    def remove_state(self, state: Union[State, StateName]) -> None:
        """
        Remove a state and every transition having it as origin or target.

        :raises StateNotFoundError: If the state is not in the graph.
        """
        self._index.remove_state(state)

    def remove_all_transitions(self) -> None:
        self._index.remove_all_transitions()

    def clear(self) -> None:
        self._index.clear()

    def find(self, name: StateName) -> Optional[State]:
        return self._index.find(name)

    def init(self) -> None:
        """Set the current state to the first state added to the graph, if any."""
        self._current_state = self._index.get_first()

    def set_current(self, state: Union[State, StateName]) -> None:
        """
        Set the current state.

        :param state: The state, or its name.
        :raises StateNotFoundError: If the state is not in the graph.
        """
        if state is None:
            raise ValueError("The current state cannot be None")
        name = state.name if isinstance(state, State) else state
        found = self._index.find(name)
        if found is None:
            raise StateNotFoundError(f"State [{name}] not found")
        self._current_state = found

    def get_next(self, message: Union[Message, str]) -> Optional[State]:
        """
        Deliver a message and move to the resulting state.

        The target is the state mapped from the current state on the message,
        or on ANY when no direct mapping exists. The hop must pass the origin's
        departure filter and the target's arrival filter. A filter may redirect
        to another message: redirected on arrival, the hop is taken first and
        the new message is resolved from the target; redirected on departure,
        the new message is resolved from the same state without checking
        departure again.

        :param message: The message, or a string key.
        :return: The new current state, or None if no transition took place.
        """
        message = as_message(message)
        start = self._current_state
        if start is None:
            return None

        current = start
        handle_departure = True
        for _ in range(self._max_redirects + 1):
            target = self._resolve_target(current, message)
            if target is None:
                break
            envelope = Envelope(origin=current, message=message, target=target, transition_index=self._index)
            status, event = self._handle_message_filtering(envelope, handle_departure)
            if not status.is_redirect:
                if status.valid:
                    self._current_state = target
                    return target
                break

            logger.debug("%s redirected %s -> %s on %s to %s", event.name, current, target, message, status.message)
            if event is Event.ARRIVAL:
                current = target
                self._current_state = target
                handle_departure = True
            else:
                handle_departure = False
            message = status.message
        else:
            logger.warning(
                "Redirect chain starting at %s exceeded %d redirects, treating as aborted",
                start,
                self._max_redirects,
            )

        self._current_state = start
        return None

    def send(self, message: Union[Message, str]) -> "StateMachine":
        """
        Deliver a message, see get_next.

        :return: This machine, for chaining.
        """
        self.get_next(message)
        return self

    def next(self) -> "StateMachine":
        """Deliver the EMPTY message."""
        return self.send(EMPTY)

    def size(self) -> int:
        return self._index.size()

    def get_transitions(self, state: Union[State, StateName]) -> List[Transition]:
        return self._index.get_transitions(state)

    def get_all_transitions(self) -> List[Transition]:
        return self._index.get_all_transitions()

    def prune(self) -> List[State]:
        """
        Remove orphan states from the graph. The current state is never removed.

        :return: The removed states.
        """
        return self._index.prune(retain=[self._current_state])

    def _resolve_target(self, source: State, message: Message) -> Optional[State]:
        """Look up the direct mapping, falling back to ANY."""
        target = self._index.get_next(source, message)
        if target is None:
            target = self._index.get_next(source, ANY)
        return target

    def _handle_message_filtering(self, envelope: Envelope, handle_departure: bool) -> Tuple[Status, Event]:
        """
        Run the departure check, when required, then the arrival check.

        :return: The deciding status and the phase that produced it.
        """
        if handle_departure:
            status = self._checker.validate_departure(envelope)
            if not status.valid or status.is_redirect:
                return status, Event.DEPARTURE
        return self._checker.validate_arrival(envelope), Event.ARRIVAL
