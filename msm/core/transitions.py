# msm/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Optional, Union

from msm.core.errors import NullTransitionError, TransitionInitializationError
from msm.core.messages import Message, as_message
from msm.core.states import State

StateLike = Union[State, str]


def _as_state(value: Optional[StateLike]) -> Optional[State]:
    if value is None or isinstance(value, State):
        return value
    if isinstance(value, str):
        return State(value)
    raise TransitionInitializationError(f"Cannot use {value!r} as a transition state")


class Transition:
    """
    An immutable (origin, message, target) triple. Transitions are structural
    values: two transitions are equal when their three components are equal.
    """

    __slots__ = ("_origin", "_message", "_target")

    def __init__(self, origin: StateLike, message: Union[Message, str], target: StateLike) -> None:
        """
        :param origin: Source state, or the name of a new plain state.
        :param message: The triggering message, or a string key.
        :param target: Destination state, or the name of a new plain state.
        :raises TransitionInitializationError: If a component is missing or the
            origin is a final state.
        """
        if origin is None or message is None or target is None:
            raise TransitionInitializationError("Cannot create transitions with null components")
        self._origin = _as_state(origin)
        self._message = as_message(message)
        self._target = _as_state(target)
        if self._origin.final:
            raise TransitionInitializationError(f"Cannot create transition from final state [{self._origin.name}]")

    @classmethod
    def _from_graph(cls, origin: State, message: Message, target: State) -> "Transition":
        """Materialize an edge already stored in a graph, skipping construction checks."""
        transition = cls.__new__(cls)
        transition._origin = origin
        transition._message = message
        transition._target = target
        return transition

    @property
    def origin(self) -> State:
        return self._origin

    @property
    def message(self) -> Message:
        return self._message

    @property
    def target(self) -> State:
        return self._target

    @staticmethod
    def validate(transition: Any) -> None:
        """
        Structural check run before any pluggable validation.

        :param transition: The transition to check.
        :raises NullTransitionError: If the transition is None.
        :raises TransitionInitializationError: If a component is missing or the
            origin has become final since construction.
        """
        if transition is None:
            raise NullTransitionError("The transition cannot be null")
        if not isinstance(transition, Transition):
            raise TransitionInitializationError(f"Expected a Transition, got {type(transition).__name__}")
        if transition.origin is None:
            raise TransitionInitializationError("The transition source cannot be null")
        if transition.target is None:
            raise TransitionInitializationError("The transition target cannot be null")
        if transition.message is None:
            raise TransitionInitializationError("The transition message cannot be null")
        if transition.origin.final:
            raise TransitionInitializationError(
                f"Cannot create transition from final state [{transition.origin.name}]"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return (self._origin, self._message, self._target) == (other._origin, other._message, other._target)

    def __hash__(self) -> int:
        return hash((self._origin, self._message, self._target))

    def __iter__(self):
        return iter((self._origin, self._message, self._target))

    def __repr__(self) -> str:
        return f"Transition({self._origin.name!r} --{self._message}--> {self._target.name!r})"
