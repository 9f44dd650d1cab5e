# msm/builder.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Iterable, Optional, Union

from msm.core.messages import EMPTY, Message
from msm.core.state_machine import StateMachine
from msm.core.states import State
from msm.core.transitions import Transition
from msm.runtime.graph import StateGraph

StateLike = Union[State, str]


def _as_state(state: StateLike) -> State:
    return state if isinstance(state, State) else State(state)


class StateMachineBuilder:
    """
    Fluent construction of state machines:

        machine = (
            StateMachineBuilder()
            .from_("A").to("B").on("1")
            .from_("B").to("C").on("2")
            .build()
        )

    A `to` left without `on` is completed with the EMPTY message by the next
    `from_`, `self_loop` or `build` call. Every transition goes through the
    graph's validated `add`.
    """

    def __init__(self, transition_index: Optional[StateGraph] = None) -> None:
        self._index = transition_index if transition_index is not None else StateGraph()

    @property
    def transition_index(self) -> StateGraph:
        return self._index

    def from_(self, state: StateLike) -> "FromBuilder":
        return FromBuilder(self, _as_state(state))

    def self_loop(self, state: StateLike) -> "ToBuilder":
        state = _as_state(state)
        return ToBuilder(self, state, state)

    def add(self, transition: Transition) -> "StateMachineBuilder":
        self._index.add(transition)
        return self

    def add_all(self, transitions: Iterable[Transition]) -> "StateMachineBuilder":
        self._index.add_all(transitions)
        return self

    def build(self) -> StateMachine:
        """Create the machine, initialized on the first state added."""
        machine = StateMachine(self._index)
        machine.init()
        return machine


class FromBuilder:
    """Builder stage holding the origin of the next transition."""

    def __init__(self, builder: StateMachineBuilder, origin: State) -> None:
        self._builder = builder
        self._origin = origin

    def to(self, target: StateLike) -> "ToBuilder":
        return ToBuilder(self._builder, self._origin, _as_state(target))


class ToBuilder:
    """Builder stage holding the origin and target of the next transition."""

    def __init__(self, builder: StateMachineBuilder, origin: State, target: State) -> None:
        self._builder = builder
        self._origin = origin
        self._target = target

    def on(self, message: Union[Message, str]) -> StateMachineBuilder:
        return self._builder.add(Transition(self._origin, message, self._target))

    def from_(self, state: StateLike) -> FromBuilder:
        return self.on(EMPTY).from_(state)

    def self_loop(self, state: StateLike) -> "ToBuilder":
        return self.on(EMPTY).self_loop(state)

    def build(self) -> StateMachine:
        return self.on(EMPTY).build()
