# msm/interfaces/abc.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Protocol, Union, runtime_checkable

from msm.interfaces.types import StateName

if TYPE_CHECKING:
    from msm.core.messages import Message
    from msm.core.states import State
    from msm.core.transitions import Transition


@runtime_checkable
class TransitionIndex(Protocol):
    """
    Protocol for transition graph storage.

    Runtime Invariants:
    - Every state referenced by a transition, as origin or target, is a key
    - At most one target per (origin, message) pair
    - States are deduplicated by name
    """

    def add(self, transition: "Transition") -> None: ...

    def add_all(self, transitions: Iterable["Transition"]) -> None: ...

    def remove_transition(self, transition: "Transition") -> None: ...

    def remove_state(self, state: Union["State", StateName]) -> None: ...

    def find(self, name: StateName) -> Optional["State"]: ...

    def get_next(self, source: "State", message: "Message") -> Optional["State"]: ...

    def get_first(self) -> Optional["State"]: ...

    def size(self) -> int: ...

    def prune(self, retain: Iterable["State"] = ()) -> List["State"]: ...

    def get_transitions(self, state: Union["State", StateName]) -> List["Transition"]: ...

    def get_all_transitions(self) -> List["Transition"]: ...

    def get_transitions_as_map(self) -> Dict["State", Dict["Message", "State"]]: ...


@runtime_checkable
class Transitioner(Protocol):
    """
    Protocol for message-driven machines holding a current state.

    Runtime Invariants:
    - The current state, when set, is a vertex of the index
    - A failed or aborted transition leaves the current state unchanged
    - Message delivery never raises for missing or refused transitions
    """

    @property
    def current_state(self) -> Optional["State"]: ...

    @property
    def transition_index(self) -> TransitionIndex: ...

    def init(self) -> None: ...

    def set_current(self, state: Union["State", StateName]) -> None: ...

    def get_next(self, message: Union["Message", str]) -> Optional["State"]: ...

    def send(self, message: Union["Message", str]) -> "Transitioner": ...

    def next(self) -> "Transitioner": ...

    def get_all_transitions(self) -> List["Transition"]: ...
