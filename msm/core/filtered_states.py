# msm/core/filtered_states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Dict, Optional, Union

from msm.core.filters import Context, FunctionMessageFilter, MappedMessageFilter, MessageFilter
from msm.core.messages import ANY, Message, as_message
from msm.core.states import State
from msm.core.status import Status
from msm.interfaces.types import ContextHandler, NodeHandler


class WrappedState(State):
    """
    Decorates a state while keeping its identity. Name, final flag, properties,
    equality and hash are all forwarded to the wrapped state, so the graph finds
    the same vertex whether it is handed the wrapper or the plain state.
    """

    def __init__(self, state: State) -> None:
        """
        :param state: The state to decorate.
        :raises ValueError: If state is None.
        """
        if state is None:
            raise ValueError("Cannot wrap a null state")
        super().__init__(state.name)
        self._state = state

    @property
    def state(self) -> State:
        """The decorated state."""
        return self._state

    @property
    def name(self) -> str:
        return self._state.name

    @property
    def final(self) -> bool:
        return self._state.final

    @final.setter
    def final(self, value: bool) -> None:
        self._state.final = value

    @property
    def properties(self) -> Dict[str, str]:
        return self._state.properties

    def merge(self, other: Optional[State]) -> "WrappedState":
        self._state.merge(other)
        return self


class FilteredState(WrappedState, MessageFilter):
    """
    A state whose departures and arrivals are intercepted by handlers taking the
    full filter Context. Handlers are keyed by message; those registered under
    ANY apply when no exact match exists.
    """

    def __init__(self, state: State) -> None:
        super().__init__(state)
        self._message_filter = MappedMessageFilter()

    @classmethod
    def from_state(cls, state: State) -> "FilteredState":
        return cls(state)

    @property
    def message_filter(self) -> MappedMessageFilter:
        return self._message_filter

    def set_dispatch_handler(self, handler: ContextHandler, message: Union[Message, str] = ANY) -> "FilteredState":
        """
        Register a departure handler.

        :param handler: Callable receiving the Context and returning a Status.
        :param message: Message the handler applies to, ANY by default.
        :return: This state, for chaining.
        """
        self._message_filter.set_dispatch_handler(as_message(message), handler)
        return self

    def set_reception_handler(self, handler: ContextHandler, message: Union[Message, str] = ANY) -> "FilteredState":
        """
        Register an arrival handler.

        :param handler: Callable receiving the Context and returning a Status.
        :param message: Message the handler applies to, ANY by default.
        :return: This state, for chaining.
        """
        self._message_filter.set_reception_handler(as_message(message), handler)
        return self

    def remove_dispatch_handler(self, message: Union[Message, str] = ANY) -> None:
        self._message_filter.remove_dispatch_handler(as_message(message))

    def remove_reception_handler(self, message: Union[Message, str] = ANY) -> None:
        self._message_filter.remove_reception_handler(as_message(message))

    def on_dispatch(self, context: Context) -> Status:
        return self._message_filter.on_dispatch(context)

    def on_receive(self, context: Context) -> Status:
        return self._message_filter.on_receive(context)


class MappedFilteredState(WrappedState, MessageFilter):
    """
    A state intercepted by two-argument handlers bound to (message, node): the
    destination for dispatch handlers and the source for reception handlers.
    """

    def __init__(self, state: State) -> None:
        super().__init__(state)
        self._message_filter = FunctionMessageFilter()

    @classmethod
    def from_state(cls, state: State) -> "MappedFilteredState":
        return cls(state)

    @property
    def message_filter(self) -> FunctionMessageFilter:
        return self._message_filter

    def set_dispatch_handler(self, message: Union[Message, str], handler: NodeHandler) -> "MappedFilteredState":
        self._message_filter.set_dispatch_function(as_message(message), handler)
        return self

    def set_reception_handler(self, message: Union[Message, str], handler: NodeHandler) -> "MappedFilteredState":
        self._message_filter.set_reception_function(as_message(message), handler)
        return self

    def remove_dispatch_handler(self, message: Union[Message, str]) -> None:
        self._message_filter.remove_dispatch_handler(as_message(message))

    def remove_reception_handler(self, message: Union[Message, str]) -> None:
        self._message_filter.remove_reception_handler(as_message(message))

    def on_dispatch(self, context: Context) -> Status:
        return self._message_filter.on_dispatch(context)

    def on_receive(self, context: Context) -> Status:
        return self._message_filter.on_receive(context)
