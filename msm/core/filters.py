# msm/core/filters.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Dict, Optional

from msm.core.messages import ANY, Message
from msm.core.status import Status
from msm.interfaces.types import ContextHandler, NodeHandler

if TYPE_CHECKING:
    from msm.core.states import State


class Event(Enum):
    """Phase of a transition in which a filter is consulted."""

    DEPARTURE = auto()
    ARRIVAL = auto()


@dataclass(frozen=True)
class Context:
    """
    Information handed to a filter handler for a single resolution attempt.
    """

    event: Event
    source: Optional["State"]
    target: Optional["State"]
    message: Message


class MessageFilter:
    """
    Interface of per-state interception hooks. `on_dispatch` is consulted when
    a transition leaves the state, `on_receive` when one arrives at it. Both
    return a Status approving, aborting or redirecting the transition.
    """

    def on_dispatch(self, context: Context) -> Status:
        raise NotImplementedError()

    def on_receive(self, context: Context) -> Status:
        raise NotImplementedError()


def _proceed(context: Context) -> Status:
    return Status.PROCEED


class MappedMessageFilter(MessageFilter):
    """
    A filter keeping one handler per message for each phase. Resolution tries
    the exact message first, then the handler registered under ANY, and falls
    back to PROCEED when neither exists.
    """

    def __init__(self) -> None:
        self._dispatch_handlers: Dict[Message, ContextHandler] = {}
        self._reception_handlers: Dict[Message, ContextHandler] = {}

    @property
    def dispatch_handlers(self) -> Dict[Message, ContextHandler]:
        return dict(self._dispatch_handlers)

    @property
    def reception_handlers(self) -> Dict[Message, ContextHandler]:
        return dict(self._reception_handlers)

    def set_dispatch_handler(self, message: Message, handler: ContextHandler) -> None:
        """
        Register the departure handler for a message, replacing any previous one.

        :param message: The message key, ANY for the default handler.
        :param handler: Callable receiving the Context and returning a Status.
        """
        self._set_handler(self._dispatch_handlers, message, handler)

    def set_reception_handler(self, message: Message, handler: ContextHandler) -> None:
        """
        Register the arrival handler for a message, replacing any previous one.

        :param message: The message key, ANY for the default handler.
        :param handler: Callable receiving the Context and returning a Status.
        """
        self._set_handler(self._reception_handlers, message, handler)

    def remove_dispatch_handler(self, message: Message) -> None:
        self._dispatch_handlers.pop(message, None)

    def remove_reception_handler(self, message: Message) -> None:
        self._reception_handlers.pop(message, None)

    def on_dispatch(self, context: Context) -> Status:
        return self._resolve(self._dispatch_handlers, context.message)(context)

    def on_receive(self, context: Context) -> Status:
        return self._resolve(self._reception_handlers, context.message)(context)

    @staticmethod
    def _set_handler(handlers: Dict[Message, ContextHandler], message: Message, handler: ContextHandler) -> None:
        if message is None:
            raise ValueError("Handler message cannot be None")
        if not callable(handler):
            raise TypeError("Filter handlers must be callable")
        handlers[message] = handler

    @staticmethod
    def _resolve(handlers: Dict[Message, ContextHandler], message: Message) -> ContextHandler:
        handler = handlers.get(message)
        if handler is None:
            handler = handlers.get(ANY, _proceed)
        return handler


class FunctionMessageFilter(MappedMessageFilter):
    """
    A mapped filter registering two-argument handlers. Dispatch handlers receive
    the message and the destination state, reception handlers the message and
    the source state.
    """

    def set_dispatch_function(self, message: Message, function: NodeHandler) -> None:
        if not callable(function):
            raise TypeError("Filter handlers must be callable")
        self.set_dispatch_handler(message, lambda context: function(context.message, context.target))

    def set_reception_function(self, message: Message, function: NodeHandler) -> None:
        if not callable(function):
            raise TypeError("Filter handlers must be callable")
        self.set_reception_handler(message, lambda context: function(context.message, context.source))
