# msm/core/messages.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional
from uuid import UUID, uuid4

Payload = Callable[[], Any]


class Message:
    """
    Represents a discrete input delivered to the state machine. Messages trigger
    transitions and may carry a payload, exposed as a zero-argument callable so
    the value is only produced when a filter asks for it.
    """

    def __init__(self, payload: Optional[Payload] = None, message_id: Optional[UUID] = None) -> None:
        """
        :param payload: Optional callable returning the message payload.
        :param message_id: Optional identifier; a fresh one is generated if omitted.
        """
        self._payload = payload
        self._message_id = message_id if message_id is not None else uuid4()

    @property
    def message_id(self) -> Optional[UUID]:
        """Identifier of this message instance."""
        return self._message_id

    @property
    def payload(self) -> Optional[Payload]:
        """The payload accessor, or None if the message carries no payload."""
        return self._payload

    def get_payload(self) -> Any:
        """
        Evaluate the payload accessor.

        :return: The payload value, or None when no accessor is set.
        """
        return self._payload() if self._payload is not None else None


class StringMessage(Message):
    """
    A content-keyed message. Two string messages are equal when their keys
    match, independently of their ids or payloads.
    """

    def __init__(self, key: str, payload: Optional[Payload] = None) -> None:
        """
        :param key: The message key.
        :param payload: Optional payload accessor. Defaults to returning the key.
        """
        if key is None:
            raise ValueError("Message key cannot be None")
        super().__init__(payload=payload if payload is not None else (lambda: key))
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringMessage):
            return NotImplemented
        return self._key == other._key

    def __hash__(self) -> int:
        return hash(("StringMessage", self._key))

    def __str__(self) -> str:
        return self._key

    def __repr__(self) -> str:
        return f"StringMessage({self._key!r})"


class Sentinel(Enum):
    """The closed set of special, keyless messages."""

    EMPTY = "_"
    ANY = "*"
    NULL = None


class VoidMessage(Message):
    """
    A keyless message standing for one of the sentinels. Equality is per
    sentinel kind, so a void message never matches a string message.
    """

    def __init__(self, kind: Sentinel) -> None:
        value = kind.value
        super().__init__(payload=(lambda: value) if value is not None else None)
        self._message_id = None
        self._kind = kind

    @property
    def kind(self) -> Sentinel:
        return self._kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VoidMessage):
            return NotImplemented
        return self._kind is other._kind

    def __hash__(self) -> int:
        return hash(self._kind)

    def __str__(self) -> str:
        return self._kind.name

    def __repr__(self) -> str:
        return f"VoidMessage({self._kind.name})"


# Shared sentinel messages
EMPTY = VoidMessage(Sentinel.EMPTY)
ANY = VoidMessage(Sentinel.ANY)
NULL = VoidMessage(Sentinel.NULL)


def as_message(value: Any) -> Message:
    """
    Coerce a string into a StringMessage, passing messages through.

    :param value: A Message instance or a string key.
    :raises TypeError: If the value is neither.
    """
    if isinstance(value, Message):
        return value
    if isinstance(value, str):
        return StringMessage(value)
    raise TypeError(f"Cannot use {value!r} as a message")
