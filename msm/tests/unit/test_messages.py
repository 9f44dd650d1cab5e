# msm/tests/unit/test_messages.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from msm.core.messages import ANY, EMPTY, NULL, Message, Sentinel, StringMessage, VoidMessage, as_message

# -----------------------------------------------------------------------------
# MESSAGE TESTS
# -----------------------------------------------------------------------------


def test_message_payload_is_lazy() -> None:
    calls = []

    def payload():
        calls.append(1)
        return 42

    message = Message(payload=payload)
    assert not calls
    assert message.get_payload() == 42
    assert calls == [1]


def test_message_without_payload() -> None:
    message = Message()
    assert message.payload is None
    assert message.get_payload() is None
    assert message.message_id is not None


def test_plain_messages_use_identity() -> None:
    assert Message() != Message()


# -----------------------------------------------------------------------------
# STRING MESSAGE TESTS
# -----------------------------------------------------------------------------


def test_string_message_equality_by_key() -> None:
    first = StringMessage("go")
    second = StringMessage("go", lambda: "other")
    assert first == second
    assert hash(first) == hash(second)
    assert first.message_id != second.message_id
    assert first != StringMessage("stop")


def test_string_message_default_payload_is_key() -> None:
    message = StringMessage("go")
    assert message.get_payload() == "go"
    assert str(message) == "go"


def test_string_message_custom_payload() -> None:
    assert StringMessage("2", lambda: True).get_payload() is True


def test_string_message_requires_key() -> None:
    with pytest.raises(ValueError):
        StringMessage(None)


# -----------------------------------------------------------------------------
# SENTINEL TESTS
# -----------------------------------------------------------------------------


def test_sentinels_are_distinct() -> None:
    assert EMPTY != ANY
    assert ANY != NULL
    assert EMPTY != NULL
    assert len({EMPTY, ANY, NULL}) == 3


def test_sentinels_equal_by_kind() -> None:
    assert VoidMessage(Sentinel.ANY) == ANY
    assert hash(VoidMessage(Sentinel.EMPTY)) == hash(EMPTY)


def test_sentinels_never_match_string_messages() -> None:
    assert ANY != StringMessage("*")
    assert EMPTY != StringMessage("_")


def test_sentinel_payloads() -> None:
    assert EMPTY.get_payload() == "_"
    assert ANY.get_payload() == "*"
    assert NULL.get_payload() is None
    assert EMPTY.message_id is None


def test_as_message() -> None:
    assert as_message("x") == StringMessage("x")
    assert as_message(ANY) is ANY
    with pytest.raises(TypeError):
        as_message(3)
