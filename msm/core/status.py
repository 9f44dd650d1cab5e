# msm/core/status.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from msm.core.messages import Message


@dataclass(frozen=True)
class Status:
    """
    Outcome of a filter invocation. A status is either valid (the transition may
    proceed) or not, and may carry a replacement message asking the machine to
    resolve that message instead of committing the current candidate.
    """

    valid: bool
    message: Optional[Message] = None

    PROCEED: ClassVar["Status"]
    ABORT: ClassVar["Status"]

    @classmethod
    def forward(cls, message: Message) -> "Status":
        """
        Build a redirecting status.

        :param message: The message to resolve in place of the original one.
        """
        if message is None:
            raise ValueError("A forward status requires a message")
        return cls(valid=True, message=message)

    @property
    def is_redirect(self) -> bool:
        return self.valid and self.message is not None

    @property
    def label(self) -> str:
        if self.is_redirect:
            return "FORWARD"
        return "PROCEED" if self.valid else "ABORT"

    def __str__(self) -> str:
        if self.is_redirect:
            return f"FORWARD({self.message})"
        return self.label


Status.PROCEED = Status(valid=True)
Status.ABORT = Status(valid=False)
