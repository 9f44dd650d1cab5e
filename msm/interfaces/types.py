# msm/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, Any, Callable, NamedTuple, Optional

if TYPE_CHECKING:
    from msm.core.filters import Context
    from msm.core.messages import Message
    from msm.core.states import State
    from msm.core.status import Status

StateName = str


class ValidationResult(NamedTuple):
    valid: bool
    description: str = ""
    error: Optional[Exception] = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def fail(cls, description: str) -> "ValidationResult":
        return cls(False, description)

    @classmethod
    def from_error(cls, error: Exception) -> "ValidationResult":
        return cls(False, str(error), error)

    def raise_on_failure(self) -> None:
        """Raise the carried error, or a ValidationError, if the result is invalid."""
        if self.valid:
            return
        if self.error is not None:
            raise self.error
        from msm.core.errors import ValidationError

        raise ValidationError(self.description)


# Callback Types
ContextHandler = Callable[["Context"], "Status"]
NodeHandler = Callable[["Message", "State"], "Status"]
ValidatorFunc = Callable[..., ValidationResult]
PayloadFunc = Callable[[], Any]
