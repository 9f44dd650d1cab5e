# msm/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from msm.core.errors import NullTransitionError, TransitionInitializationError, TransitionNotFoundError
from msm.core.transitions import Transition
from msm.interfaces.types import ValidationResult, ValidatorFunc

if TYPE_CHECKING:
    from msm.interfaces.abc import TransitionIndex


class Operation(Enum):
    """Graph mutation being validated."""

    ADD = auto()
    REMOVE = auto()


class FailurePolicy(Enum):
    """What the transition index does when a validator rejects an operation."""

    THROW = auto()
    PROCEED = auto()
    IGNORE = auto()


class TransitionValidator:
    """
    Decides whether adding or removing a transition is admissible. Subclasses
    implement `validate`; the failure policy is read by the index every time a
    validation fails.
    """

    def __init__(self, failure_policy: FailurePolicy = FailurePolicy.THROW) -> None:
        self._failure_policy = failure_policy

    @property
    def failure_policy(self) -> FailurePolicy:
        return self._failure_policy

    @failure_policy.setter
    def failure_policy(self, policy: FailurePolicy) -> None:
        if not isinstance(policy, FailurePolicy):
            raise ValueError("Failure policy must be a FailurePolicy enum value")
        self._failure_policy = policy

    def validate(
        self, transition: Optional[Transition], index: "TransitionIndex", operation: Operation
    ) -> ValidationResult:
        """
        Check a transition against the index for the given operation.

        :param transition: The transition to check.
        :param index: The index the operation targets.
        :param operation: ADD or REMOVE.
        :return: The validation result.
        """
        raise NotImplementedError()


class FunctionValidator(TransitionValidator):
    """
    Adapts a plain callable `(transition, index, operation) -> ValidationResult`
    into a validator.
    """

    def __init__(self, function: ValidatorFunc, failure_policy: FailurePolicy = FailurePolicy.THROW) -> None:
        super().__init__(failure_policy)
        if not callable(function):
            raise TypeError("Validator function must be callable")
        self._function = function

    def validate(
        self, transition: Optional[Transition], index: "TransitionIndex", operation: Operation
    ) -> ValidationResult:
        return self._function(transition, index, operation)


class StateTransitionValidator(TransitionValidator):
    """
    Default validator. Resolves the transition's states to the vertices already
    held by the index, then requires complete components, a non-final origin
    when adding and the exact mapping to be present when removing.
    """

    def validate(
        self, transition: Optional[Transition], index: "TransitionIndex", operation: Operation
    ) -> ValidationResult:
        result = _DefaultValidationRules.validate_components(transition)
        if result.valid:
            origin, message, target = _DefaultValidationRules.resolve(transition, index)
            if operation is Operation.ADD:
                result = _DefaultValidationRules.validate_origin(origin)
            else:
                result = _DefaultValidationRules.validate_presence(origin, message, target, index)
        return result


class _DefaultValidationRules:
    """
    Built-in rules used by the default validator.
    """

    @staticmethod
    def resolve(transition: Transition, index: "TransitionIndex"):
        """Swap origin and target for the canonical vertices of the index, if any."""
        origin = index.find(transition.origin.name) or transition.origin
        target = index.find(transition.target.name) or transition.target
        return origin, transition.message, target

    @staticmethod
    def validate_components(transition: Optional[Transition]) -> ValidationResult:
        if transition is None:
            return ValidationResult.from_error(NullTransitionError("The transition cannot be null"))
        if transition.origin is None or transition.message is None or transition.target is None:
            return ValidationResult.from_error(
                TransitionInitializationError("Cannot create transitions with null components")
            )
        return ValidationResult.success()

    @staticmethod
    def validate_origin(origin) -> ValidationResult:
        if origin.final:
            return ValidationResult.from_error(
                TransitionInitializationError(f"Cannot create transition from final state [{origin.name}]")
            )
        return ValidationResult.success()

    @staticmethod
    def validate_presence(origin, message, target, index: "TransitionIndex") -> ValidationResult:
        mapped = index.get_transitions_as_map().get(origin, {}).get(message)
        if mapped is None or mapped != target:
            return ValidationResult.from_error(
                TransitionNotFoundError(f"Cannot find transition [{origin} -> {target}] on [{message}]")
            )
        return ValidationResult.success()
