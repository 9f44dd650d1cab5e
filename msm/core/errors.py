# msm/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class MSMError(Exception):
    """
    Base exception class for errors within the message state machine library.
    """


class StateNotFoundError(MSMError):
    """
    Raised when a requested state does not exist in the transition graph.
    """


class TransitionError(MSMError):
    """
    Raised when an attempted transition is invalid or cannot be completed.
    """


class NullTransitionError(TransitionError):
    """
    Raised when a transition is required but None was supplied.
    """


class TransitionInitializationError(TransitionError):
    """
    Raised when a transition is structurally unsound: a missing origin, message
    or target, or an origin state marked as final.
    """


class TransitionNotFoundError(TransitionError):
    """
    Raised when removing an exact (origin, message) -> target mapping that is
    not present in the graph.
    """


class ValidationError(MSMError):
    """
    Raised when a transition validator rejects an operation and its failure
    policy requires the rejection to surface.
    """


class MachineImportError(MSMError):
    """
    Base class for errors raised while importing a state machine description.
    """


class FileImportError(MachineImportError):
    """
    Raised when the input file of an import cannot be read.
    """


class YAMLParseError(MachineImportError):
    """
    Raised when a YAML state machine document is malformed or contains a state
    or transition block that cannot be parsed.
    """


class FileExportError(MSMError):
    """
    Raised when an exported state machine cannot be written to its output file.
    """
