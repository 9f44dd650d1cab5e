"""
Core package providing the message state machine building blocks.

Architecture:
- States and messages identify the vertices and edge labels of the graph
- Transitions describe single (origin, message, target) edges
- Filters attached to states approve, abort or redirect transitions
- Validators decide whether graph mutations are admissible
- The StateMachine drives the current state over the graph
"""

from .errors import (
    FileExportError,
    FileImportError,
    MachineImportError,
    MSMError,
    NullTransitionError,
    StateNotFoundError,
    TransitionError,
    TransitionInitializationError,
    TransitionNotFoundError,
    ValidationError,
    YAMLParseError,
)
from .messages import ANY, EMPTY, NULL, Message, Sentinel, StringMessage, VoidMessage, as_message
from .states import State
from .status import Status
from .transitions import Transition
from .filters import Context, Event, FunctionMessageFilter, MappedMessageFilter, MessageFilter
from .filtered_states import FilteredState, MappedFilteredState, WrappedState
from .validations import FailurePolicy, FunctionValidator, Operation, StateTransitionValidator, TransitionValidator
from .checker import Envelope, StateTransitionChecker, TransitionChecker
from .state_machine import StateMachine

__all__ = [
    "ANY",
    "EMPTY",
    "NULL",
    "Context",
    "Envelope",
    "Event",
    "FailurePolicy",
    "FileExportError",
    "FileImportError",
    "FilteredState",
    "FunctionMessageFilter",
    "FunctionValidator",
    "MachineImportError",
    "MappedFilteredState",
    "MappedMessageFilter",
    "Message",
    "MessageFilter",
    "MSMError",
    "NullTransitionError",
    "Operation",
    "Sentinel",
    "State",
    "StateMachine",
    "StateNotFoundError",
    "StateTransitionChecker",
    "StateTransitionValidator",
    "Status",
    "StringMessage",
    "Transition",
    "TransitionChecker",
    "TransitionError",
    "TransitionInitializationError",
    "TransitionNotFoundError",
    "TransitionValidator",
    "ValidationError",
    "VoidMessage",
    "WrappedState",
    "YAMLParseError",
    "as_message",
]
