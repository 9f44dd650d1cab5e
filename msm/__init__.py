"""msm: message-driven finite state machine engine

This package provides an embeddable, in-process state machine whose states are
connected by message-triggered transitions.

Responsibilities:
    - Transition graph storage, mutation, lookup and pruning
    - Message delivery with departure and arrival filtering
    - Redirect chaining driven by state filters
    - Admission control of graph mutations through validators
    - Fluent construction, DOT and YAML export, YAML import

Interactions:
    - Client code through the public API re-exported here
    - Host callbacks registered as state filters and validators
    - Logging system for diagnostics

Cross-cutting Concerns:
    Error Handling:
        - Structured error hierarchy rooted at MSMError
        - Graph mutations raise, message delivery never does

    Logging:
        - Module level loggers under the "msm" namespace
        - DEBUG for graph mutations, WARNING for runaway redirect chains

    Thread Safety:
        - None; a machine and its graph belong to a single thread
"""

__version__ = "0.1.0"

from msm.builder import StateMachineBuilder
from msm.core import (
    ANY,
    EMPTY,
    NULL,
    Context,
    Event,
    FailurePolicy,
    FilteredState,
    FunctionValidator,
    MappedFilteredState,
    Message,
    MSMError,
    Operation,
    State,
    StateMachine,
    StateTransitionChecker,
    StateTransitionValidator,
    Status,
    StringMessage,
    Transition,
    TransitionValidator,
)
from msm.exporters import DOTExporter, RankDir, YAMLExporter
from msm.importers import YAMLImporter
from msm.interfaces.types import ValidationResult
from msm.runtime import StateGraph

__all__ = [
    "ANY",
    "EMPTY",
    "NULL",
    "Context",
    "DOTExporter",
    "Event",
    "FailurePolicy",
    "FilteredState",
    "FunctionValidator",
    "MappedFilteredState",
    "Message",
    "MSMError",
    "Operation",
    "RankDir",
    "State",
    "StateGraph",
    "StateMachine",
    "StateMachineBuilder",
    "StateTransitionChecker",
    "StateTransitionValidator",
    "Status",
    "StringMessage",
    "Transition",
    "TransitionValidator",
    "ValidationResult",
    "YAMLExporter",
    "YAMLImporter",
]
