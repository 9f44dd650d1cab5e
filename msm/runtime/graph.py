"""Graph-based transition storage for message state machines."""

import logging
from typing import Dict, Iterable, List, Optional, Union

from ..core.errors import (
    NullTransitionError,
    StateNotFoundError,
    TransitionInitializationError,
    TransitionNotFoundError,
)
from ..core.messages import Message, as_message
from ..core.states import State
from ..core.transitions import Transition
from ..core.validations import FailurePolicy, Operation, StateTransitionValidator, TransitionValidator
from ..interfaces.types import StateName, ValidationResult

logger = logging.getLogger(__name__)


class StateGraph:
    """
    Stores the transitions of a state machine as an insertion-ordered adjacency
    map `State -> (Message -> State)`. Every state known to the graph has an
    entry, including states only ever referenced as targets. Admission of every
    mutation is delegated to a TransitionValidator and its failure policy.
    """

    def __init__(self, validator: Optional[TransitionValidator] = None) -> None:
        """
        :param validator: Validator deciding whether additions and removals are
            admissible. Defaults to StateTransitionValidator.
        """
        self._validator = validator or StateTransitionValidator()
        self._transitions: Dict[State, Dict[Message, State]] = {}

    @property
    def validator(self) -> TransitionValidator:
        return self._validator

    @validator.setter
    def validator(self, validator: TransitionValidator) -> None:
        if validator is None:
            raise ValueError("Validator cannot be None")
        self._validator = validator

    def add(self, transition: Transition) -> None:
        """
        Add a transition. A transition from the same origin on the same message
        is replaced silently. States already present in the graph are reused as
        the canonical vertices.

        :param transition: The transition to add.
        :raises NullTransitionError: If the transition is None.
        :raises TransitionInitializationError: If the transition is structurally unsound,
            or its origin is a final state of the graph. Checked before the validator
            runs, so no failure policy admits it.
        :raises Exception: The validator's error when it rejects the addition
            under the THROW policy.
        """
        Transition.validate(transition)
        stored_origin = self.find(transition.origin.name)
        if stored_origin is not None and stored_origin.final:
            raise TransitionInitializationError(f"Cannot create transition from final state [{stored_origin.name}]")
        result = self._validator.validate(transition, self, Operation.ADD)
        if not self._admit(result, transition, Operation.ADD):
            return

        origin = self._canonical(transition.origin)
        target = self._canonical(transition.target)
        self._transitions.setdefault(origin, {})[transition.message] = target
        self._transitions.setdefault(target, {})
        logger.debug("Added transition %s --%s--> %s", origin, transition.message, target)

    def add_all(self, transitions: Iterable[Transition]) -> None:
        for transition in transitions:
            self.add(transition)

    def remove_transition(self, transition: Transition) -> None:
        """
        Remove the single message mapping described by a transition, leaving
        its origin and target vertices in place.

        :param transition: The transition to remove.
        :raises NullTransitionError: If the transition is None.
        :raises TransitionNotFoundError: If the exact mapping is not present,
            whatever the validator decided.
        """
        if transition is None:
            raise NullTransitionError("The transition cannot be null")
        result = self._validator.validate(transition, self, Operation.REMOVE)
        admitted = self._admit(result, transition, Operation.REMOVE)

        origin = self.find(transition.origin.name)
        mapping = self._transitions[origin] if origin is not None else {}
        target = mapping.get(transition.message)
        if target is None or target != transition.target:
            raise TransitionNotFoundError(f"Cannot find transition [{transition}]")

        if admitted:
            del mapping[transition.message]
            logger.debug("Removed transition %s --%s--> %s", origin, transition.message, target)

    def remove_state(self, state: Union[State, StateName]) -> None:
        """
        Remove a state together with its outgoing transitions and every
        transition targeting it.

        :param state: The state, or its name.
        :raises StateNotFoundError: If the state is not in the graph.
        """
        existing = self._require(state)
        del self._transitions[existing]
        for mapping in self._transitions.values():
            for message in [m for m, target in mapping.items() if target == existing]:
                del mapping[message]
        logger.debug("Removed state %s", existing)

    def remove_all_transitions(self) -> None:
        """Drop every transition, keeping the states."""
        for mapping in self._transitions.values():
            mapping.clear()

    def clear(self) -> None:
        """Drop every state and transition."""
        self._transitions.clear()

    def get_next(self, source: State, message: Union[Message, str]) -> Optional[State]:
        """
        Get the state mapped from source on the exact message.

        :return: The target state, or None if no mapping exists.
        """
        if source is None:
            raise ValueError("The source state cannot be None")
        mapping = self._transitions.get(source)
        return mapping.get(as_message(message)) if mapping is not None else None

    def get_previous(self, target: State, message: Union[Message, str]) -> Optional[State]:
        """Get the first state moving to target on the given message."""
        message = as_message(message)
        for state, mapping in self._transitions.items():
            if mapping.get(message) == target:
                return state
        return None

    def find(self, name: StateName) -> Optional[State]:
        """Find the canonical state instance by name."""
        for state in self._transitions:
            if state.name == name:
                return state
        return None

    def contains(self, item: Union[State, Transition, StateName]) -> bool:
        if isinstance(item, Transition):
            return self.get_next(item.origin, item.message) == item.target
        if isinstance(item, State):
            return item in self._transitions
        return self.find(item) is not None

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def get_first(self) -> Optional[State]:
        """Get the first state inserted in the graph, if any."""
        return next(iter(self._transitions), None)

    def size(self) -> int:
        """Get the number of states in the graph."""
        return len(self._transitions)

    def __len__(self) -> int:
        return self.size()

    def prune(self, retain: Iterable[State] = ()) -> List[State]:
        """
        Remove orphan states, i.e. states with no outgoing transitions that are
        not the target of any transition. Runs until no orphan is left.

        :param retain: States that must be kept even if orphaned.
        :return: The removed states, in removal order.
        """
        retained = {state for state in retain if state is not None}
        pruned: List[State] = []
        while True:
            referenced = {target for mapping in self._transitions.values() for target in mapping.values()}
            orphans = [
                state
                for state, mapping in self._transitions.items()
                if not mapping and state not in referenced and state not in retained
            ]
            if not orphans:
                break
            for orphan in orphans:
                del self._transitions[orphan]
                pruned.append(orphan)

        if pruned:
            logger.debug("Pruned orphan states: %s", ", ".join(s.name for s in pruned))
        return pruned

    def get_transitions(self, state: Union[State, StateName]) -> List[Transition]:
        """
        Get the transitions leaving a state.

        :param state: The state, or its name.
        :raises StateNotFoundError: If the state is not in the graph.
        """
        origin = self._require(state)
        return [Transition._from_graph(origin, m, target) for m, target in self._transitions[origin].items()]

    def get_all_transitions(self) -> List[Transition]:
        return [
            Transition._from_graph(origin, m, target)
            for origin, mapping in self._transitions.items()
            for m, target in mapping.items()
        ]

    def get_transitions_as_map(self) -> Dict[State, Dict[Message, State]]:
        """Get a snapshot of the adjacency map."""
        return {state: dict(mapping) for state, mapping in self._transitions.items()}

    def get_states(self) -> List[State]:
        return list(self._transitions)

    def _canonical(self, state: State) -> State:
        existing = self.find(state.name)
        return existing if existing is not None else state

    def _require(self, state: Union[State, StateName]) -> State:
        name = state.name if isinstance(state, State) else state
        existing = self.find(name)
        if existing is None:
            raise StateNotFoundError(f"State [{name}] not found")
        return existing

    def _admit(self, result: ValidationResult, transition: Transition, operation: Operation) -> bool:
        """Apply the validator's failure policy to a result."""
        if result.valid:
            return True
        policy = self._validator.failure_policy
        if policy is FailurePolicy.THROW:
            result.raise_on_failure()
        if policy is FailurePolicy.IGNORE:
            logger.debug("Ignoring rejected %s of %r: %s", operation.name, transition, result.description)
            return False
        logger.debug("Proceeding with rejected %s of %r: %s", operation.name, transition, result.description)
        return True
