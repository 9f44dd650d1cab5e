# msm/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Dict, Optional

from msm.core.base import NodeBase


class State(NodeBase):
    """
    Represents a named vertex of the transition graph. A state may be marked as
    final, in which case it can never be the origin of a transition, and carries
    an ordered bag of string properties used by exporters and host code.
    """

    def __init__(self, name: str, final: bool = False, properties: Optional[Dict[str, str]] = None) -> None:
        """
        :param name: Name identifying this state within the graph.
        :param final: Whether the state is final.
        :param properties: Optional initial properties, copied in order.
        """
        super().__init__(name)
        self._final = bool(final)
        self._properties: Dict[str, str] = dict(properties) if properties else {}

    @property
    def final(self) -> bool:
        """True if no transition may leave this state."""
        return self._final

    @final.setter
    def final(self, value: bool) -> None:
        self._final = bool(value)

    @property
    def properties(self) -> Dict[str, str]:
        """The live, insertion-ordered property map."""
        return self._properties

    def set_property(self, key: str, value: str) -> "State":
        self.properties[key] = value
        return self

    def get_property(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.properties.get(key, default)

    def has_property(self, key: str) -> bool:
        return key in self.properties

    def has_properties(self) -> bool:
        return bool(self.properties)

    def merge(self, other: Optional["State"]) -> "State":
        """
        Fold another declaration of the same state into this one. The final flag
        becomes the union of both flags and the other state's properties are
        copied in, overwriting on key collision.

        :param other: The state to merge from. None leaves this state unchanged.
        :return: This state, for chaining.
        """
        if other is not None:
            self.final = self.final or other.final
            self.properties.update(other.properties)
        return self
