# msm/core/base.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from uuid import UUID, uuid4


class NodeBase:
    """
    Base class for graph node identity. Every node carries a unique id assigned
    at creation time and a name. Equality and hashing are name based: two nodes
    with the same name are the same graph vertex, whatever their ids.
    """

    def __init__(self, name: str) -> None:
        """
        :param name: Name identifying this node within a graph.
        :raises ValueError: If the name is not a non-empty string.
        """
        if not name or not isinstance(name, str):
            raise ValueError("Node name must be a non-empty string")
        self._name = name
        self._id = uuid4()

    @property
    def id(self) -> UUID:
        """Generation-time identifier, not used for equality."""
        return self._id

    @property
    def name(self) -> str:
        """The node name."""
        return self._name

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if their names match."""
        if not isinstance(other, NodeBase):
            return NotImplemented
        return self.name == other.name

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
