"""Error types raised by the dependency graph."""
from __future__ import annotations


class GraphError(Exception):
    """Base class for all graph failures."""


class NotFoundError(GraphError, KeyError):
    """Raised when a node-name keyed lookup misses."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No node with the name '{self.name}' has been added"


class AlreadyExistsError(GraphError):
    """Raised when a node name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"A node with the name '{self.name}' already exists"


class VersionAlreadyExistsError(GraphError):
    """Raised when ``version`` is already an alias of the node ``name``."""

    def __init__(self, name: str, version: str) -> None:
        super().__init__(name, version)
        self.name = name
        self.version = version

    def __str__(self) -> str:
        return f"Version '{self.version}' has already been registered on node '{self.name}'"


__all__ = ["AlreadyExistsError", "GraphError", "NotFoundError", "VersionAlreadyExistsError"]
