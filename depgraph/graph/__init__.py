"""Graph subpackage containing the dependency graph and its storage."""

from .dependency import DependencyGraph
from .errors import AlreadyExistsError, GraphError, NotFoundError, VersionAlreadyExistsError
from .ids import parse_dependency_metadata, stringify_dependency_metadata
from .model import DependencyMetadata, DependencyNode
from .query import QueryService

__all__ = [
    "AlreadyExistsError",
    "DependencyGraph",
    "DependencyMetadata",
    "DependencyNode",
    "GraphError",
    "NotFoundError",
    "QueryService",
    "VersionAlreadyExistsError",
    "parse_dependency_metadata",
    "stringify_dependency_metadata",
]
