"""In-memory directed graph of installed packages and their declared dependencies."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from .errors import AlreadyExistsError, NotFoundError, VersionAlreadyExistsError
from .ids import parse_dependency_metadata, stringify_dependency_metadata
from .model import DependencyMetadata, DependencyNode
from .store import NodeStore, RelationStore

LOGGER = logging.getLogger(__name__)


@dataclass
class DependencyGraph:
    """Graph of packages keyed by name with "depends on" edges between them.

    Every node owns a relation bucket mapping the names it depends on to the
    version range it declared for them. Names are matched case-insensitively
    throughout. Nodes and edges are never removed.
    """

    nodes: NodeStore = field(default_factory=NodeStore)
    relations: RelationStore = field(default_factory=RelationStore)

    stringify_dependency_metadata = staticmethod(stringify_dependency_metadata)
    parse_dependency_metadata = staticmethod(parse_dependency_metadata)

    # ------------------------------------------------------------------
    # Graph primitives
    # ------------------------------------------------------------------

    def add_node(self, name: str, data: Any) -> None:
        """Register ``name`` with ``data`` and an empty relation bucket."""

        if self.nodes.exists(name):
            raise AlreadyExistsError(name)
        self.nodes.set(name, data)
        self.relations.init(name)

    def get_node(self, name: str) -> Any:
        return self.nodes.get(name)

    def has_node(self, name: str) -> bool:
        return self.nodes.exists(name)

    def list_nodes(self) -> List[str]:
        return self.nodes.names()

    def mark_dependency(self, from_: str, to: str, payload: Any) -> None:
        """Record that ``from_`` depends on ``to``, overwriting any previous payload."""

        for name in (from_, to):
            if not self.nodes.exists(name):
                raise NotFoundError(name)
        self.relations.set(from_, to, payload)

    def has_dependency(self, from_: str, to: str) -> bool:
        return self.relations.exists(from_, to)

    def list_dependencies(self, of: str) -> Dict[str, Any]:
        return dict(self.relations.get(of))

    def list_dependants(self, of: str) -> Dict[str, Any]:
        return self.relations.dependants_of(of)

    # ------------------------------------------------------------------
    # Dependency vocabulary
    # ------------------------------------------------------------------

    def add_real_dependency(self, metadata: DependencyMetadata, data: Any) -> None:
        """Add an installed package with ``metadata.version`` as its real version."""

        node = DependencyNode(
            name=metadata.name,
            data=data,
            version=metadata.version,
            aliases=[metadata.version],
        )
        self.add_node(metadata.name, node)
        LOGGER.debug("Registered %s", stringify_dependency_metadata(metadata))

    def add_implied_dependency(self, metadata: DependencyMetadata) -> None:
        """Register ``metadata.version`` as an alias of the existing node ``metadata.name``."""

        if self.version_exists(metadata.name)(metadata.version):
            raise VersionAlreadyExistsError(metadata.name, metadata.version)
        self._dependency_node(metadata.name).aliases.append(metadata.version)

    def version_exists(self, name: str) -> Callable[[str], bool]:
        """Return a predicate telling whether a version is an alias of ``name``."""

        node = self._dependency_node(name)
        return node.has_alias

    def list_all_real_dependencies(self) -> List[str]:
        return self.list_nodes()

    def get_dependency_data(self, name: str) -> Any:
        return self._dependency_node(name).data

    def get_dependency_version(self, name: str) -> str:
        return self._dependency_node(name).version

    def get_dependency_aliases(self, name: str) -> List[str]:
        return list(self._dependency_node(name).aliases)

    def get_dependency_metadata(self, name: str) -> DependencyMetadata:
        return self._dependency_node(name).metadata

    def create_inter_dependency(self, from_: str, to: DependencyMetadata) -> None:
        """Record that ``from_`` declared a dependency on ``to.name`` at range ``to.version``."""

        self.mark_dependency(from_, to.name, to.version)

    def list_dependencies_of_dependency(self, name: str) -> Dict[str, Any]:
        return self.list_dependencies(name)

    def list_dependants_of_dependency(self, name: str) -> Dict[str, Any]:
        return self.list_dependants(name)

    def _dependency_node(self, name: str) -> DependencyNode:
        node = self.get_node(name)
        if not isinstance(node, DependencyNode):
            raise TypeError(f"Node '{name}' was not registered as a dependency")
        return node


__all__ = ["DependencyGraph"]
