"""Traversal helpers built on a ``networkx`` projection of the dependency graph."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

import networkx as nx

from .dependency import DependencyGraph
from .errors import NotFoundError


def to_networkx(graph: DependencyGraph) -> nx.DiGraph:
    """Return a :class:`networkx.DiGraph` mirroring ``graph``.

    Nodes are keyed by their registered name and carry ``version`` and
    ``aliases``; edges carry the declared ``range``.
    """

    projection = nx.DiGraph()
    names = graph.list_nodes()
    canonical = {name.lower(): name for name in names}
    for name in names:
        node = graph.get_node(name)
        projection.add_node(
            name,
            version=getattr(node, "version", None),
            aliases=list(getattr(node, "aliases", [])),
        )
    for source in names:
        for target, declared in graph.list_dependencies(source).items():
            projection.add_edge(source, canonical[target.lower()], range=declared)
    return projection


def _canonical_name(graph: DependencyGraph, name: str) -> str:
    """Map ``name`` onto the casing it was registered with."""

    folded = name.lower()
    for candidate in graph.list_nodes():
        if candidate.lower() == folded:
            return candidate
    raise NotFoundError(name)


@dataclass
class QueryService:
    """Provide transitive access patterns over a :class:`DependencyGraph`."""

    graph: DependencyGraph

    def to_networkx(self) -> nx.DiGraph:
        return to_networkx(self.graph)

    def dependencies(self, name: str, *, hop: Optional[int] = None) -> Iterable[Dict[str, object]]:
        """Yield packages ``name`` depends on, directly or transitively."""

        projection = self.to_networkx()
        yield from self._walk(projection, _canonical_name(self.graph, name), hop)

    def dependants(self, name: str, *, hop: Optional[int] = None) -> Iterable[Dict[str, object]]:
        """Yield packages that depend on ``name``, directly or transitively."""

        projection = self.to_networkx().reverse(copy=False)
        yield from self._walk(projection, _canonical_name(self.graph, name), hop)

    @staticmethod
    def _walk(projection: nx.DiGraph, start: str, hop: Optional[int]) -> Iterable[Dict[str, object]]:
        visited = {start}
        frontier = [start]
        depth = 0
        while frontier and (hop is None or depth < hop):
            depth += 1
            next_frontier = []
            for current in frontier:
                for neighbor in projection.successors(current):
                    if neighbor in visited:
                        continue
                    visited.add(neighbor)
                    next_frontier.append(neighbor)
                    yield {
                        "name": neighbor,
                        "version": projection.nodes[neighbor].get("version"),
                        "depth": depth,
                    }
            frontier = next_frontier


__all__ = ["QueryService", "to_networkx"]
