"""Graph export utilities."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Literal

import networkx as nx

from depgraph.graph.dependency import DependencyGraph
from depgraph.graph.query import to_networkx


@dataclass
class GraphExporter:
    """Serialize a dependency graph to a portable representation."""

    graph: DependencyGraph

    def export(self, *, format: Literal["graphml", "json"] = "json") -> str:
        """Export the graph to the requested ``format``."""

        projection = to_networkx(self.graph)
        if format == "json":
            return json.dumps(nx.node_link_data(projection), indent=2, sort_keys=True)
        if format == "graphml":
            # GraphML attributes must be scalars.
            for _, data in projection.nodes(data=True):
                data["aliases"] = ",".join(data["aliases"])
                if data["version"] is None:
                    data["version"] = ""
            return "\n".join(nx.generate_graphml(projection))
        raise ValueError(f"Unsupported export format: {format}")
