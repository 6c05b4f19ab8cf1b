"""Public API surface for the dependency graph."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from depgraph import config
from depgraph.graph.dependency import DependencyGraph
from depgraph.graph.errors import NotFoundError
from depgraph.graph.model import DependencyNode
from depgraph.graph.query import QueryService
from depgraph.ingest.builder import IngestResult, generate_declared_dependencies_graph
from depgraph.obs.events import EventBus
from depgraph.persist.export import GraphExporter
from depgraph.router import ActionRouter


@dataclass
class DependencyGraphApp:
    """Container wiring the graph, ingestion and reporting subsystems together."""

    graph: DependencyGraph = field(default_factory=DependencyGraph)
    event_bus: EventBus = field(default_factory=EventBus)
    router: ActionRouter = field(default_factory=ActionRouter)

    def __post_init__(self) -> None:
        self._register_default_actions()

    def handle(self, payload: dict) -> dict:
        """Dispatch an API payload and return a canonical response.

        ``events`` holds only the events produced while handling this payload.
        """

        action = payload.get("action")
        if not action:
            raise KeyError("payload must include 'action'")
        params = payload.get("params", {})
        mark = self.event_bus.mark()
        result = self.router.dispatch(action, params)
        self.event_bus.emit(
            level="info",
            action=action,
            msg=f"Executed action '{action}'",
            packages=[params["name"]] if params.get("name") else (),
        )
        return {
            "ok": True,
            "result": result,
            "events": [event.to_payload() for event in self.event_bus.since(mark)],
        }

    def _register_default_actions(self) -> None:
        self.router.register("scan", self._handle_scan)
        self.router.register("list_dependencies", self._handle_list_dependencies)
        self.router.register("get_dependency", self._handle_get_dependency, required=("name",))
        self.router.register("dependencies_of", self._handle_dependencies_of, required=("name",))
        self.router.register("dependants_of", self._handle_dependants_of, required=("name",))
        self.router.register("query", self._handle_query, required=("name",))
        self.router.register("export", self._handle_export)
        self.router.register("events", self._handle_events)

    def _handle_scan(self, params: dict) -> dict:
        result = self.scan(
            project_path=params.get("project_path"),
            package_manager=params.get("package_manager"),
            strict=params.get("strict"),
        )
        return {
            "packages": self.graph.list_all_real_dependencies(),
            "skipped": [item.to_payload() for item in result.skipped],
        }

    def _handle_list_dependencies(self, params: dict) -> dict:
        return {"packages": self.graph.list_all_real_dependencies()}

    def _handle_get_dependency(self, params: dict) -> dict:
        return self.describe(params["name"])

    def _handle_dependencies_of(self, params: dict) -> dict:
        name = params["name"]
        return {"name": name, "dependencies": self.graph.list_dependencies_of_dependency(name)}

    def _handle_dependants_of(self, params: dict) -> dict:
        name = params["name"]
        return {"name": name, "dependants": self.graph.list_dependants_of_dependency(name)}

    def _handle_query(self, params: dict) -> dict:
        return self.query(
            kind=params.get("kind", "dependencies"),
            name=params["name"],
            hop=params.get("hop"),
        )

    def _handle_export(self, params: dict) -> dict:
        export_format = params.get("format", "json")
        return {"format": export_format, "content": GraphExporter(self.graph).export(format=export_format)}

    def _handle_events(self, params: dict) -> dict:
        events = self.event_bus.history(level=params.get("level"), package=params.get("package"))
        return {"events": [event.to_payload() for event in events]}

    # ------------------------------------------------------------------
    # High level operations
    # ------------------------------------------------------------------

    def scan(
        self,
        *,
        project_path: str | Path | None = None,
        package_manager: str | None = None,
        strict: bool | str | None = None,
    ) -> IngestResult:
        """Replace the current graph with one built from ``project_path``.

        ``strict`` accepts a bool or a flag string such as ``"false"``; when
        omitted ``DEPGRAPH_STRICT`` decides.
        """

        result = generate_declared_dependencies_graph(
            project_path or config.project_path(),
            package_manager or config.package_manager(),
            strict=config.parse_bool(strict, default=config.strict()),
        )
        self.graph = result.graph
        for item in result.skipped:
            self.event_bus.emit(
                level="warning",
                action="scan",
                msg=f"Skipped {item.kind} '{item.subject}': {item.reason}",
                packages=item.packages,
                details=item.to_payload(),
            )
        return result

    def describe(self, name: str) -> dict:
        """Return the serialisable view of the package ``name``."""

        node = self.graph.get_node(name)
        if not isinstance(node, DependencyNode):
            raise NotFoundError(name)
        return {
            "name": node.name,
            "version": node.version,
            "aliases": list(node.aliases),
            "dependencies": self.graph.list_dependencies_of_dependency(name),
            "dependants": self.graph.list_dependants_of_dependency(name),
        }

    def query(self, *, kind: str, name: str, hop: int | None = None) -> dict:
        service = QueryService(self.graph)
        if kind == "dependencies":
            items = list(service.dependencies(name, hop=hop))
        elif kind == "dependants":
            items = list(service.dependants(name, hop=hop))
        else:
            raise ValueError(f"Unsupported query kind: {kind}")
        return {"items": items}


__all__ = ["DependencyGraphApp"]
