"""Populate a :class:`DependencyGraph` from installed package manifests."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Literal, Mapping

from depgraph.graph.dependency import DependencyGraph
from depgraph.graph.errors import AlreadyExistsError, NotFoundError
from depgraph.graph.ids import stringify_dependency_metadata
from depgraph.graph.model import DependencyMetadata

from .manifest import ManifestError, ManifestRecord, PackageManager, read_installed_manifests

LOGGER = logging.getLogger(__name__)

SkipKind = Literal["manifest", "duplicate", "missing"]


@dataclass(frozen=True)
class SkippedItem:
    """A manifest or declaration left out of the graph in non-strict mode."""

    kind: SkipKind
    subject: str
    reason: str
    packages: tuple[str, ...] = ()

    def to_payload(self) -> dict:
        return {
            "kind": self.kind,
            "subject": self.subject,
            "reason": self.reason,
            "packages": list(self.packages),
        }


@dataclass
class IngestResult:
    """The built graph together with everything that was skipped."""

    graph: DependencyGraph
    skipped: List[SkippedItem] = field(default_factory=list)


def declared_dependencies(data: Any) -> Dict[str, str]:
    """Return the ``dependencies`` mapping of a stored manifest."""

    if isinstance(data, ManifestRecord):
        declared = data.dependencies
    elif isinstance(data, Mapping):
        declared = data.get("dependencies") or {}
    else:
        return {}
    return {str(name): str(version) for name, version in declared.items()}


def build_dependency_graph(records: Iterable[ManifestRecord], *, strict: bool = False) -> IngestResult:
    """Build a graph from ``records``.

    Real dependencies are registered first, then every declared range that
    is not yet an alias of its target is added as an implied dependency, and
    finally the edges between packages are created. With ``strict`` the
    first problem propagates; otherwise it is logged and recorded in
    :attr:`IngestResult.skipped`.
    """

    result = IngestResult(graph=DependencyGraph())
    graph = result.graph

    for record in records:
        metadata = DependencyMetadata(name=record.name, version=record.version)
        try:
            graph.add_real_dependency(metadata, dict(record.raw) or {"dependencies": dict(record.dependencies)})
        except AlreadyExistsError as exc:
            _skip(result, strict, exc, "duplicate", stringify_dependency_metadata(metadata), (metadata.name,))

    declarations = [
        (source, DependencyMetadata(name=name, version=declared))
        for source in graph.list_all_real_dependencies()
        for name, declared in declared_dependencies(graph.get_dependency_data(source)).items()
    ]

    resolved = []
    for source, target in declarations:
        try:
            if not graph.version_exists(target.name)(target.version):
                graph.add_implied_dependency(target)
        except NotFoundError as exc:
            _skip(
                result,
                strict,
                exc,
                "missing",
                f"{source} -> {stringify_dependency_metadata(target)}",
                (source, target.name),
            )
            continue
        resolved.append((source, target))

    for source, target in resolved:
        graph.create_inter_dependency(source, target)

    LOGGER.debug(
        "Built dependency graph with %d packages (%d skipped)",
        len(graph.list_nodes()),
        len(result.skipped),
    )
    return result


def generate_declared_dependencies_graph(
    project_path: str | Path,
    package_manager: PackageManager = "npm",
    *,
    strict: bool = False,
) -> IngestResult:
    """Scan ``project_path`` and build the graph of its installed packages."""

    records: List[ManifestRecord] = []
    skipped: List[SkippedItem] = []
    for package, outcome in read_installed_manifests(project_path, package_manager):
        if isinstance(outcome, ManifestError):
            if strict:
                raise outcome
            LOGGER.warning("Skipping %s: %s", package, outcome)
            skipped.append(SkippedItem(kind="manifest", subject=package, reason=str(outcome), packages=(package,)))
            continue
        records.append(outcome)

    result = build_dependency_graph(records, strict=strict)
    result.skipped[:0] = skipped
    return result


def _skip(
    result: IngestResult,
    strict: bool,
    exc: Exception,
    kind: SkipKind,
    subject: str,
    packages: tuple[str, ...],
) -> None:
    if strict:
        raise exc
    LOGGER.warning("Skipping %s: %s", subject, exc)
    result.skipped.append(SkippedItem(kind=kind, subject=subject, reason=str(exc), packages=packages))


__all__ = [
    "IngestResult",
    "SkippedItem",
    "build_dependency_graph",
    "declared_dependencies",
    "generate_declared_dependencies_graph",
]
