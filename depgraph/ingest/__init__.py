"""Manifest ingestion for npm and bower projects."""

from .builder import IngestResult, SkippedItem, build_dependency_graph, generate_declared_dependencies_graph
from .manifest import ManifestError, ManifestRecord, list_installed_dependencies, read_manifest

__all__ = [
    "IngestResult",
    "ManifestError",
    "ManifestRecord",
    "SkippedItem",
    "build_dependency_graph",
    "generate_declared_dependencies_graph",
    "list_installed_dependencies",
    "read_manifest",
]
