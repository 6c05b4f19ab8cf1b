"""Dependency graph package initialization.

The graph itself lives in :mod:`depgraph.graph`; :class:`DependencyGraphApp`
wraps ingestion and reporting behind a single action-based entry point.
"""

from .api import DependencyGraphApp
from .graph import DependencyGraph, DependencyMetadata

__all__ = ["DependencyGraph", "DependencyGraphApp", "DependencyMetadata"]
