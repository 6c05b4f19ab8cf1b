"""Serialisation utilities for built dependency graphs."""

from .export import GraphExporter

__all__ = ["GraphExporter"]
