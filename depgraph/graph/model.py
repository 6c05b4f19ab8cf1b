"""Data structures describing packages stored in the dependency graph."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class DependencyMetadata:
    """A package name paired with a single version or declared range."""

    name: str
    version: str


@dataclass
class DependencyNode:
    """A real package registered at its canonical version.

    ``aliases`` always starts out holding ``version`` and only grows as other
    packages declare the same package under different ranges.
    """

    name: str
    data: Any
    version: str
    aliases: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.version not in self.aliases:
            self.aliases.insert(0, self.version)

    @property
    def metadata(self) -> DependencyMetadata:
        return DependencyMetadata(name=self.name, version=self.version)

    def has_alias(self, version: str) -> bool:
        return version in self.aliases


__all__ = ["DependencyMetadata", "DependencyNode"]
