"""Helpers for dependency name tokens and timestamps."""
from __future__ import annotations

import datetime as _dt

from .model import DependencyMetadata

SEPARATOR = "@"


def stringify_dependency_metadata(metadata: DependencyMetadata) -> str:
    """Return the ``<name>@<version>`` token for ``metadata``."""

    if SEPARATOR in metadata.version:
        raise ValueError(f"Version '{metadata.version}' must not contain '{SEPARATOR}'")
    return f"{metadata.name}{SEPARATOR}{metadata.version}"


def parse_dependency_metadata(value: str) -> DependencyMetadata:
    """Parse a ``<name>@<version>`` token back into :class:`DependencyMetadata`.

    The version is everything after the last ``@`` that is not the leading
    character, which keeps scoped npm names such as ``@scope/pkg@1.0.0``
    intact. Only that leading ``@`` may appear in the name. Tokens without a
    separator, with a stray ``@`` in the name, or with an empty version raise
    :class:`ValueError`.
    """

    index = value.rfind(SEPARATOR)
    if index <= 0:
        raise ValueError(f"'{value}' is not a valid dependency name")
    name, version = value[:index], value[index + 1 :]
    if SEPARATOR in name[1:]:
        raise ValueError(f"'{value}' has more than one version separator")
    if not version:
        raise ValueError(f"'{value}' does not declare a version")
    return DependencyMetadata(name=name, version=version)


def utc_now() -> str:
    """Return the current UTC time formatted as an ISO 8601 string."""

    return _dt.datetime.now(_dt.timezone.utc).isoformat()


__all__ = ["parse_dependency_metadata", "stringify_dependency_metadata", "utc_now"]
