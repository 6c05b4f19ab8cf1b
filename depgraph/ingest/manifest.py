"""Discovery and parsing of installed package manifests."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Literal, Mapping, Optional

LOGGER = logging.getLogger(__name__)

PackageManager = Literal["npm", "bower"]

INSTALL_DIRECTORIES: Dict[str, str] = {
    "npm": "node_modules",
    "bower": "bower_components",
}

MANIFEST_FILES: Dict[str, tuple[str, ...]] = {
    "npm": ("package.json",),
    "bower": (".bower.json", "bower.json"),
}

VERSION_PROPERTIES = ("version", "_release")


class ManifestError(ValueError):
    """Raised when a package manifest cannot be read or lacks required fields."""


@dataclass(frozen=True)
class ManifestRecord:
    """The parts of a package manifest the dependency graph needs."""

    name: str
    version: str
    dependencies: Mapping[str, str] = field(default_factory=dict)
    raw: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Mapping[str, Any], *, fallback_name: str | None = None) -> "ManifestRecord":
        name = data.get("name") or fallback_name
        if not isinstance(name, str) or not name:
            raise ManifestError("Manifest does not declare a package name")
        version = first_defined_property(VERSION_PROPERTIES, data)
        if version is None:
            raise ManifestError(f"Manifest for '{name}' does not declare a version")
        dependencies = data.get("dependencies") or {}
        if not isinstance(dependencies, Mapping):
            raise ManifestError(f"Manifest for '{name}' has malformed dependencies")
        return cls(
            name=name,
            version=str(version),
            dependencies={str(key): str(value) for key, value in dependencies.items()},
            raw=dict(data),
        )


def first_defined_property(properties: Iterable[str], obj: Mapping[str, Any]) -> Optional[Any]:
    """Return the value of the first of ``properties`` present on ``obj``.

    A present key wins even when its value is ``null``.
    """

    for prop in properties:
        if prop in obj:
            return obj[prop]
    return None


def _install_directory(project_path: Path, package_manager: str) -> Path:
    try:
        return Path(project_path) / INSTALL_DIRECTORIES[package_manager]
    except KeyError:
        raise ValueError(f"Unsupported package manager: {package_manager}") from None


def list_installed_dependencies(project_path: str | Path, package_manager: PackageManager) -> List[str]:
    """Return the names of packages installed under ``project_path``.

    npm scope directories (``@scope``) are expanded to ``@scope/name``.
    Files and dot-directories such as ``.bin`` are ignored.
    """

    root = _install_directory(Path(project_path), package_manager)
    if not root.is_dir():
        LOGGER.warning("No %s directory found at %s", root.name, root)
        return []

    names: List[str] = []
    for child in sorted(root.iterdir()):
        if not child.is_dir() or child.name.startswith("."):
            continue
        if package_manager == "npm" and child.name.startswith("@"):
            names.extend(
                f"{child.name}/{scoped.name}"
                for scoped in sorted(child.iterdir())
                if scoped.is_dir() and not scoped.name.startswith(".")
            )
            continue
        names.append(child.name)
    return names


def read_manifest(package_dir: str | Path, package_manager: PackageManager) -> ManifestRecord:
    """Read the manifest in ``package_dir`` for ``package_manager``."""

    package_dir = Path(package_dir)
    try:
        candidates = MANIFEST_FILES[package_manager]
    except KeyError:
        raise ValueError(f"Unsupported package manager: {package_manager}") from None

    for filename in candidates:
        path = package_dir / filename
        if not path.is_file():
            continue
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ManifestError(f"Could not read {path}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise ManifestError(f"{path} must contain a JSON object")
        fallback = package_dir.name
        if package_dir.parent.name.startswith("@"):
            fallback = f"{package_dir.parent.name}/{package_dir.name}"
        return ManifestRecord.from_json(data, fallback_name=fallback)

    raise ManifestError(f"No manifest ({', '.join(candidates)}) found in {package_dir}")


def read_installed_manifests(
    project_path: str | Path, package_manager: PackageManager
) -> Iterable[tuple[str, ManifestRecord | ManifestError]]:
    """Yield ``(package, record_or_error)`` for each installed package, in order."""

    root = _install_directory(Path(project_path), package_manager)
    for package in list_installed_dependencies(project_path, package_manager):
        try:
            yield package, read_manifest(root / package, package_manager)
        except ManifestError as exc:
            yield package, exc


__all__ = [
    "INSTALL_DIRECTORIES",
    "ManifestError",
    "ManifestRecord",
    "PackageManager",
    "first_defined_property",
    "list_installed_dependencies",
    "read_installed_manifests",
    "read_manifest",
]
