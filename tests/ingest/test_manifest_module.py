"""Tests for :mod:`depgraph.ingest.manifest`."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from depgraph.ingest.manifest import (
    ManifestError,
    ManifestRecord,
    first_defined_property,
    list_installed_dependencies,
    read_installed_manifests,
    read_manifest,
)


def write_json(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload))


def test_first_defined_property_prefers_earlier_names():
    assert first_defined_property(["version", "_release"], {"_release": "1", "version": "2"}) == "2"
    assert first_defined_property(["version", "_release"], {"_release": "1"}) == "1"
    assert first_defined_property(["version", "_release"], {"version": None}) is None


def test_first_defined_property_returns_present_null_value():
    assert first_defined_property(["version", "_release"], {"version": None, "_release": "1"}) is None
    with pytest.raises(ManifestError):
        ManifestRecord.from_json({"name": "a", "version": None, "_release": "1"})


def test_manifest_record_from_json_defaults():
    record = ManifestRecord.from_json({"name": "a", "version": "1.0.0"})
    assert record.dependencies == {}
    assert record.raw == {"name": "a", "version": "1.0.0"}


def test_manifest_record_requires_version():
    with pytest.raises(ManifestError):
        ManifestRecord.from_json({"name": "a"})


def test_manifest_record_uses_fallback_name():
    record = ManifestRecord.from_json({"_release": "1.2.0"}, fallback_name="dir-name")
    assert (record.name, record.version) == ("dir-name", "1.2.0")


def test_manifest_record_rejects_malformed_dependencies():
    with pytest.raises(ManifestError):
        ManifestRecord.from_json({"name": "a", "version": "1", "dependencies": ["b"]})


def test_list_installed_dependencies_npm(tmp_path):
    modules = tmp_path / "node_modules"
    (modules / "b").mkdir(parents=True)
    (modules / "a").mkdir()
    (modules / ".bin").mkdir()
    (modules / "@scope" / "pkg").mkdir(parents=True)
    (modules / "README.md").write_text("not a package")

    assert list_installed_dependencies(tmp_path, "npm") == ["@scope/pkg", "a", "b"]


def test_list_installed_dependencies_missing_directory(tmp_path):
    assert list_installed_dependencies(tmp_path, "bower") == []


def test_list_installed_dependencies_rejects_unknown_manager(tmp_path):
    with pytest.raises(ValueError):
        list_installed_dependencies(tmp_path, "yarn")


def test_read_manifest_npm(tmp_path):
    write_json(
        tmp_path / "a" / "package.json",
        {"name": "a", "version": "1.0.0", "dependencies": {"b": "^2.0.0"}},
    )
    record = read_manifest(tmp_path / "a", "npm")
    assert record.name == "a"
    assert record.version == "1.0.0"
    assert record.dependencies == {"b": "^2.0.0"}


def test_read_manifest_bower_prefers_installed_metadata(tmp_path):
    package = tmp_path / "polymer"
    write_json(package / "bower.json", {"name": "polymer"})
    write_json(package / ".bower.json", {"name": "polymer", "_release": "1.9.3"})

    record = read_manifest(package, "bower")
    assert record.version == "1.9.3"


def test_read_manifest_scoped_fallback_name(tmp_path):
    write_json(tmp_path / "@scope" / "pkg" / "package.json", {"version": "1.0.0"})
    assert read_manifest(tmp_path / "@scope" / "pkg", "npm").name == "@scope/pkg"


def test_read_manifest_errors(tmp_path):
    with pytest.raises(ManifestError):
        read_manifest(tmp_path, "npm")

    (tmp_path / "package.json").write_text("{not json")
    with pytest.raises(ManifestError):
        read_manifest(tmp_path, "npm")

    (tmp_path / "package.json").write_text("[]")
    with pytest.raises(ManifestError):
        read_manifest(tmp_path, "npm")


def test_read_installed_manifests_yields_errors_in_place(tmp_path):
    modules = tmp_path / "node_modules"
    write_json(modules / "a" / "package.json", {"name": "a", "version": "1.0.0"})
    (modules / "broken").mkdir()

    outcomes = dict(read_installed_manifests(tmp_path, "npm"))
    assert isinstance(outcomes["a"], ManifestRecord)
    assert isinstance(outcomes["broken"], ManifestError)
