"""Tests for :mod:`depgraph.cli`."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from depgraph import cli


def install(project: Path, name: str, payload: dict) -> None:
    package = project / "bower_components" / name
    package.mkdir(parents=True)
    (package / ".bower.json").write_text(json.dumps(payload))


@pytest.fixture()
def project(tmp_path) -> Path:
    install(tmp_path, "app", {"name": "app", "_release": "1.0.0", "dependencies": {"polymer": "^1.0.0"}})
    install(tmp_path, "polymer", {"name": "polymer", "version": "1.9.3"})
    return tmp_path


def test_main_lists_packages(project, capsys):
    assert cli.main([str(project), "--manager", "bower"]) == 0
    assert json.loads(capsys.readouterr().out) == {"packages": ["app", "polymer"]}


def test_main_lists_dependants(project, capsys):
    assert cli.main([str(project), "--manager", "bower", "--dependants", "polymer"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output == {"name": "polymer", "dependants": {"app": "^1.0.0"}}


def test_main_exports_graphml(project, capsys):
    assert cli.main([str(project), "--manager", "bower", "--export", "graphml"]) == 0
    assert "<graphml" in capsys.readouterr().out


def test_main_reports_graph_errors(project, capsys):
    assert cli.main([str(project), "--manager", "bower", "--dependencies", "missing"]) == 1
    assert "missing" in capsys.readouterr().err


def test_main_rejects_conflicting_reports(project):
    with pytest.raises(SystemExit):
        cli.main([str(project), "--dependencies", "a", "--dependants", "b"])


def test_main_reports_unsupported_package_manager(project, capsys, monkeypatch):
    monkeypatch.setenv("DEPGRAPH_PACKAGE_MANAGER", "yarn")
    assert cli.main([str(project)]) == 1
    assert "Unsupported package manager: yarn" in capsys.readouterr().err
