"""Integration-style tests for :mod:`depgraph.router`."""

from __future__ import annotations

import pytest

from depgraph.api import DependencyGraphApp
from depgraph.graph.model import DependencyMetadata
from depgraph.router import ActionRouter


def test_router_dispatches_registered_handler():
    router = ActionRouter()
    router.register("echo", lambda params: {"echo": params["value"]}, required=("value",))

    assert router.dispatch("echo", {"value": 3}) == {"echo": 3}
    assert router.actions() == ["echo"]


def test_router_rejects_missing_required_params():
    router = ActionRouter()
    router.register("describe", lambda params: params, required=("name",))

    for params in ({}, {"name": ""}, {"name": None}):
        with pytest.raises(KeyError) as excinfo:
            router.dispatch("describe", params)
        assert "requires: name" in str(excinfo.value)


def test_router_dispatch_unknown_action_lists_known_ones():
    router = ActionRouter()
    router.register("scan", lambda params: {})
    router.register("export", lambda params: {})

    with pytest.raises(KeyError) as excinfo:
        router.dispatch("unknown_action", {})
    message = str(excinfo.value)
    assert "unknown_action" in message
    assert "export, scan" in message


def test_app_router_exposes_graph_actions():
    app = DependencyGraphApp()
    app.graph.add_real_dependency(DependencyMetadata(name="a", version="1.0.0"), None)

    result = app.router.dispatch("list_dependencies", {})
    assert result == {"packages": ["a"]}
    assert {"scan", "dependencies_of", "dependants_of", "export", "events"}.issubset(app.router.actions())
