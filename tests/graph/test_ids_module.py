"""Tests for :mod:`depgraph.graph.ids`."""

from __future__ import annotations

import pytest

from depgraph.graph import ids
from depgraph.graph.model import DependencyMetadata


def test_stringify_joins_name_and_version():
    token = ids.stringify_dependency_metadata(DependencyMetadata(name="foo", version="1.0.0"))
    assert token == "foo@1.0.0"


@pytest.mark.parametrize(
    "metadata",
    [
        DependencyMetadata(name="foo", version="1.0.0"),
        DependencyMetadata(name="foo", version="^2.0.0"),
        DependencyMetadata(name="@scope/pkg", version="3.1.4"),
    ],
)
def test_parse_reverses_stringify(metadata):
    assert ids.parse_dependency_metadata(ids.stringify_dependency_metadata(metadata)) == metadata


def test_parse_splits_on_single_separator():
    assert ids.parse_dependency_metadata("foo@1.0.0") == DependencyMetadata(name="foo", version="1.0.0")


@pytest.mark.parametrize("token", ["foo", "@foo", "foo@", "@scope/pkg", "", "a@b@c", "@scope@x@1"])
def test_parse_rejects_malformed_tokens(token):
    with pytest.raises(ValueError):
        ids.parse_dependency_metadata(token)


def test_stringify_rejects_version_containing_separator():
    with pytest.raises(ValueError):
        ids.stringify_dependency_metadata(DependencyMetadata(name="foo", version="npm:bar@1"))


def test_utc_now_returns_iso_format():
    timestamp = ids.utc_now()
    assert "T" in timestamp and timestamp.endswith("+00:00")
