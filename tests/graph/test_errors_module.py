"""Tests for :mod:`depgraph.graph.errors`."""

from __future__ import annotations

from depgraph.graph.errors import AlreadyExistsError, GraphError, NotFoundError, VersionAlreadyExistsError


def test_not_found_error_is_a_key_error_with_plain_message():
    error = NotFoundError("foo")
    assert isinstance(error, KeyError)
    assert isinstance(error, GraphError)
    assert error.name == "foo"
    assert str(error) == "No node with the name 'foo' has been added"


def test_already_exists_error_names_the_node():
    error = AlreadyExistsError("foo")
    assert error.name == "foo"
    assert "'foo' already exists" in str(error)


def test_version_already_exists_error_carries_name_and_version():
    error = VersionAlreadyExistsError("foo", "2")
    assert (error.name, error.version) == ("foo", "2")
    assert "'2'" in str(error) and "'foo'" in str(error)
