"""Unit tests for the lightweight Result utilities."""

from __future__ import annotations

import pytest

from redfishkit.core.errors import CollectionError
from redfishkit.core.result import Err, Ok, Result, err, ok


def test_ok_map_keeps_values_typed() -> None:
    """`Ok` should map and keep values typed."""
    r: Result[int, str] = ok(10)
    r2 = r.map(lambda x: x + 5)
    assert isinstance(r2, Ok) and r2.unwrap() == 15


def test_err_propagates_through_map() -> None:
    r: Result[int, str] = err("boom")
    assert r.is_err()
    r2 = r.map(lambda x: x + 1)
    assert isinstance(r2, Err) and r2.unwrap_err() == "boom"


def test_unwrap_raises_exception_payloads_as_is() -> None:
    """An exception payload is raised unchanged, so callers can catch it by type."""
    failure = CollectionError("/redfish/v1/Systems", [], {"/redfish/v1/Systems/1": KeyError("x")})
    r: Result[list[str], CollectionError] = err(failure)

    with pytest.raises(CollectionError) as info:
        r.unwrap()
    assert info.value is failure


def test_unwrap_wraps_plain_payloads() -> None:
    with pytest.raises(RuntimeError, match="unwrap Err"):
        err("nope").unwrap()


def test_unwrap_err_on_ok_raises() -> None:
    with pytest.raises(RuntimeError):
        ok(1).unwrap_err()
