"""Typed Result container for calls whose failure is part of the answer.

Motivation
----------
A collection fetch is best-effort: some members may fail while the rest are
perfectly usable. Raising would throw the usable members away, and returning
a bare list would hide the failures. The fetcher therefore returns a
``Result[list[T], CollectionError]``:

- ``Ok(items)``  : every member was fetched.
- ``Err(error)`` : some members failed; ``error.items`` still carries the ones
  that did not.

Example
-------
>>> from redfishkit.core.result import ok, err, Result
>>> r: Result[int, ValueError] = err(ValueError("no"))
>>> r.is_err()
True
>>> ok(3).unwrap()
3
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, cast

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


class Result(Generic[T, E]):
    """Sum type representing either success (`Ok[T]`) or failure (`Err[E]`)."""

    def is_ok(self) -> bool:
        """Return ``True`` if this is an :class:`Ok` value."""
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        """Return ``True`` if this is an :class:`Err` value."""
        return isinstance(self, Err)

    def unwrap(self) -> T:
        """Return the success value, or raise the error.

        When the error payload is an exception it is raised as-is, which gives
        callers who want all-or-nothing semantics a one-call way to get them.
        Any other payload is wrapped in a :class:`RuntimeError`.
        """
        if isinstance(self, Ok):
            return cast(Ok[T, E], self).value
        error = cast(Err[T, E], self).error
        if isinstance(error, BaseException):
            raise error
        raise RuntimeError(f"Attempted to unwrap Err: {self!r}")

    def unwrap_err(self) -> E:
        """Return the error value if ``Err``, else raise."""
        if isinstance(self, Err):
            return cast(Err[T, E], self).error
        raise RuntimeError(f"Attempted to unwrap_err on Ok: {self!r}")

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply ``fn`` to the success value; propagate error unchanged."""
        if isinstance(self, Ok):
            return Ok(fn(cast(Ok[T, E], self).value))
        return cast(Result[U, E], self)

    def __repr__(self) -> str:  # pragma: no cover - trivial representation
        if isinstance(self, Ok):
            return f"Ok({cast(Ok[T, E], self).value!r})"
        if isinstance(self, Err):
            return f"Err({cast(Err[T, E], self).error!r})"
        return "Result(?)"


@dataclass(frozen=True, repr=False)
class Ok(Result[T, E]):
    """Successful result wrapping a value of type ``T``."""

    value: T


@dataclass(frozen=True, repr=False)
class Err(Result[T, E]):
    """Failed result wrapping an error payload of type ``E``."""

    error: E


def ok(value: T) -> Result[T, E]:
    """Construct :class:`Ok` with better type inference at call sites."""
    return Ok(value)


def err(error: E) -> Result[T, E]:
    """Construct :class:`Err` with better type inference at call sites."""
    return Err(error)


__all__ = ["Result", "Ok", "Err", "ok", "err"]
