"""Internal helpers for tryoption.

Small adapters shared by the combinator modules."""

from __future__ import annotations

from collections.abc import Callable

from ._errors import MissingDefaultError

def const[R](value: R) -> Callable[[], R]:
    """Adapt a constant into a zero-arg branch."""
    return lambda: value

def require[T](value: T | None, argument: str) -> T:
    """Reject a None required default. Raised eagerly, at the call site."""
    if value is None:
        raise MissingDefaultError(argument)
    return value

__all__ = ("const", "require")
