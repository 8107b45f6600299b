"""Shared test doubles."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from kungfu import Error, Ok, Result


class Boom(Exception):
    """Marker exception raised by failing test computations."""


@dataclass
class Spy:
    """Wraps a function and records every call."""

    func: Callable[..., Any]
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.func(*args)

    @property
    def count(self) -> int:
        return len(self.calls)


def raising(error: BaseException) -> Callable[..., Any]:
    def run(*_: Any) -> Any:
        raise error

    return run


def unwrap_tagged[T](item: Result[T, Exception]) -> tuple[str, Any]:
    """Flatten a kungfu Result into a comparable (tag, payload) pair."""
    match item:
        case Ok(value):
            return ("ok", value)
        case Error(error):
            return ("error", error)
    raise AssertionError(f"not a Result: {item!r}")
