"""
Running a TryOption down to plain values.

Each function invokes the computation exactly once.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Option, Result

from .._helpers import require
from .._types import Computation, Thunk
from ..monad import wrap
from ..outcome import Absent, Failed, Outcome, Present, to_result as outcome_to_result


def to_outcome[T](computation: Computation[T]) -> Outcome[T]:
    """Run and return the Outcome. Same as calling the TryOption."""
    return wrap(computation)()


def to_result[T](computation: Computation[T]) -> Result[Option[T], Exception]:
    """Run and return Ok(Some(v)) / Ok(Nothing()) / Error(exc)."""
    return outcome_to_result(to_outcome(computation))


def recover_value[T](computation: Computation[T], default: T) -> T:
    """
    Run and return the value, or default on Absent or Failed.

    NOTE: default=None raises MissingDefaultError immediately, before the
          computation runs. Use recover_compute(c, lambda: None) if None is
          really wanted.
    """
    fallback = require(default, "default")
    match to_outcome(computation):
        case Present(value):
            return value
        case Absent() | Failed(_):
            return fallback
        case _ as unreachable:
            assert_never(unreachable)


def recover_compute[T](computation: Computation[T], default: Thunk[T]) -> T:
    """Run and return the value, or default() on Absent or Failed."""
    match to_outcome(computation):
        case Present(value):
            return value
        case Absent() | Failed(_):
            return default()
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "recover_compute",
    "recover_value",
    "to_outcome",
    "to_result",
)
