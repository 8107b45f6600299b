"""Recover combinators

Lazy recovery from Failed. Absent is not a failure and is left alone."""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok

from .._types import Computation
from ..boundary import guard
from ..monad import TryOption, wrap
from ..outcome import Absent, Failed, Outcome, Present

def recover_with[T](
    computation: Computation[T],
    *,
    handler: Callable[[Exception], T],
) -> TryOption[T]:
    """Turn Failed into Present using recovery function. A raising handler fails again."""
    source = wrap(computation)

    def run() -> Outcome[T]:
        outcome = source()
        match outcome:
            case Failed(error):
                match guard(handler, error):
                    case Ok(recovered):
                        return Present(recovered)
                    case Error(exc):
                        return Failed(exc)
            case Present(_) | Absent():
                return outcome
            case _ as unreachable:
                assert_never(unreachable)

    return TryOption(run)

__all__ = ("recover_with",)
