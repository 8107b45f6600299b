"""Map combinators

Present-only transform and option-level select, each user function applied
behind the protective boundary."""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok, Option

from .._types import Computation
from ..boundary import guard, invoke
from ..monad import TryOption, wrap
from ..outcome import Absent, Failed, Outcome, Present, to_option

def fmap[T, R](
    computation: Computation[T],
    mapper: Callable[[T], R],
) -> TryOption[R]:
    """
    Apply mapper to a present value.

    Failed propagates untouched, Absent stays Absent, mapper is not called
    for either. A raising mapper yields Failed with its exception.
    """
    source = wrap(computation)

    def run() -> Outcome[R]:
        outcome = source()
        match outcome:
            case Present(value):
                match guard(mapper, value):
                    case Ok(mapped):
                        return Present(mapped)
                    case Error(exc):
                        return Failed(exc)
            case Absent() | Failed(_):
                return outcome
            case _ as unreachable:
                assert_never(unreachable)

    return TryOption(run)

def map_option[T, R](
    computation: Computation[T],
    selector: Callable[[Option[T]], Option[R]],
) -> TryOption[R]:
    """
    Apply selector to the whole optional (Some or Nothing).

    Runs on Present and on Absent; only Failed skips it.
    """
    source = wrap(computation)

    def run() -> Outcome[R]:
        outcome = source()
        match outcome:
            case Failed(_):
                return outcome
            case Present(_) | Absent():
                return invoke(lambda: selector(to_option(outcome)))
            case _ as unreachable:
                assert_never(unreachable)

    return TryOption(run)

__all__ = ("fmap", "map_option")
