"""
Match combinators
=================

Exhaustive three-way elimination. One canonical implementation (match);
the constant and action flavours adapt their arguments and delegate.

Branch handlers are the caller's own continuation and run outside the
protective boundary: whatever they raise reaches the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from .._helpers import const, require
from .._types import Computation, Thunk
from ..monad import wrap
from ..outcome import Absent, Failed, Present


def match[T, R](
    computation: Computation[T],
    *,
    some: Callable[[T], R],
    none: Thunk[R],
    fail: Callable[[Exception], R],
) -> R:
    """
    Invoke once and dispatch on the outcome.

    Example:
        message = match(
            load_profile(user_id),
            some=lambda p: f"hello, {p.name}",
            none=lambda: "no profile",
            fail=lambda e: f"fail: {e}",
        )
    """
    outcome = wrap(computation)()
    match outcome:
        case Present(value):
            return some(value)
        case Absent():
            return none()
        case Failed(error):
            return fail(error)
        case _ as unreachable:
            assert_never(unreachable)


def match_const[T, R](
    computation: Computation[T],
    *,
    some: Callable[[T], R],
    none: R,
    fail: R,
) -> R:
    """
    match with constant none/fail results.

    fail=None is a usage error (MissingDefaultError), raised before the
    computation is invoked. none=None is allowed.
    """
    fail_value = require(fail, "fail")
    return match(
        computation,
        some=some,
        none=const(none),
        fail=lambda _: fail_value,
    )


def match_do[T](
    computation: Computation[T],
    *,
    some: Callable[[T], object],
    none: Callable[[], object],
    fail: Callable[[Exception], object],
) -> None:
    """Side-effecting match. Handler results are discarded."""
    match(computation, some=some, none=none, fail=fail)


__all__ = ("match", "match_const", "match_do")
