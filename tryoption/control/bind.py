"""
Bind combinators
================

Sequencing with short-circuit on Absent and Failed.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Error, Ok

from .._types import Computation
from ..boundary import guard, invoke
from ..monad import TryOption, wrap
from ..outcome import Absent, Failed, Outcome, Present


def _step[T, R](
    outcome: Outcome[T],
    binder: Callable[[T], Computation[R]],
) -> Outcome[R]:
    match outcome:
        case Present(value):
            match guard(binder, value):
                case Ok(following):
                    return invoke(following)
                case Error(exc):
                    return Failed(exc)
        case Absent() | Failed(_):
            return outcome
        case _ as unreachable:
            assert_never(unreachable)


def bind[T, R](
    computation: Computation[T],
    binder: Callable[[T], Computation[R]],
) -> TryOption[R]:
    """
    Monadic bind: on Present(v) build binder(v) and invoke it.

    binder is never called on Absent or Failed; those states pass through.
    Building the next computation and invoking it are both guarded.
    """
    source = wrap(computation)

    def run() -> Outcome[R]:
        return _step(source(), binder)

    return TryOption(run)


def select_many[T, U, R](
    computation: Computation[T],
    binder: Callable[[T], Computation[U]],
    combine: Callable[[T, U], R],
) -> TryOption[R]:
    """
    Two-stage bind that combines both values.

    Short-circuits at every stage; the first failure is the one carried.

    Example:
        total = select_many(
            find_order(order_id),
            lambda order: find_customer(order.customer_id),
            lambda order, customer: Invoice(order, customer),
        )
    """
    source = wrap(computation)

    def run() -> Outcome[R]:
        first = source()
        match first:
            case Present(value):
                second = _step(first, binder)
                match second:
                    case Present(other):
                        match guard(combine, value, other):
                            case Ok(combined):
                                return Present(combined)
                            case Error(exc):
                                return Failed(exc)
                    case Absent() | Failed(_):
                        return second
                    case _ as unreachable:
                        assert_never(unreachable)
            case Absent() | Failed(_):
                return first
            case _ as unreachable:
                assert_never(unreachable)

    return TryOption(run)


__all__ = ("bind", "select_many")
