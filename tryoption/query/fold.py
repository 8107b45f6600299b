"""
Query and fold combinators
==========================

Each query invokes the computation exactly once. Absent and Failed are the
same here: no contribution. A predicate or folder that raises counts as a
failure at that point and gives the same empty answer.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Ok

from .._types import Computation, Folder, Predicate
from ..boundary import guard
from ..monad import wrap
from ..outcome import Absent, Failed, Present


def count[T](computation: Computation[T]) -> int:
    """1 if Present, else 0."""
    match wrap(computation)():
        case Present(_):
            return 1
        case Absent() | Failed(_):
            return 0
        case _ as unreachable:
            assert_never(unreachable)


def _test[T](computation: Computation[T], predicate: Predicate[T]) -> bool:
    match wrap(computation)():
        case Present(value):
            match guard(predicate, value):
                case Ok(verdict):
                    return bool(verdict)
                case Error(_):
                    return False
        case Absent() | Failed(_):
            return False
        case _ as unreachable:
            assert_never(unreachable)


def exists[T](computation: Computation[T], predicate: Predicate[T]) -> bool:
    """True only if Present and the value satisfies predicate."""
    return _test(computation, predicate)


def where[T](computation: Computation[T], predicate: Predicate[T]) -> bool:
    """Alias for exists()."""
    return exists(computation, predicate)


def forall[T](computation: Computation[T], predicate: Predicate[T]) -> bool:
    """
    True only if Present and the value satisfies predicate.

    NOTE: Absent and Failed give False, not vacuous truth.
          Callers combining forall results depend on this.
    """
    return _test(computation, predicate)


def fold[S, T](computation: Computation[T], state: S, folder: Folder[S, T]) -> S:
    """folder(state, value) if Present, otherwise state unchanged."""
    match wrap(computation)():
        case Present(value):
            match guard(folder, state, value):
                case Ok(folded):
                    return folded
                case Error(_):
                    return state
        case Absent() | Failed(_):
            return state
        case _ as unreachable:
            assert_never(unreachable)


__all__ = ("count", "exists", "fold", "forall", "where")
