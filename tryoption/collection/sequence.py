"""Sequence combinators

Conversion of a deferred computation into an error-tagged sequence of at most
one element: Ok(value) for Present, Error(exc) for Failed, empty for Absent."""

from __future__ import annotations

from collections.abc import Iterator
from typing import assert_never

from kungfu import Error, Ok, Result

from .._types import Computation
from ..monad import wrap
from ..outcome import Absent, Failed, Present

def tagged[T](computation: Computation[T]) -> Iterator[Result[T, Exception]]:
    """
    Lazy, one-shot sequence.

    NOTE: The computation runs on first next(), not when tagged() is called.
          The iterator cannot be restarted; call tagged() again to re-run.
    """
    source = wrap(computation)

    def run() -> Iterator[Result[T, Exception]]:
        match source():
            case Present(value):
                yield Ok(value)
            case Failed(error):
                yield Error(error)
            case Absent():
                return
            case _ as unreachable:
                assert_never(unreachable)

    return run()

def to_list[T](computation: Computation[T]) -> list[Result[T, Exception]]:
    """Drain tagged() into a list."""
    return list(tagged(computation))

def to_tuple[T](computation: Computation[T]) -> tuple[Result[T, Exception], ...]:
    """Drain tagged() into a tuple."""
    return tuple(tagged(computation))

__all__ = ("tagged", "to_list", "to_tuple")
