"""
Protective invocation boundary
==============================

Every call into user code goes through here: the wrapped computation itself,
and every mapper, binder, predicate, folder and handler applied afterwards.
Any Exception raised inside is captured and turned into a failure at the
exact point it occurred. Nothing raised by user code escapes.

BaseException subclasses outside Exception (KeyboardInterrupt, SystemExit)
are not faults and propagate.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from kungfu import Error, Nothing, Ok, Result, Some

from ._errors import InvalidOutcomeError
from ._types import Computation
from .outcome import OUTCOME_TYPES, Failed, Outcome, from_optional

log = logging.getLogger(__name__)


def invoke[T](computation: Computation[T]) -> Outcome[T]:
    """
    Force a deferred computation and always return a well-formed Outcome.

    - returns Some(v)        -> Present(v)
    - returns Nothing()      -> Absent()
    - returns an Outcome     -> that Outcome (Failed from a nested invocation stays Failed)
    - returns anything else  -> Failed(InvalidOutcomeError)
    - raises                 -> Failed(exc)
    """
    try:
        produced = computation()
    except Exception as exc:
        log.debug("Captured %s from deferred computation", type(exc).__name__)
        return Failed(exc)

    if isinstance(produced, OUTCOME_TYPES):
        return produced
    if isinstance(produced, (Some, Nothing)):
        return from_optional(produced)

    error = InvalidOutcomeError(produced)
    log.debug("Captured %s from deferred computation", type(error).__name__)
    return Failed(error)


def guard[R](func: Callable[..., R], /, *args: object) -> Result[R, Exception]:
    """
    Apply a user function under the boundary.

    Ok(result) if it returned, Error(exc) if it raised.
    """
    try:
        return Ok(func(*args))
    except Exception as exc:
        log.debug(
            "Captured %s from %s",
            type(exc).__name__,
            getattr(func, "__qualname__", repr(func)),
        )
        return Error(exc)


__all__ = ("guard", "invoke")
