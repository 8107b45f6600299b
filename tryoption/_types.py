"""
Core type definitions for tryoption.

Aliases used across the whole library.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Option

from .outcome import Outcome

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Folder = state step over a present value
type Folder[S, T] = Callable[[S, T], S]

# Computation = zero-arg deferred computation.
# NOTE: may return either a kungfu Option (plain success payload) or an
#       already-built Outcome (e.g. Failed from a nested invocation).
type Computation[T] = Callable[[], Option[T] | Outcome[T]]

# Thunk = zero-arg callable producing a plain value
type Thunk[T] = Callable[[], T]

__all__ = (
    "Computation",
    "Folder",
    "Predicate",
    "Thunk",
)
