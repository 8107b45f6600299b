"""
Outcome - tri-state result of a deferred computation
====================================================

Exactly one of:
- Present(value): the computation produced a value
- Absent():       the computation produced an explicit "no value"
- Failed(error):  the computation (or a function applied to its value) raised

Outcomes are built explicitly through from_value / from_optional / from_error.
There is no implicit coercion from bare values.
"""

from __future__ import annotations

import typing
from typing import assert_never

from kungfu import Error, Nothing, Ok, Option, Result, Some


class Present[T]:
    """Outcome holding a value."""

    __slots__ = ("_value",)
    __match_args__ = ("_value",)

    def __init__(self, value: T, /) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Present) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Present, self._value))

    def __repr__(self) -> str:
        return f"Present({self._value!r})"


class Absent:
    """Outcome holding nothing. Expected, not exceptional."""

    __slots__ = ()
    __match_args__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Absent)

    def __hash__(self) -> int:
        return hash(Absent)

    def __repr__(self) -> str:
        return "Absent()"


class Failed:
    """Outcome holding the exception raised while producing or transforming a value."""

    __slots__ = ("_error",)
    __match_args__ = ("_error",)

    def __init__(self, error: Exception, /) -> None:
        self._error = error

    @property
    def error(self) -> Exception:
        return self._error

    def __eq__(self, other: object) -> bool:
        # Identity: the same captured exception, not an equal-looking one
        return isinstance(other, Failed) and self._error is other._error

    def __hash__(self) -> int:
        return hash((Failed, id(self._error)))

    def __repr__(self) -> str:
        return f"Failed({self._error!r})"


type Outcome[T] = Present[T] | Absent | Failed

OUTCOME_TYPES: typing.Final = (Present, Absent, Failed)


# ============================================================================
# Explicit constructors
# ============================================================================


def from_value[T](value: T | None) -> Outcome[T]:
    """None collapses to Absent, anything else is Present."""
    if value is None:
        return Absent()
    return Present(value)


def from_optional[T](option: Option[T]) -> Outcome[T]:
    """Some(v) -> Present(v), Nothing -> Absent. Never Failed."""
    match option:
        case Some(value):
            return Present(value)
        case Nothing():
            return Absent()
        case _ as unreachable:
            assert_never(unreachable)


def from_error(error: Exception) -> Failed:
    """A caught error is always Failed."""
    return Failed(error)


# ============================================================================
# Conversions
# ============================================================================


def to_option[T](outcome: Outcome[T]) -> Option[T]:
    """Forget the failure channel: Failed and Absent both become Nothing."""
    match outcome:
        case Present(value):
            return Some(value)
        case Absent() | Failed(_):
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


def to_result[T](outcome: Outcome[T]) -> Result[Option[T], Exception]:
    """
    Re-express an Outcome with kungfu types.

    Present(v) -> Ok(Some(v)), Absent -> Ok(Nothing()), Failed(e) -> Error(e).
    """
    match outcome:
        case Present(value):
            return Ok(Some(value))
        case Absent():
            return Ok(Nothing())
        case Failed(error):
            return Error(error)
        case _ as unreachable:
            assert_never(unreachable)


__all__ = (
    "Absent",
    "Failed",
    "OUTCOME_TYPES",
    "Outcome",
    "Present",
    "from_error",
    "from_optional",
    "from_value",
    "to_option",
    "to_result",
)
