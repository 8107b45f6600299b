"""
UnsafeOption - null-permitting two-state optional
=================================================

UnsafeSome(value) | UnsafeNothing(). Unlike kungfu's Option, construction
performs no validation or coercion: UnsafeSome(None) and
UnsafeSome(Some(1)) are legal and stay nested.

There is no failure channel at this layer. User functions run directly
and whatever they raise reaches the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from .._types import Folder, Predicate, Thunk


class UnsafeSome[T]:
    """Present arm. value may be None."""

    __slots__ = ("_value",)
    __match_args__ = ("_value",)

    def __init__(self, value: T, /) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnsafeSome) and self._value == other._value

    def __hash__(self) -> int:
        return hash((UnsafeSome, self._value))

    def __repr__(self) -> str:
        return f"UnsafeSome({self._value!r})"


class UnsafeNothing:
    """Absent arm."""

    __slots__ = ()
    __match_args__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnsafeNothing)

    def __hash__(self) -> int:
        return hash(UnsafeNothing)

    def __repr__(self) -> str:
        return "UnsafeNothing()"


type UnsafeOption[T] = UnsafeSome[T] | UnsafeNothing


def some_unsafe[T](value: T) -> UnsafeOption[T]:
    """Wrap anything without coercion, None included."""
    return UnsafeSome(value)


def nothing_unsafe() -> UnsafeOption[object]:
    return UnsafeNothing()


# ============================================================================
# Elimination
# ============================================================================


def match_unsafe[T, R](
    option: UnsafeOption[T],
    *,
    some: Callable[[T], R],
    none: Thunk[R],
) -> R:
    match option:
        case UnsafeSome(value):
            return some(value)
        case UnsafeNothing():
            return none()
        case _ as unreachable:
            assert_never(unreachable)


def match_unsafe_do[T](
    option: UnsafeOption[T],
    *,
    some: Callable[[T], object],
    none: Callable[[], object],
) -> None:
    match_unsafe(option, some=some, none=none)


def recover_unsafe[T](option: UnsafeOption[T], default: T) -> T:
    """Value or default. default may be None here."""
    return match_unsafe(option, some=lambda value: value, none=lambda: default)


def recover_unsafe_with[T](option: UnsafeOption[T], none: Thunk[T]) -> T:
    """Value or none(). none is only called when absent."""
    return match_unsafe(option, some=lambda value: value, none=none)


# ============================================================================
# Transformation
# ============================================================================


def map_unsafe[T, R](option: UnsafeOption[T], mapper: Callable[[T], R]) -> UnsafeOption[R]:
    """mapper result is wrapped as-is, None included."""
    return match_unsafe(
        option,
        some=lambda value: UnsafeSome(mapper(value)),
        none=UnsafeNothing,
    )


def bind_unsafe[T, R](
    option: UnsafeOption[T],
    binder: Callable[[T], UnsafeOption[R]],
) -> UnsafeOption[R]:
    return match_unsafe(option, some=binder, none=UnsafeNothing)


# ============================================================================
# Queries
# ============================================================================


def count_unsafe[T](option: UnsafeOption[T]) -> int:
    return match_unsafe(option, some=lambda _: 1, none=lambda: 0)


def exists_unsafe[T](option: UnsafeOption[T], predicate: Predicate[T]) -> bool:
    return match_unsafe(option, some=lambda value: bool(predicate(value)), none=lambda: False)


def forall_unsafe[T](option: UnsafeOption[T], predicate: Predicate[T]) -> bool:
    """UnsafeNothing gives False, as the Try-Option forall does."""
    return match_unsafe(option, some=lambda value: bool(predicate(value)), none=lambda: False)


def fold_unsafe[S, T](option: UnsafeOption[T], state: S, folder: Folder[S, T]) -> S:
    return match_unsafe(option, some=lambda value: folder(state, value), none=lambda: state)


__all__ = (
    "UnsafeNothing",
    "UnsafeOption",
    "UnsafeSome",
    "bind_unsafe",
    "count_unsafe",
    "exists_unsafe",
    "fold_unsafe",
    "forall_unsafe",
    "map_unsafe",
    "match_unsafe",
    "match_unsafe_do",
    "nothing_unsafe",
    "recover_unsafe",
    "recover_unsafe_with",
    "some_unsafe",
)
