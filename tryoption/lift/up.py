"""
Lifting values into TryOption.

Explicit constructors for every starting point: plain values, kungfu
Options, ready Outcomes, errors, and exception-based code.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from kungfu import Option

from .._types import Thunk
from ..monad import TryOption
from ..outcome import Absent, Failed, Outcome, Present, from_optional, from_value


def pure[T](value: T) -> TryOption[T]:
    """
    Lift a value into an always-present TryOption.

    No coercion: pure(None) is Present(None). Use optional() to treat None
    as absence.

    Example:
        from tryoption import lift as L

        user = L.up.pure(User(id=42))
        user()  # Present(User(id=42))
    """
    return TryOption(lambda: Present(value))


def absent() -> TryOption[object]:
    """Always-absent TryOption."""
    return TryOption(Absent)


def fail(error: Exception) -> TryOption[object]:
    """
    Always-failed TryOption. Dual of pure().

    NOTE: The same exception object is returned on every invocation.
    """
    return TryOption(lambda: Failed(error))


def optional[T](value: T | None) -> TryOption[T]:
    """None becomes Absent, anything else Present."""
    return TryOption(lambda: from_value(value))


def from_option[T](option: Option[T]) -> TryOption[T]:
    """Lift an already-computed kungfu Option."""
    return TryOption(lambda: from_optional(option))


def from_outcome[T](outcome: Outcome[T]) -> TryOption[T]:
    """Lift an already-computed Outcome. Not lazy: outcome is fixed."""
    return TryOption(lambda: outcome)


def catching[T](thunk: Thunk[T | None]) -> TryOption[T]:
    """
    Bridge exception-based code that signals absence with None.

    The thunk runs on every invocation; its None is Absent, its exception
    is Failed.

    Example:
        from tryoption import lift as L

        port = L.up.catching(lambda: int(os.environ["PORT"]))
    """
    return TryOption(lambda: from_value(thunk()))


def lifted[**P, T](func: Callable[P, T | None]) -> Callable[P, TryOption[T]]:
    """
    Decorator: calling the function builds a TryOption instead of running it.

    Example:
        @L.lifted
        def find_user(user_id: int) -> User | None: ...

        find_user(42).map(lambda u: u.name)()
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> TryOption[T]:
        return catching(lambda: func(*args, **kwargs))

    return wrapper


__all__ = (
    "absent",
    "catching",
    "fail",
    "from_option",
    "from_outcome",
    "lifted",
    "optional",
    "pure",
)
