"""TryOption Monad

Deferred computation with three outcomes:
- Lazy (nothing runs until invoked)
- Option[T] (value / nothing)
- Try (raised errors captured as failure)

Built on top of kungfu library patterns. Every method is a fluent alias for
the free combinator of the same name; the free functions are the source of
truth."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from kungfu import Option, Result

from ._types import Computation, Folder, Predicate, Thunk
from .boundary import invoke
from .outcome import Outcome

class TryOption[T]:
    """Lazy Try-Option Monad.

    Invoking it (``c()``) runs the wrapped computation behind the protective
    boundary and returns an Outcome. Not memoized: every call re-runs the
    wrapped computation.

    Monadic laws:
    - Left identity: pure(a).then(f) ≡ f(a)
    - Right identity: m.then(pure) ≡ m
    - Associativity: m.then(f).then(g) ≡ m.then(x => f(x).then(g))
    """

    __slots__ = ("_value",)

    def __init__(self, value: Computation[T], /) -> None:
        """Create TryOption from a zero-arg fn returning Option or Outcome."""
        self._value = value

    # Functor operations

    def map[R](self, f: Callable[[T], R], /) -> TryOption[R]:
        """Functor fmap - apply function to a present value."""
        from .transform import fmap
        return fmap(self, f)

    def map_option[R](self, f: Callable[[Option[T]], Option[R]], /) -> TryOption[R]:
        """Transform the whole optional; skipped only on failure."""
        from .transform import map_option
        return map_option(self, f)

    # Monad operations

    def then[R](self, f: Callable[[T], Computation[R]], /) -> TryOption[R]:
        """Monadic bind (>>=). Short-circuits on Absent and Failed."""
        from .control import bind
        return bind(self, f)

    def select_many[U, R](
        self,
        binder: Callable[[T], Computation[U]],
        combine: Callable[[T, U], R],
        /,
    ) -> TryOption[R]:
        """Bind and combine both stages' values."""
        from .control import select_many
        return select_many(self, binder, combine)

    def recover_with(self, handler: Callable[[Exception], T], /) -> TryOption[T]:
        """Turn Failed into Present using handler. Absent stays Absent."""
        from .control import recover_with
        return recover_with(self, handler=handler)

    # Elimination

    def match[R](
        self,
        *,
        some: Callable[[T], R],
        none: Thunk[R],
        fail: Callable[[Exception], R],
    ) -> R:
        from .eliminate import match
        return match(self, some=some, none=none, fail=fail)

    def match_const[R](self, *, some: Callable[[T], R], none: R, fail: R) -> R:
        from .eliminate import match_const
        return match_const(self, some=some, none=none, fail=fail)

    def match_do(
        self,
        *,
        some: Callable[[T], object],
        none: Callable[[], object],
        fail: Callable[[Exception], object],
    ) -> None:
        from .eliminate import match_do
        match_do(self, some=some, none=none, fail=fail)

    def recover_value(self, default: T, /) -> T:
        from .lift.down import recover_value
        return recover_value(self, default)

    def recover_compute(self, default: Thunk[T], /) -> T:
        from .lift.down import recover_compute
        return recover_compute(self, default)

    # Queries

    def count(self) -> int:
        from .query import count
        return count(self)

    def exists(self, predicate: Predicate[T], /) -> bool:
        from .query import exists
        return exists(self, predicate)

    def where(self, predicate: Predicate[T], /) -> bool:
        from .query import where
        return where(self, predicate)

    def forall(self, predicate: Predicate[T], /) -> bool:
        from .query import forall
        return forall(self, predicate)

    def fold[S](self, state: S, folder: Folder[S, T], /) -> S:
        from .query import fold
        return fold(self, state, folder)

    # Sequence conversion

    def tagged(self) -> Iterator[Result[T, Exception]]:
        """Lazy sequence of at most one Ok(value) / Error(exc)."""
        from .collection import tagged
        return tagged(self)

    def to_list(self) -> list[Result[T, Exception]]:
        from .collection import to_list
        return to_list(self)

    def to_tuple(self) -> tuple[Result[T, Exception], ...]:
        from .collection import to_tuple
        return to_tuple(self)

    # Protocol methods

    def __call__(self) -> Outcome[T]:
        """Execute the computation behind the protective boundary."""
        return invoke(self._value)

    def __repr__(self) -> str:
        return f"TryOption({self._value!r})"


def wrap[T](computation: Computation[T]) -> TryOption[T]:
    """Wrap a plain deferred computation; a TryOption is returned as-is."""
    if isinstance(computation, TryOption):
        return computation
    return TryOption(computation)

__all__ = ("TryOption", "wrap")
