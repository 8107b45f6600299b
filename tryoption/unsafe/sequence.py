"""Sequence-level matching over many UnsafeOptions

Streaming, iterative traversal: stack depth does not grow with the input
length, and nothing is pulled from the input before it is needed."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .option import UnsafeNothing, UnsafeOption, UnsafeSome

def match_many_unsafe[T, R](
    items: Iterable[UnsafeOption[T]],
    *,
    some: Callable[[T], Iterable[R]],
    none: Callable[[], Iterable[R]],
) -> Iterator[R]:
    """
    Concatenate some(v) for every present element and none() for every
    absent one, in input order.

    NOTE: An empty input yields none() once. The empty sequence is treated
          as a single absence, not as "nothing to match".

    Example:
        list(match_many_unsafe(
            [UnsafeSome(1), UnsafeNothing(), UnsafeSome(2)],
            some=lambda x: [x],
            none=lambda: [0],
        ))  # [1, 0, 2]
    """
    seen = False
    for item in items:
        seen = True
        match item:
            case UnsafeSome(value):
                yield from some(value)
            case UnsafeNothing():
                yield from none()
            case _:
                raise TypeError(f"Expected UnsafeOption, got {type(item).__name__}")
    if not seen:
        yield from none()

def match_many_unsafe_const[T, R](
    items: Iterable[UnsafeOption[T]],
    *,
    some: Callable[[T], Iterable[R]],
    none: Iterable[R],
) -> Iterator[R]:
    """
    match_many_unsafe with a fixed replacement for absent elements.

    NOTE: none is re-iterated for every absent element; pass a collection,
          not a one-shot iterator.
    """
    return match_many_unsafe(items, some=some, none=lambda: none)

def flatten_unsafe[T](
    items: Iterable[UnsafeOption[T]],
    *,
    none: Callable[[], Iterable[T]],
) -> Iterator[T]:
    """Present values as-is, none() spliced in for each absent element."""
    return match_many_unsafe(items, some=lambda value: (value,), none=none)

def flatten_unsafe_const[T](
    items: Iterable[UnsafeOption[T]],
    *,
    none: Iterable[T],
) -> Iterator[T]:
    return match_many_unsafe(items, some=lambda value: (value,), none=lambda: none)

__all__ = (
    "flatten_unsafe",
    "flatten_unsafe_const",
    "match_many_unsafe",
    "match_many_unsafe_const",
)
