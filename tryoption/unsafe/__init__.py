from .option import (
    UnsafeNothing,
    UnsafeOption,
    UnsafeSome,
    bind_unsafe,
    count_unsafe,
    exists_unsafe,
    fold_unsafe,
    forall_unsafe,
    map_unsafe,
    match_unsafe,
    match_unsafe_do,
    nothing_unsafe,
    recover_unsafe,
    recover_unsafe_with,
    some_unsafe,
)
from .sequence import (
    flatten_unsafe,
    flatten_unsafe_const,
    match_many_unsafe,
    match_many_unsafe_const,
)

__all__ = (
    # Types
    "UnsafeNothing",
    "UnsafeOption",
    "UnsafeSome",
    # Construction
    "nothing_unsafe",
    "some_unsafe",
    # Single option
    "bind_unsafe",
    "count_unsafe",
    "exists_unsafe",
    "fold_unsafe",
    "forall_unsafe",
    "map_unsafe",
    "match_unsafe",
    "match_unsafe_do",
    "recover_unsafe",
    "recover_unsafe_with",
    # Sequence
    "flatten_unsafe",
    "flatten_unsafe_const",
    "match_many_unsafe",
    "match_many_unsafe_const",
)
