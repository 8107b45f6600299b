"""
Try-Option combinators for composing "value / nothing / error" computations.

A TryOption wraps a zero-argument computation returning a kungfu Option.
Invoking it yields one of three outcomes (Present, Absent, Failed); every
combinator keeps the three apart and captures anything raised by user
functions as Failed instead of letting it escape.

Architecture:
- Outcome types and explicit constructors (outcome)
- Protective boundary around every call into user code (boundary)
- Free combinators grouped by role; TryOption methods are fluent aliases
- UnsafeOption: null-permitting optional with the same vocabulary (unsafe)
"""

# Outcome
from .outcome import (
    Absent,
    Failed,
    Outcome,
    Present,
    from_error,
    from_optional,
    from_value,
    to_option,
)

# Core types
from ._types import Computation, Folder, Predicate, Thunk
from .monad import TryOption, wrap

# Boundary
from .boundary import guard, invoke

# Lift helpers
from . import lift
from .lift import (
    absent,
    catching,
    fail,
    from_option,
    from_outcome,
    lifted,
    optional,
    pure,
    recover_compute,
    recover_value,
    to_outcome,
    to_result,
)

# Transform
from .transform import fmap, map_option

# Control flow
from .control import bind, recover_with, select_many

# Elimination
from .eliminate import match, match_const, match_do

# Queries
from .query import count, exists, fold, forall, where

# Sequence conversion
from .collection import tagged, to_list, to_tuple

# Null-permitting optional
from . import unsafe
from .unsafe import (
    UnsafeNothing,
    UnsafeOption,
    UnsafeSome,
    bind_unsafe,
    count_unsafe,
    exists_unsafe,
    flatten_unsafe,
    flatten_unsafe_const,
    fold_unsafe,
    forall_unsafe,
    map_unsafe,
    match_many_unsafe,
    match_many_unsafe_const,
    match_unsafe,
    match_unsafe_do,
    nothing_unsafe,
    recover_unsafe,
    recover_unsafe_with,
    some_unsafe,
)

# Errors
from ._errors import InvalidOutcomeError, MissingDefaultError

__all__ = (
    # Outcome
    "Absent",
    "Failed",
    "Outcome",
    "Present",
    "from_error",
    "from_optional",
    "from_value",
    "to_option",
    # Types
    "Computation",
    "Folder",
    "Predicate",
    "Thunk",
    "TryOption",
    "wrap",
    # Boundary
    "guard",
    "invoke",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "absent",
    "catching",
    "fail",
    "from_option",
    "from_outcome",
    "lifted",
    "optional",
    "pure",
    "recover_compute",
    "recover_value",
    "to_outcome",
    "to_result",
    # Transform
    "fmap",
    "map_option",
    # Control
    "bind",
    "recover_with",
    "select_many",
    # Elimination
    "match",
    "match_const",
    "match_do",
    # Queries
    "count",
    "exists",
    "fold",
    "forall",
    "where",
    # Sequence
    "tagged",
    "to_list",
    "to_tuple",
    # Unsafe module
    "unsafe",
    # Unsafe functions
    "UnsafeNothing",
    "UnsafeOption",
    "UnsafeSome",
    "bind_unsafe",
    "count_unsafe",
    "exists_unsafe",
    "flatten_unsafe",
    "flatten_unsafe_const",
    "fold_unsafe",
    "forall_unsafe",
    "map_unsafe",
    "match_many_unsafe",
    "match_many_unsafe_const",
    "match_unsafe",
    "match_unsafe_do",
    "nothing_unsafe",
    "recover_unsafe",
    "recover_unsafe_with",
    "some_unsafe",
    # Errors
    "InvalidOutcomeError",
    "MissingDefaultError",
)
