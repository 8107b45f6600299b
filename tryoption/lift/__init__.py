"""
Lift helpers with semantic namespaces.

    from tryoption import lift as L

Architecture:
- L.up.*    - lifting values into TryOption
- L.down.*  - running TryOption down to plain values

Examples:
    from tryoption import lift as L

    user = L.up.pure(User(id=42))
    maybe = L.up.optional(cache.get(key))
    parsed = L.up.catching(lambda: json.loads(raw))

    outcome = L.down.to_outcome(parsed)
    port = L.down.recover_value(parsed.map(int), 8080)
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

from .down import recover_compute, recover_value, to_outcome, to_result
from .up import absent, catching, fail, from_option, from_outcome, lifted, optional, pure

up = up_ns
down = down_ns

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "absent",
    "catching",
    "fail",
    "from_option",
    "from_outcome",
    "lifted",
    "optional",
    "pure",
    # Down
    "recover_compute",
    "recover_value",
    "to_outcome",
    "to_result",
)
