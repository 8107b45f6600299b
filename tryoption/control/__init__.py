from .bind import bind, select_many
from .recover import recover_with

__all__ = (
    # Bind
    "bind",
    "select_many",
    # Recover
    "recover_with",
)
