from .fold import count, exists, fold, forall, where

__all__ = (
    "count",
    "exists",
    "fold",
    "forall",
    "where",
)
