from .match import match, match_const, match_do

__all__ = (
    "match",
    "match_const",
    "match_do",
)
