from .map import fmap, map_option

__all__ = (
    "fmap",
    "map_option",
)
