from .sequence import tagged, to_list, to_tuple

__all__ = (
    "tagged",
    "to_list",
    "to_tuple",
)
