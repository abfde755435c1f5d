from .dedup import unique, unique_eq
from .sort import sort, stable_sort

__all__ = (
    "sort",
    "stable_sort",
    "unique",
    "unique_eq",
)
