from .fold import fold_left, fold_right, iterate, iterate_indexed, lazy_fold_right
from .map import filter, filter_map, map, map_indexed

__all__ = (
    # Lazy
    "filter",
    "filter_map",
    "lazy_fold_right",
    "map",
    "map_indexed",
    # Eager
    "fold_left",
    "fold_right",
    "iterate",
    "iterate_indexed",
)
