from .append import (
    append,
    concat,
    eager_append,
    flatten,
    rev,
    rev_append,
    rev_append_of_list,
    rev_of_list,
)
from .position import at, first, hd, last, length, nth, tl, would_at_fail
from .slicing import (
    drop,
    drop_while,
    remove,
    remove_all,
    remove_all_such,
    remove_if,
    split_at,
    split_nth,
    take,
    take_while,
)
from .zip import (
    combine,
    equal,
    exists2,
    fold_left2,
    fold_right2,
    for_all2,
    iterate2,
    map2,
    uncombine,
    zip_together,
)

__all__ = (
    # Append & reverse
    "append",
    "concat",
    "eager_append",
    "flatten",
    "rev",
    "rev_append",
    "rev_append_of_list",
    "rev_of_list",
    # Positional
    "at",
    "first",
    "hd",
    "last",
    "length",
    "nth",
    "tl",
    "would_at_fail",
    # Slicing
    "drop",
    "drop_while",
    "remove",
    "remove_all",
    "remove_all_such",
    "remove_if",
    "split_at",
    "split_nth",
    "take",
    "take_while",
    # Two lists
    "combine",
    "equal",
    "exists2",
    "fold_left2",
    "fold_right2",
    "for_all2",
    "iterate2",
    "map2",
    "uncombine",
    "zip_together",
)
