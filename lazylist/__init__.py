"""
Lazy lists: persistent, memoised, possibly infinite singly-linked lists.

A LazyList is a suspension producing either Nil or Cons(head, tail).
Tails are computed on demand, at most once, and shared by every handle.

Architecture:
- core          - nodes, the memoising suspension, access primitives
- construct     - generators, unfolds, ranges, fixed-length lists
- transform     - map / filter (lazy), folds and iteration (eager)
- search        - find family, membership, association lists
- structure     - append / concat / reverse, take / drop / split, two-list family
- combinatorics - lazy combinations and permutations
- convert       - Python sequences, iterators, cursors, character streams
- collection    - dedup and sort
- exceptionless - Option / Result returning variants of raising operations
- pretty        - delimited printing

Example:
    import lazylist as L

    squares = L.map(L.range_inclusive(1, 10), lambda x: x * x)
    L.to_list(L.take(squares, 3))  # [1, 4, 9]
"""

import logging

# Errors
from ._errors import (
    DifferentListSizeError,
    EmptyListError,
    InvalidArgumentError,
    InvalidIndexError,
    LazyListError,
    NotFoundError,
    RecursiveForceError,
)

# Core types
from ._types import Comparator, Equality, IndexedPredicate, Predicate, Renderer
from .core import EMPTY, NIL, Cons, LazyList, Nil, Node, cons, force, get, is_empty, peek, uncons

# Constructors
from .construct import eternity, from_while, range_inclusive, repeat, seq, tabulate, unfold

# Transforms
from .transform import (
    filter,
    filter_map,
    fold_left,
    fold_right,
    iterate,
    iterate_indexed,
    lazy_fold_right,
    map,
    map_indexed,
)

# Search
from .search import (
    assoc,
    assq,
    exists,
    find,
    find_opt,
    findi,
    findi_opt,
    for_all,
    index_of,
    index_ofq,
    mem,
    mem_assoc,
    mem_assq,
    memq,
    rfind,
    rfind_opt,
    rfindi,
    rfindi_opt,
    rindex_of,
    rindex_ofq,
)

# Structure
from .structure import (
    append,
    at,
    combine,
    concat,
    drop,
    drop_while,
    eager_append,
    equal,
    exists2,
    first,
    flatten,
    fold_left2,
    fold_right2,
    for_all2,
    hd,
    iterate2,
    last,
    length,
    map2,
    nth,
    remove,
    remove_all,
    remove_all_such,
    remove_if,
    rev,
    rev_append,
    rev_append_of_list,
    rev_of_list,
    split_at,
    split_nth,
    take,
    take_while,
    tl,
    uncombine,
    would_at_fail,
    zip_together,
)

# Combinatorics
from .combinatorics import combinations, permutations

# Conversions
from .convert import (
    CharStream,
    Cursor,
    cursor,
    eager_of_list,
    of_array,
    of_char_stream,
    of_iterator,
    of_list,
    to_array,
    to_char_stream,
    to_iterator,
    to_list,
)

# Dedup & sort
from .collection import sort, stable_sort, unique, unique_eq

# Exceptionless namespace (X.find, X.at, ...)
from . import exceptionless

# Printing
from .pretty import PrintOptions, format_list, print_list

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Errors
    "DifferentListSizeError",
    "EmptyListError",
    "InvalidArgumentError",
    "InvalidIndexError",
    "LazyListError",
    "NotFoundError",
    "RecursiveForceError",
    # Types
    "Comparator",
    "Equality",
    "IndexedPredicate",
    "Predicate",
    "Renderer",
    # Core
    "Cons",
    "EMPTY",
    "LazyList",
    "NIL",
    "Nil",
    "Node",
    "cons",
    "force",
    "get",
    "is_empty",
    "peek",
    "uncons",
    # Constructors
    "eternity",
    "from_while",
    "range_inclusive",
    "repeat",
    "seq",
    "tabulate",
    "unfold",
    # Transforms
    "filter",
    "filter_map",
    "fold_left",
    "fold_right",
    "iterate",
    "iterate_indexed",
    "lazy_fold_right",
    "map",
    "map_indexed",
    # Search
    "assoc",
    "assq",
    "exists",
    "find",
    "find_opt",
    "findi",
    "findi_opt",
    "for_all",
    "index_of",
    "index_ofq",
    "mem",
    "mem_assoc",
    "mem_assq",
    "memq",
    "rfind",
    "rfind_opt",
    "rfindi",
    "rfindi_opt",
    "rindex_of",
    "rindex_ofq",
    # Structure
    "append",
    "at",
    "combine",
    "concat",
    "drop",
    "drop_while",
    "eager_append",
    "equal",
    "exists2",
    "first",
    "flatten",
    "fold_left2",
    "fold_right2",
    "for_all2",
    "hd",
    "iterate2",
    "last",
    "length",
    "map2",
    "nth",
    "remove",
    "remove_all",
    "remove_all_such",
    "remove_if",
    "rev",
    "rev_append",
    "rev_append_of_list",
    "rev_of_list",
    "split_at",
    "split_nth",
    "take",
    "take_while",
    "tl",
    "uncombine",
    "would_at_fail",
    "zip_together",
    # Combinatorics
    "combinations",
    "permutations",
    # Conversions
    "CharStream",
    "Cursor",
    "cursor",
    "eager_of_list",
    "of_array",
    "of_char_stream",
    "of_iterator",
    "of_list",
    "to_array",
    "to_char_stream",
    "to_iterator",
    "to_list",
    # Dedup & sort
    "sort",
    "stable_sort",
    "unique",
    "unique_eq",
    # Namespaces
    "exceptionless",
    # Printing
    "PrintOptions",
    "format_list",
    "print_list",
)
