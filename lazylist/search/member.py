"""
Membership & association lists.

`*q` variants compare by identity (`is`), the others by equality (`==`).
"""

from __future__ import annotations

import typing

from kungfu import Nothing, Option, Some

from .._helpers import identical, natural_equal
from .._types import Equality, Predicate
from ..core.node import LazyList
from .find import find, find_opt, findi_opt, rfindi_opt


def exists[T](ll: LazyList[T], predicate: Predicate[T]) -> bool:
    """True if some element satisfies `predicate`. Stops at the first hit."""
    for item in ll:
        if predicate(item):
            return True
    return False


def for_all[T](ll: LazyList[T], predicate: Predicate[T]) -> bool:
    """True if every element satisfies `predicate`. Stops at the first miss."""
    for item in ll:
        if not predicate(item):
            return False
    return True


def mem[T](ll: LazyList[T], value: T) -> bool:
    """`value` occurs in the list (equality)."""
    return exists(ll, lambda x: x == value)


def memq[T](ll: LazyList[T], value: T) -> bool:
    """`value` occurs in the list (identity)."""
    return exists(ll, lambda x: x is value)


def _index_with[T](
    ll: LazyList[T],
    value: T,
    eq: Equality[T],
    *,
    last: bool,
) -> Option[int]:
    search = rfindi_opt if last else findi_opt
    match search(ll, lambda _, x: eq(value, x)):
        case Some((i, _)):
            return Some(i)
        case _:
            return Nothing()


def index_of[T](ll: LazyList[T], value: T) -> Option[int]:
    """Position of the first element equal to `value`."""
    return _index_with(ll, value, natural_equal, last=False)


def rindex_of[T](ll: LazyList[T], value: T) -> Option[int]:
    """Position of the last element equal to `value`."""
    return _index_with(ll, value, natural_equal, last=True)


def index_ofq[T](ll: LazyList[T], value: T) -> Option[int]:
    """Position of the first element identical to `value`."""
    return _index_with(ll, value, identical, last=False)


def rindex_ofq[T](ll: LazyList[T], value: T) -> Option[int]:
    """Position of the last element identical to `value`."""
    return _index_with(ll, value, identical, last=True)


# ============================================================================
# Association lists: lists of (key, value) pairs
# ============================================================================


def assoc[K, V](ll: LazyList[tuple[K, V]], key: K) -> V:
    """Value of the first pair whose key equals `key`. Raises NotFoundError."""
    return find(ll, lambda pair: pair[0] == key)[1]


def assq[K, V](ll: LazyList[tuple[K, V]], key: K) -> V:
    """Value of the first pair whose key is `key`. Raises NotFoundError."""
    return find(ll, lambda pair: pair[0] is key)[1]


def mem_assoc[K](ll: LazyList[tuple[K, typing.Any]], key: K) -> bool:
    """Some pair has a key equal to `key`."""
    return isinstance(find_opt(ll, lambda pair: pair[0] == key), Some)


def mem_assq[K](ll: LazyList[tuple[K, typing.Any]], key: K) -> bool:
    """Some pair has a key identical to `key`."""
    return isinstance(find_opt(ll, lambda pair: pair[0] is key), Some)


__all__ = (
    "assoc",
    "assq",
    "exists",
    "for_all",
    "index_of",
    "index_ofq",
    "mem",
    "mem_assoc",
    "mem_assq",
    "memq",
    "rindex_of",
    "rindex_ofq",
)
