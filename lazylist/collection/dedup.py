"""
Deduplication
=============

Both combinators are lazy stateful filters that keep the first
occurrence of each element. The accumulator is created per call, and
since the filtered list is memoised each element is tested exactly once.
"""

from __future__ import annotations

import bisect
import typing
from functools import cmp_to_key

from .._helpers import natural_compare, natural_equal
from .._types import Comparator, Equality
from ..core.node import LazyList
from ..transform.map import filter


def unique[T](ll: LazyList[T], compare: Comparator[T] = natural_compare) -> LazyList[T]:
    """
    Drop elements comparing equal (`compare(a, b) == 0`) to an earlier one.

    Seen elements are kept in an ordered set (sorted keys + binary search),
    so each test costs a logarithmic search; recording a new element
    inserts into a plain list and is linear in the number kept.

    Example:
        unique(of_list([3, 1, 3, 2, 1]))  # [3; 1; 2]
    """
    key = cmp_to_key(compare)
    seen: list[typing.Any] = []

    def first_time(item: T) -> bool:
        k = key(item)
        i = bisect.bisect_left(seen, k)
        if i < len(seen) and seen[i] == k:
            return False
        seen.insert(i, k)
        return True

    return filter(ll, first_time)


def unique_eq[T](ll: LazyList[T], eq: Equality[T] = natural_equal) -> LazyList[T]:
    """
    Drop elements equivalent under `eq` to an earlier one.

    No ordering is assumed, so every candidate is checked against all kept
    elements: quadratic in the number of distinct elements.
    """
    kept: list[T] = []

    def first_time(item: T) -> bool:
        for other in kept:
            if eq(other, item):
                return False
        kept.append(item)
        return True

    return filter(ll, first_time)


__all__ = ("unique", "unique_eq")
