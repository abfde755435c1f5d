"""Sorting

Sorting needs every element, so both functions are eager: they
materialise the input, sort it and wrap the result again."""

from __future__ import annotations

import logging
from functools import cmp_to_key

from .._helpers import natural_compare
from .._types import Comparator
from ..convert.eager import of_list
from ..core.node import LazyList

logger = logging.getLogger(__name__)


def sort[T](ll: LazyList[T], compare: Comparator[T] = natural_compare) -> LazyList[T]:
    """Sorted copy of a finite list."""
    items = sorted(ll, key=cmp_to_key(compare))
    logger.debug("sort(): materialised %d elements", len(items))
    return of_list(items)


def stable_sort[T](ll: LazyList[T], compare: Comparator[T]) -> LazyList[T]:
    """Sorted copy of a finite list; equal elements keep their order."""
    items = sorted(ll, key=cmp_to_key(compare))
    logger.debug("stable_sort(): materialised %d elements", len(items))
    return of_list(items)


__all__ = ("sort", "stable_sort")
