"""
Append, concat & reverse
========================

`append` and `concat` are lazy: the second list (or the next inner list)
is not forced until everything before it has been consumed. The
`eager_*`, `rev*` forms traverse their first argument immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import assert_never

from ..core.node import EMPTY, NIL, Cons, LazyList, Nil, Node

logger = logging.getLogger(__name__)


def append[T](l1: LazyList[T], l2: LazyList[T]) -> LazyList[T]:
    """
    Lazy append. `l2` is forced only once `l1` is exhausted.

    Example:
        append(of_list([1, 2]), of_list([3, 4]))  # [1; 2; 3; 4]
    """

    def compute() -> Node[T]:
        match l1.force():
            case Cons(head, tail):
                return Cons(head, append(tail, l2))
            case Nil():
                return l2.force()
            case _ as unreachable:
                assert_never(unreachable)

    return LazyList(compute)


def eager_append[T](l1: LazyList[T], l2: LazyList[T]) -> LazyList[T]:
    """Append that copies all of `l1` now. `l2` is shared, not forced."""
    return rev_append_of_list(list(l1)[::-1], l2)


def rev_append[T](l1: LazyList[T], l2: LazyList[T]) -> LazyList[T]:
    """`rev(l1)` followed by `l2`. Forces all of `l1`."""
    acc = l2
    for item in l1:
        acc = LazyList.of_node(Cons(item, acc))
    return acc


def rev_append_of_list[T](items: Sequence[T], ll: LazyList[T]) -> LazyList[T]:
    """Reversed eager sequence followed by `ll`."""
    acc = ll
    for item in items:
        acc = LazyList.of_node(Cons(item, acc))
    return acc


def rev[T](ll: LazyList[T]) -> LazyList[T]:
    """Reverse. Strict: the first output needs the whole input."""
    result = rev_append(ll, EMPTY)
    logger.debug("rev(): materialised input")
    return result


def rev_of_list[T](items: Sequence[T]) -> LazyList[T]:
    """Reverse an eager sequence straight into a lazy list."""
    return rev_append_of_list(items, EMPTY)


def flatten[T](lists: Iterable[LazyList[T]]) -> LazyList[T]:
    """Lazy append of an eager collection of lazy lists."""
    result: LazyList[T] = EMPTY
    for ll in reversed(list(lists)):
        result = append(ll, result)
    return result


def concat[T](lists: LazyList[LazyList[T]]) -> LazyList[T]:
    """
    Lazy append of a lazy list of lazy lists.

    Neither the outer list nor any inner list is forced further than the
    consumer demands. Empty inner lists are skipped with a loop.
    """

    def compute() -> Node[T]:
        outer = lists
        while True:
            match outer.force():
                case Cons(inner, rest):
                    match inner.force():
                        case Cons(head, tail):
                            return Cons(head, append(tail, concat(rest)))
                        case Nil():
                            outer = rest
                        case _ as unreachable:
                            assert_never(unreachable)
                case Nil():
                    return NIL
                case _ as unreachable:
                    assert_never(unreachable)

    return LazyList(compute)


__all__ = (
    "append",
    "concat",
    "eager_append",
    "flatten",
    "rev",
    "rev_append",
    "rev_append_of_list",
    "rev_of_list",
)
