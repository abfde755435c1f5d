"""
Map & filter combinators
========================

Lazy element-wise transforms. `f` runs once per element, exactly when
the corresponding position of the result is forced.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Nothing, Option, Some

from .._types import Predicate
from ..core.node import NIL, Cons, LazyList, Nil, Node


def map[T, U](ll: LazyList[T], f: Callable[[T], U]) -> LazyList[U]:
    """
    Lazy map.

    Example:
        map(range_inclusive(1, 3), lambda x: x * x)  # [1; 4; 9]
    """

    def compute() -> Node[U]:
        match ll.force():
            case Cons(head, tail):
                return Cons(f(head), map(tail, f))
            case Nil():
                return NIL
            case _ as unreachable:
                assert_never(unreachable)

    return LazyList(compute)


def map_indexed[T, U](ll: LazyList[T], f: Callable[[int, T], U]) -> LazyList[U]:
    """Lazy map that also passes the position: `f(i, x)`."""

    def at(rest: LazyList[T], i: int) -> LazyList[U]:
        def compute() -> Node[U]:
            match rest.force():
                case Cons(head, tail):
                    return Cons(f(i, head), at(tail, i + 1))
                case Nil():
                    return NIL
                case _ as unreachable:
                    assert_never(unreachable)

        return LazyList(compute)

    return at(ll, 0)


def filter[T](ll: LazyList[T], predicate: Predicate[T]) -> LazyList[T]:
    """
    Lazy filter.

    Forcing a position scans forward to the next accepted element, so a
    long run of rejected elements costs a loop, not a recursion.
    """

    def compute() -> Node[T]:
        rest = ll
        while True:
            match rest.force():
                case Cons(head, tail):
                    if predicate(head):
                        return Cons(head, filter(tail, predicate))
                    rest = tail
                case Nil():
                    return NIL
                case _ as unreachable:
                    assert_never(unreachable)

    return LazyList(compute)


def filter_map[T, U](ll: LazyList[T], f: Callable[[T], Option[U]]) -> LazyList[U]:
    """Lazy map keeping only the Some results."""

    def compute() -> Node[U]:
        rest = ll
        while True:
            match rest.force():
                case Cons(head, tail):
                    match f(head):
                        case Some(value):
                            return Cons(value, filter_map(tail, f))
                        case Nothing():
                            rest = tail
                        case _ as unreachable:
                            assert_never(unreachable)
                case Nil():
                    return NIL
                case _ as unreachable:
                    assert_never(unreachable)

    return LazyList(compute)


__all__ = ("filter", "filter_map", "map", "map_indexed")
