"""
Take, drop & split
==================

Prefix/suffix combinators. Prefixes (`take`, `take_while`, the first half
of `split_at`) are lazy; `drop` and `drop_while` walk eagerly.
"""

from __future__ import annotations

from typing import assert_never

from .._errors import InvalidIndexError
from .._types import Predicate
from ..core.node import EMPTY, NIL, Cons, LazyList, Nil, Node
from ..transform.map import filter


def take[T](ll: LazyList[T], n: int) -> LazyList[T]:
    """
    At most `n` leading elements, lazily.

    A shorter list yields what it has. Raises InvalidIndexError if `n < 0`.
    """
    if n < 0:
        raise InvalidIndexError(n)

    def at(rest: LazyList[T], remaining: int) -> LazyList[T]:
        if remaining == 0:
            return EMPTY

        def compute() -> Node[T]:
            match rest.force():
                case Cons(head, tail):
                    return Cons(head, at(tail, remaining - 1))
                case Nil():
                    return NIL
                case _ as unreachable:
                    assert_never(unreachable)

        return LazyList(compute)

    return at(ll, n)


def drop[T](ll: LazyList[T], n: int) -> LazyList[T]:
    """
    The list after its first `n` elements. Walks `n` links now.

    Raises InvalidIndexError(n) if `n < 0` or the list is shorter than `n`.

    Example:
        drop(range_inclusive(1, 5), 2)   # [3; 4; 5]
        drop(range_inclusive(1, 5), 10)  # raises InvalidIndexError(10)
    """
    if n < 0:
        raise InvalidIndexError(n)
    rest = ll
    for _ in range(n):
        match rest.force():
            case Cons(_, tail):
                rest = tail
            case Nil():
                raise InvalidIndexError(n)
            case _ as unreachable:
                assert_never(unreachable)
    return rest


def split_at[T](ll: LazyList[T], n: int) -> tuple[LazyList[T], LazyList[T]]:
    """
    `(take(ll, n), drop(ll, n))`, both lazy.

    The remainder re-derives the drop from `ll` when first forced, so it
    does not depend on how far the prefix was consumed. Forcing it on a
    list shorter than `n` raises InvalidIndexError(n).
    """
    if n < 0:
        raise InvalidIndexError(n)
    return take(ll, n), LazyList(lambda: drop(ll, n).force())


split_nth = split_at


def take_while[T](ll: LazyList[T], predicate: Predicate[T]) -> LazyList[T]:
    """Longest prefix whose elements satisfy `predicate`, lazily."""

    def compute() -> Node[T]:
        match ll.force():
            case Cons(head, tail) if predicate(head):
                return Cons(head, take_while(tail, predicate))
            case _:
                return NIL

    return LazyList(compute)


def drop_while[T](ll: LazyList[T], predicate: Predicate[T]) -> LazyList[T]:
    """The list from its first element not satisfying `predicate`."""
    rest = ll
    while True:
        match rest.force():
            case Cons(head, tail) if predicate(head):
                rest = tail
            case Cons():
                return rest
            case Nil():
                return EMPTY
            case _ as unreachable:
                assert_never(unreachable)


def remove_if[T](ll: LazyList[T], predicate: Predicate[T]) -> LazyList[T]:
    """Lazily drop the first element satisfying `predicate`; the rest is shared."""

    def compute() -> Node[T]:
        match ll.force():
            case Cons(head, tail):
                if predicate(head):
                    return tail.force()
                return Cons(head, remove_if(tail, predicate))
            case Nil():
                return NIL
            case _ as unreachable:
                assert_never(unreachable)

    return LazyList(compute)


def remove[T](ll: LazyList[T], value: T) -> LazyList[T]:
    """Drop the first element equal to `value`."""
    return remove_if(ll, lambda x: x == value)


def remove_all_such[T](ll: LazyList[T], predicate: Predicate[T]) -> LazyList[T]:
    """Lazily drop every element satisfying `predicate`."""
    return filter(ll, lambda x: not predicate(x))


def remove_all[T](ll: LazyList[T], value: T) -> LazyList[T]:
    """Drop every element equal to `value`."""
    return remove_all_such(ll, lambda x: x == value)


__all__ = (
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
)
