"""
Access primitives.

Примитивы доступа: форсирование, cons, просмотр головы.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Nothing, Option, Some

from .node import EMPTY, Cons, LazyList, Nil, Node


def force[T](ll: LazyList[T]) -> Node[T]:
    """Force the suspension and return its node."""
    return ll.force()


def cons[T](head: T, tail: LazyList[T] = EMPTY) -> LazyList[T]:
    """
    Prepend `head` to `tail` without suspending anything.

    Example:
        cons(1, cons(2))  # [1; 2]
    """
    return LazyList.of_node(Cons(head, tail))


def peek[T](ll: LazyList[T]) -> Option[T]:
    """First element, if any. Forces one node."""
    match ll.force():
        case Cons(head, _):
            return Some(head)
        case Nil():
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


def uncons[T](ll: LazyList[T]) -> Option[tuple[T, LazyList[T]]]:
    """Split into head and tail, if non-empty. Forces one node."""
    match ll.force():
        case Cons(head, tail):
            return Some((head, tail))
        case Nil():
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


get = uncons


def is_empty[T](ll: LazyList[T]) -> bool:
    """True if the list has no elements. Forces one node."""
    return isinstance(ll.force(), Nil)


__all__ = (
    "cons",
    "force",
    "get",
    "is_empty",
    "peek",
    "uncons",
)
