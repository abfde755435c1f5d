"""Positional access

Length, ends and indexed access."""

from __future__ import annotations

from typing import assert_never

from .._errors import EmptyListError, InvalidIndexError
from ..core.node import Cons, LazyList, Nil


def length[T](ll: LazyList[T]) -> int:
    """Number of elements. Forces the whole list."""
    n = 0
    for _ in ll:
        n += 1
    return n


def hd[T](ll: LazyList[T]) -> T:
    """First element. Raises EmptyListError."""
    match ll.force():
        case Cons(head, _):
            return head
        case Nil():
            raise EmptyListError("hd")
        case _ as unreachable:
            assert_never(unreachable)


first = hd


def tl[T](ll: LazyList[T]) -> LazyList[T]:
    """Everything but the first element. Raises EmptyListError."""
    match ll.force():
        case Cons(_, tail):
            return tail
        case Nil():
            raise EmptyListError("tl")
        case _ as unreachable:
            assert_never(unreachable)


def last[T](ll: LazyList[T]) -> T:
    """Last element. Forces the whole list. Raises EmptyListError."""
    node = ll.force()
    if isinstance(node, Nil):
        raise EmptyListError("last")
    while True:
        following = node.tail.force()
        if isinstance(following, Nil):
            return node.head
        node = following


def at[T](ll: LazyList[T], n: int) -> T:
    """
    Element at position `n` (0-based).

    Raises InvalidIndexError if `n` is negative or past the end.
    """
    if n < 0:
        raise InvalidIndexError(n)
    rest = ll
    i = n
    while True:
        match rest.force():
            case Cons(head, tail):
                if i == 0:
                    return head
                rest = tail
                i -= 1
            case Nil():
                raise InvalidIndexError(n)
            case _ as unreachable:
                assert_never(unreachable)


nth = at


def would_at_fail[T](ll: LazyList[T], n: int) -> bool:
    """True if `at(ll, n)` would raise. Forces at most `n + 1` nodes."""
    if n < 0:
        return True
    rest = ll
    for _ in range(n):
        match rest.force():
            case Cons(_, tail):
                rest = tail
            case Nil():
                return True
            case _ as unreachable:
                assert_never(unreachable)
    return isinstance(rest.force(), Nil)


__all__ = ("at", "first", "hd", "last", "length", "nth", "tl", "would_at_fail")
