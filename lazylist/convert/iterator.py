"""
Iterator bridges
================

Pull one element per force from an external iterator, and expose a lazy
list as a cloneable cursor.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import assert_never

from kungfu import Nothing, Option, Some

from ..core.node import NIL, Cons, LazyList, Nil, Node
from ..structure.position import length

_EXHAUSTED = object()


def of_iterator[T](iterable: Iterable[T]) -> LazyList[T]:
    """
    Lazy conversion from any iterable.

    `next()` is called on the underlying iterator once per forced
    position, never ahead of demand.
    """
    it = iter(iterable)

    def step() -> Node[T]:
        value = next(it, _EXHAUSTED)
        if value is _EXHAUSTED:
            return NIL
        return Cons(value, LazyList(step))  # type: ignore[arg-type]

    return LazyList(step)


def to_iterator[T](ll: LazyList[T]) -> Iterator[T]:
    """Plain Python iterator over the list, forcing as it goes."""
    return iter(ll)


class Cursor[T]:
    """
    Push-style enumerator over a lazy list.

    A cursor only holds its current position. Since the nodes behind it
    are memoised and shared, `clone()` gives an independent cursor at the
    same position and advancing either one never disturbs the other.
    """

    __slots__ = ("_position",)

    def __init__(self, ll: LazyList[T], /) -> None:
        self._position = ll

    @property
    def remaining(self) -> LazyList[T]:
        """The list from the current position on."""
        return self._position

    def peek(self) -> Option[T]:
        """Next element without advancing."""
        match self._position.force():
            case Cons(head, _):
                return Some(head)
            case Nil():
                return Nothing()
            case _ as unreachable:
                assert_never(unreachable)

    def has_next(self) -> bool:
        return not isinstance(self._position.force(), Nil)

    def count(self) -> int:
        """Elements left. Forces the remainder; the position does not move."""
        return length(self._position)

    def clone(self) -> Cursor[T]:
        return Cursor(self._position)

    __copy__ = clone

    def __iter__(self) -> Cursor[T]:
        return self

    def __next__(self) -> T:
        match self._position.force():
            case Cons(head, tail):
                self._position = tail
                return head
            case Nil():
                raise StopIteration
            case _ as unreachable:
                assert_never(unreachable)

    def __repr__(self) -> str:
        return f"Cursor({self._position!r})"


def cursor[T](ll: LazyList[T]) -> Cursor[T]:
    """Cursor positioned at the start of `ll`."""
    return Cursor(ll)


__all__ = ("Cursor", "cursor", "of_iterator", "to_iterator")
