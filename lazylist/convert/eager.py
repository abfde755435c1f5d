"""Eager sequence conversions

Bridges between lazy lists and Python lists / tuples."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.node import EMPTY, Cons, LazyList
from ..structure.append import rev_append_of_list


def of_list[T](items: Sequence[T]) -> LazyList[T]:
    """
    Lazy conversion from a sequence: the default way in.

    Nothing is read until forced, so start-up cost is constant. The
    sequence must not be mutated while the list is being consumed.
    """

    def at(i: int) -> LazyList[T]:
        if i >= len(items):
            return EMPTY
        return LazyList(lambda: Cons(items[i], at(i + 1)))

    return at(0)


def eager_of_list[T](items: Sequence[T]) -> LazyList[T]:
    """Eager conversion: every node is built and pre-forced now."""
    return rev_append_of_list(items[::-1], EMPTY)


def of_array[T](items: tuple[T, ...] | Sequence[T]) -> LazyList[T]:
    """Eager conversion from a fixed-size array (tuple)."""
    return eager_of_list(items)


def to_list[T](ll: LazyList[T]) -> list[T]:
    """Eager conversion to a list. Forces everything."""
    return list(ll)


def to_array[T](ll: LazyList[T]) -> tuple[T, ...]:
    """Eager conversion to a tuple. Forces everything."""
    return tuple(ll)


__all__ = ("eager_of_list", "of_array", "of_list", "to_array", "to_list")
