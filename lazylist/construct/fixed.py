"""Fixed-shape constructors

Ranges, fixed-length lists and the unbounded unit list."""

from __future__ import annotations

from collections.abc import Callable

from .._errors import InvalidArgumentError
from ..core.node import EMPTY, Cons, LazyList, Node


def tabulate[T](n: int, f: Callable[[int], T]) -> LazyList[T]:
    """`[f(0); f(1); ...; f(n - 1)]`, each `f(i)` computed on first force."""
    if n < 0:
        raise InvalidArgumentError("n", f"tabulate(): n must be >= 0, got {n}")

    def at(i: int) -> LazyList[T]:
        if i >= n:
            return EMPTY
        return LazyList(lambda: Cons(f(i), at(i + 1)))

    return at(0)


def repeat[T](n: int, value: T) -> LazyList[T]:
    """`value` repeated `n` times."""
    if n < 0:
        raise InvalidArgumentError("n", f"repeat(): n must be >= 0, got {n}")

    def at(i: int) -> LazyList[T]:
        if i >= n:
            return EMPTY
        return LazyList(lambda: Cons(value, at(i + 1)))

    return at(0)


def range_inclusive(low: int, high: int) -> LazyList[int]:
    """
    Ascending integers from `low` to `high`, both included.

    Returns EMPTY when `high < low`; descending ranges are not produced.
    """

    def at(i: int) -> LazyList[int]:
        if i > high:
            return EMPTY
        return LazyList(lambda: Cons(i, at(i + 1)))

    return at(low)


def eternity() -> LazyList[None]:
    """
    Unbounded list of None.

    Every call builds a fresh chain, and every position is a new node,
    so consumed prefixes can be collected.
    """

    def step() -> Node[None]:
        return Cons(None, LazyList(step))

    return LazyList(step)


__all__ = ("eternity", "range_inclusive", "repeat", "tabulate")
