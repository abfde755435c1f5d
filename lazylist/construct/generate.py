"""
Generator-driven constructors
=============================

Списки, элементы которых вычисляются по одному при форсировании.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Nothing, Option, Some

from .._types import Predicate
from ..core.node import NIL, Cons, LazyList, Node


def from_while[T](f: Callable[[], Option[T]]) -> LazyList[T]:
    """
    Build a list by calling `f` once per position until it returns Nothing.

    Each call happens exactly when its position is first forced.

    Example:
        it = iter(range(3))
        ll = from_while(lambda: Some(x) if (x := next(it, None)) is not None else Nothing())
    """

    def step() -> Node[T]:
        match f():
            case Some(value):
                return Cons(value, LazyList(step))
            case Nothing():
                return NIL
            case _ as unreachable:
                assert_never(unreachable)

    return LazyList(step)


def unfold[T, S](seed: S, step: Callable[[S], Option[tuple[T, S]]]) -> LazyList[T]:
    """
    Build a list from an explicit state.

    `step(seed)` returns Some((value, next_seed)) to continue, Nothing() to stop.

    Example:
        unfold(1, lambda n: Some((n, n * 2)) if n < 100 else Nothing())
        # [1; 2; 4; 8; 16; 32; 64]
    """

    def at(state: S) -> LazyList[T]:
        def compute() -> Node[T]:
            match step(state):
                case Some((value, next_state)):
                    return Cons(value, at(next_state))
                case Nothing():
                    return NIL
                case _ as unreachable:
                    assert_never(unreachable)

        return LazyList(compute)

    return at(seed)


def seq[T](data: T, step: Callable[[T], T], cond: Predicate[T]) -> LazyList[T]:
    """
    `data, step(data), step(step(data)), ...` as long as `cond` holds.

    Example:
        seq(1, lambda x: x * 3, lambda x: x < 100)  # [1; 3; 9; 27; 81]
    """

    # step() runs only when the following position is forced
    def node_of(value: T) -> Node[T]:
        if cond(value):
            return Cons(value, LazyList(lambda: node_of(step(value))))
        return NIL

    return LazyList(lambda: node_of(data))


__all__ = ("from_while", "seq", "unfold")
