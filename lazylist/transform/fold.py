"""
Fold & iteration
================

Eager traversals, plus a lazy right fold for building lists.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from ..core.node import Cons, LazyList, Nil, Node


def iterate[T](ll: LazyList[T], f: Callable[[T], object]) -> None:
    """Call `f` on every element, in order. Forces the whole list."""
    for item in ll:
        f(item)


def iterate_indexed[T](ll: LazyList[T], f: Callable[[int, T], object]) -> None:
    """Call `f(i, x)` on every element, in order."""
    for i, item in enumerate(ll):
        f(i, item)


def fold_left[T, A](
    ll: LazyList[T],
    f: Callable[[A, T], A],
    *,
    initial: A,
) -> A:
    """
    `f(...f(f(initial, x0), x1)..., xn)`.

    Example:
        fold_left(range_inclusive(1, 4), operator.add, initial=0)  # 10
    """
    acc = initial
    for item in ll:
        acc = f(acc, item)
    return acc


def fold_right[T, A](
    ll: LazyList[T],
    f: Callable[[T, A], A],
    *,
    initial: A,
) -> A:
    """
    `f(x0, f(x1, ... f(xn, initial)))`. Eager: forces the whole list.

    For finite lists only.
    """
    acc = initial
    for item in reversed(list(ll)):
        acc = f(item, acc)
    return acc


def lazy_fold_right[T, U](
    ll: LazyList[T],
    f: Callable[[T, LazyList[U]], LazyList[U]],
    *,
    initial: LazyList[U],
) -> LazyList[U]:
    """
    Right fold producing a list, deferred per position.

    `f` receives the element and the (unforced) fold of the rest; neither
    `f` nor `initial` is touched until the result is forced that far.

    Each forced position may recurse through the following ones while `f`
    returns the rest unchanged, so long such runs can hit the recursion limit.
    """

    def compute() -> Node[U]:
        match ll.force():
            case Cons(head, tail):
                return f(head, lazy_fold_right(tail, f, initial=initial)).force()
            case Nil():
                return initial.force()
            case _ as unreachable:
                assert_never(unreachable)

    return LazyList(compute)


__all__ = (
    "fold_left",
    "fold_right",
    "iterate",
    "iterate_indexed",
    "lazy_fold_right",
)
