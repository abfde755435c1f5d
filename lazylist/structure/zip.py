"""
Two-list combinators
====================

Комбинаторы, проходящие два списка синхронно.

Both lists are walked one link at a time. As soon as one list ends while
the other does not, DifferentListSizeError is raised, so no lengths are
precomputed and an unbounded list can be paired with a finite one.
Short-circuiting predicates (`for_all2`, `exists2`) may answer before a
mismatch is reached. `equal` never raises on a mismatch.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from .._errors import DifferentListSizeError
from .._helpers import natural_equal
from .._types import Equality
from ..core.node import NIL, Cons, LazyList, Nil, Node
from ..transform.map import map

logger = logging.getLogger(__name__)


def _mismatch(operation: str) -> DifferentListSizeError:
    logger.debug("%s(): size mismatch detected", operation)
    return DifferentListSizeError(operation)


def _lockstep[T, U](
    l1: LazyList[T],
    l2: LazyList[U],
    operation: str,
) -> Iterator[tuple[T, U]]:
    while True:
        match l1.force(), l2.force():
            case Cons(h1, t1), Cons(h2, t2):
                l1, l2 = t1, t2
                yield h1, h2
            case Nil(), Nil():
                return
            case _:
                raise _mismatch(operation)


# ============================================================================
# Lazy
# ============================================================================


def map2[T, U, R](
    l1: LazyList[T],
    l2: LazyList[U],
    f: Callable[[T, U], R],
) -> LazyList[R]:
    """
    Lazy pairwise map.

    A size mismatch raises when the first unmatched position is forced.
    """

    def compute() -> Node[R]:
        match l1.force(), l2.force():
            case Cons(h1, t1), Cons(h2, t2):
                return Cons(f(h1, h2), map2(t1, t2, f))
            case Nil(), Nil():
                return NIL
            case _:
                raise _mismatch("map2")

    return LazyList(compute)


def combine[T, U](l1: LazyList[T], l2: LazyList[U]) -> LazyList[tuple[T, U]]:
    """
    Lazy zip into pairs.

    Example:
        combine(of_list([1, 2]), of_list("ab"))  # [(1, 'a'); (2, 'b')]
    """

    def compute() -> Node[tuple[T, U]]:
        match l1.force(), l2.force():
            case Cons(h1, t1), Cons(h2, t2):
                return Cons((h1, h2), combine(t1, t2))
            case Nil(), Nil():
                return NIL
            case _:
                raise _mismatch("combine")

    return LazyList(compute)


zip_together = combine


def uncombine[T, U](ll: LazyList[tuple[T, U]]) -> tuple[LazyList[T], LazyList[U]]:
    """
    Split a list of pairs into two lazy lists.

    Both results read the same memoised source, so each pair is computed
    once however the two halves are consumed.
    """
    return map(ll, lambda pair: pair[0]), map(ll, lambda pair: pair[1])


# ============================================================================
# Eager
# ============================================================================


def iterate2[T, U](
    l1: LazyList[T],
    l2: LazyList[U],
    f: Callable[[T, U], object],
) -> None:
    """Call `f(a, b)` on every pair, in order."""
    for a, b in _lockstep(l1, l2, "iterate2"):
        f(a, b)


def fold_left2[T, U, A](
    l1: LazyList[T],
    l2: LazyList[U],
    f: Callable[[A, T, U], A],
    *,
    initial: A,
) -> A:
    """`f(...f(initial, a0, b0)..., an, bn)`."""
    acc = initial
    for a, b in _lockstep(l1, l2, "fold_left2"):
        acc = f(acc, a, b)
    return acc


def fold_right2[T, U, A](
    l1: LazyList[T],
    l2: LazyList[U],
    f: Callable[[T, U, A], A],
    *,
    initial: A,
) -> A:
    """`f(a0, b0, ... f(an, bn, initial))`. A mismatch raises before any `f` call."""
    acc = initial
    for a, b in reversed(list(_lockstep(l1, l2, "fold_right2"))):
        acc = f(a, b, acc)
    return acc


def for_all2[T, U](
    l1: LazyList[T],
    l2: LazyList[U],
    predicate: Callable[[T, U], bool],
) -> bool:
    """Every pair satisfies `predicate`. Stops at the first miss."""
    for a, b in _lockstep(l1, l2, "for_all2"):
        if not predicate(a, b):
            return False
    return True


def exists2[T, U](
    l1: LazyList[T],
    l2: LazyList[U],
    predicate: Callable[[T, U], bool],
) -> bool:
    """Some pair satisfies `predicate`. Stops at the first hit."""
    for a, b in _lockstep(l1, l2, "exists2"):
        if predicate(a, b):
            return True
    return False


def equal[T](
    l1: LazyList[T],
    l2: LazyList[T],
    eq: Equality[T] = natural_equal,
) -> bool:
    """
    Structural equality. False on any element or length mismatch.

    Example:
        equal(range_inclusive(0, 2), range_inclusive(0, 3))  # False
    """
    while True:
        match l1.force(), l2.force():
            case Cons(h1, t1), Cons(h2, t2):
                if not eq(h1, h2):
                    return False
                l1, l2 = t1, t2
            case Nil(), Nil():
                return True
            case _:
                return False


__all__ = (
    "combine",
    "equal",
    "exists2",
    "fold_left2",
    "fold_right2",
    "for_all2",
    "iterate2",
    "map2",
    "uncombine",
    "zip_together",
)
