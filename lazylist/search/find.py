"""
Find combinators
================

Forward search stops at the first hit. Backward search keeps the last hit
and therefore always traverses the whole list.

`*_opt` variants return Option; the plain variants raise NotFoundError
(or the exception built by `error`).
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Nothing, Option, Some

from .._errors import NotFoundError
from .._types import IndexedPredicate, Predicate
from ..core.node import LazyList


# ============================================================================
# Option-returning search
# ============================================================================


def find_opt[T](ll: LazyList[T], predicate: Predicate[T]) -> Option[T]:
    """First element satisfying `predicate`."""
    for item in ll:
        if predicate(item):
            return Some(item)
    return Nothing()


def rfind_opt[T](ll: LazyList[T], predicate: Predicate[T]) -> Option[T]:
    """Last element satisfying `predicate`. Full traversal."""
    found: Option[T] = Nothing()
    for item in ll:
        if predicate(item):
            found = Some(item)
    return found


def findi_opt[T](ll: LazyList[T], predicate: IndexedPredicate[T]) -> Option[tuple[int, T]]:
    """First `(i, x)` with `predicate(i, x)`."""
    for i, item in enumerate(ll):
        if predicate(i, item):
            return Some((i, item))
    return Nothing()


def rfindi_opt[T](ll: LazyList[T], predicate: IndexedPredicate[T]) -> Option[tuple[int, T]]:
    """Last `(i, x)` with `predicate(i, x)`. Full traversal."""
    found: Option[tuple[int, T]] = Nothing()
    for i, item in enumerate(ll):
        if predicate(i, item):
            found = Some((i, item))
    return found


# ============================================================================
# Strict search
# ============================================================================


def _get_or_raise[V](found: Option[V], error: Callable[[], Exception] | None) -> V:
    match found:
        case Some(value):
            return value
        case _:
            raise error() if error is not None else NotFoundError()


def find[T](
    ll: LazyList[T],
    predicate: Predicate[T],
    *,
    error: Callable[[], Exception] | None = None,
) -> T:
    """
    First element satisfying `predicate`.

    Raises NotFoundError, or `error()` when given.

    Example:
        find(range_inclusive(1, 10), lambda x: x > 3)  # 4
        find(EMPTY, bool, error=lambda: KeyError("none"))  # raises KeyError
    """
    return _get_or_raise(find_opt(ll, predicate), error)


def rfind[T](
    ll: LazyList[T],
    predicate: Predicate[T],
    *,
    error: Callable[[], Exception] | None = None,
) -> T:
    """Last element satisfying `predicate`. Raises like find()."""
    return _get_or_raise(rfind_opt(ll, predicate), error)


def findi[T](ll: LazyList[T], predicate: IndexedPredicate[T]) -> tuple[int, T]:
    """First `(i, x)` with `predicate(i, x)`. Raises NotFoundError."""
    return _get_or_raise(findi_opt(ll, predicate), None)


def rfindi[T](ll: LazyList[T], predicate: IndexedPredicate[T]) -> tuple[int, T]:
    """Last `(i, x)` with `predicate(i, x)`. Raises NotFoundError."""
    return _get_or_raise(rfindi_opt(ll, predicate), None)


__all__ = (
    "find",
    "find_opt",
    "findi",
    "findi_opt",
    "rfind",
    "rfind_opt",
    "rfindi",
    "rfindi_opt",
)
