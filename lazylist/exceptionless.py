"""
Exceptionless counterparts of raising operations.

Searches and lookups return Option, indexed access returns Result with
the InvalidIndexError as the error value. Exceptions raised by user
callbacks still propagate.

Usage:
    from lazylist import exceptionless as X

    X.find(ll, lambda x: x > 3)    # Some(4) / Nothing()
    X.at(ll, 10)                   # Ok(x) / Error(InvalidIndexError(10))
"""

from __future__ import annotations

from kungfu import Error, Nothing, Ok, Option, Result, Some

from ._errors import EmptyListError, InvalidIndexError, NotFoundError
from .core.node import LazyList
from .search import member
from .search.find import find_opt, findi_opt, rfind_opt, rfindi_opt
from .structure import position, slicing

find = find_opt
rfind = rfind_opt
findi = findi_opt
rfindi = rfindi_opt


def hd[T](ll: LazyList[T]) -> Option[T]:
    """First element, Nothing() if empty."""
    try:
        return Some(position.hd(ll))
    except EmptyListError:
        return Nothing()


def last[T](ll: LazyList[T]) -> Option[T]:
    """Last element, Nothing() if empty. Forces the whole list."""
    try:
        return Some(position.last(ll))
    except EmptyListError:
        return Nothing()


def at[T](ll: LazyList[T], n: int) -> Result[T, InvalidIndexError]:
    """Element at position `n`, or Error(InvalidIndexError(n))."""
    try:
        return Ok(position.at(ll, n))
    except InvalidIndexError as exc:
        return Error(exc)


def assoc[K, V](ll: LazyList[tuple[K, V]], key: K) -> Option[V]:
    """Value of the first pair whose key equals `key`."""
    try:
        return Some(member.assoc(ll, key))
    except NotFoundError:
        return Nothing()


def assq[K, V](ll: LazyList[tuple[K, V]], key: K) -> Option[V]:
    """Value of the first pair whose key is `key`."""
    try:
        return Some(member.assq(ll, key))
    except NotFoundError:
        return Nothing()


def split_at[T](
    ll: LazyList[T],
    n: int,
) -> Result[tuple[LazyList[T], LazyList[T]], InvalidIndexError]:
    """
    split_at() that checks the length up front.

    Forces the first `n` nodes so that a short list is reported here
    instead of when the remainder is forced.
    """
    if n < 0 or (n > 0 and position.would_at_fail(ll, n - 1)):
        return Error(InvalidIndexError(n))
    return Ok(slicing.split_at(ll, n))


__all__ = (
    "assoc",
    "assq",
    "at",
    "find",
    "findi",
    "hd",
    "last",
    "rfind",
    "rfindi",
    "split_at",
)
