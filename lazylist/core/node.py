"""
LazyList - memoising suspension
===============================

A lazy list is a handle on a suspended computation producing a node:
either `Nil` or `Cons(head, tail)` where `tail` is again a lazy list.

Forcing contract:
- the computation runs at most once per suspension instance
- every later force (through any handle) observes the cached node
- a computation that raises caches the exception and re-raises it on every
  later force; the computation is never retried
- a force that re-enters its own suspension raises RecursiveForceError
"""

from __future__ import annotations

import logging
import types
import typing
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .._errors import RecursiveForceError

logger = logging.getLogger(__name__)

# Forced elements shown by repr() before eliding the rest
_REPR_LIMIT = 10


@dataclass(frozen=True, slots=True)
class Nil:
    """End of a list. Use the shared NIL instance."""

    def __repr__(self) -> str:
        return "Nil"


@dataclass(frozen=True, slots=True)
class Cons[T]:
    """A head value and the suspended rest of the list."""

    head: T
    tail: LazyList[T]


type Node[T] = Nil | Cons[T]

NIL: typing.Final[Nil] = Nil()


class LazyList[T]:
    """
    Memoised, possibly infinite, singly-linked list.

    Usage:
        ll = LazyList(lambda: Cons(1, EMPTY))
        ll.force()  # Cons(head=1, tail=LazyList([]))
    """

    __slots__ = ("_thunk", "_node", "_failure", "_failure_tb")

    def __init__(self, thunk: Callable[[], Node[T]], /) -> None:
        """Create an unforced suspension from a zero-arg callable returning a node."""
        self._thunk: Callable[[], Node[T]] | None = thunk
        self._node: Node[T] | None = None
        self._failure: Exception | None = None
        self._failure_tb: types.TracebackType | None = None

    @staticmethod
    def of_node[V](node: Node[V]) -> LazyList[V]:
        """Wrap an already-known node into a pre-forced suspension."""
        ll: LazyList[V] = LazyList.__new__(LazyList)
        ll._thunk = None
        ll._node = node
        ll._failure = None
        ll._failure_tb = None
        return ll

    # Forcing

    def force(self) -> Node[T]:
        """Return the cached node, computing it on the first call."""
        node = self._node
        if node is not None:
            return node
        if self._failure is not None:
            # Original traceback, not the one grown by earlier replays
            raise self._failure.with_traceback(self._failure_tb)

        thunk = self._thunk
        if thunk is None:
            raise RecursiveForceError()

        # Cleared while running so that re-entry is detected above
        self._thunk = None
        try:
            node = thunk()
        except Exception as exc:
            self._failure = exc
            self._failure_tb = exc.__traceback__
            logger.debug("Suspension failed, replaying on later forces: %r", exc)
            raise
        except BaseException:
            self._thunk = thunk
            raise

        self._node = node
        return node

    @property
    def is_forced(self) -> bool:
        """True once the node has been computed and cached."""
        return self._node is not None

    # Fluent shortcuts

    def map[U](self, f: Callable[[T], U], /) -> LazyList[U]:
        """Lazy map. See lazylist.transform.map."""
        from ..transform.map import map as map_
        return map_(self, f)

    def filter(self, predicate: Callable[[T], bool], /) -> LazyList[T]:
        """Lazy filter. See lazylist.transform.map."""
        from ..transform.map import filter as filter_
        return filter_(self, predicate)

    def take(self, n: int, /) -> LazyList[T]:
        """At most n leading elements. See lazylist.structure.slicing."""
        from ..structure.slicing import take
        return take(self, n)

    def drop(self, n: int, /) -> LazyList[T]:
        """Skip exactly n elements. See lazylist.structure.slicing."""
        from ..structure.slicing import drop
        return drop(self, n)

    # Protocol methods

    def __add__(self, other: LazyList[T], /) -> LazyList[T]:
        """Lazy append: `l1 + l2`."""
        if not isinstance(other, LazyList):
            return NotImplemented
        from ..structure.append import append
        return append(self, other)

    # Static so the generator frame does not pin the first node
    @staticmethod
    def _iter[V](ll: LazyList[V]) -> Iterator[V]:
        while True:
            node = ll.force()
            if isinstance(node, Nil):
                return
            ll = node.tail
            yield node.head

    def __iter__(self) -> Iterator[T]:
        return self._iter(self)

    def __repr__(self) -> str:
        parts: list[str] = []
        ll: LazyList[T] = self
        while True:
            node = ll._node
            if node is None:
                parts.append("...")
                break
            if isinstance(node, Nil):
                break
            if len(parts) == _REPR_LIMIT:
                parts.append("...")
                break
            parts.append(repr(node.head))
            ll = node.tail
        return f"LazyList([{', '.join(parts)}])"


EMPTY: typing.Final[LazyList[typing.Never]] = LazyList.of_node(NIL)


__all__ = (
    "Cons",
    "EMPTY",
    "LazyList",
    "NIL",
    "Nil",
    "Node",
)
