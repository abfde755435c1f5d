"""
Printing
========

Delimited rendering of lazy lists. Only the printed elements are forced:
with a `limit`, an infinite list prints its first `limit` elements and an
ellipsis. The position after the last printed element is never forced;
the ellipsis is left out only when that position is already known to be
the end of the list.
"""

from __future__ import annotations

import sys
import typing
from dataclasses import dataclass
from typing import assert_never

from ._errors import InvalidArgumentError
from ._types import Renderer
from .core.node import Cons, LazyList, Nil


@dataclass(frozen=True, slots=True)
class PrintOptions:
    """
    Delimiters and truncation for printed lists.

    `first`, `last` and `sep` are also readable as `prefix`, `suffix` and
    `separator`.
    """

    first: str = "[^"
    last: str = "^]"
    sep: str = "; "
    limit: int | None = None
    ellipsis: str = "..."

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise InvalidArgumentError("limit", f"PrintOptions.limit must be >= 0, got {self.limit}")

    @property
    def prefix(self) -> str:
        return self.first

    @property
    def suffix(self) -> str:
        return self.last

    @property
    def separator(self) -> str:
        return self.sep

    @classmethod
    def default(cls) -> PrintOptions:
        """`[^1; 2; 3^]`"""
        return cls()

    @classmethod
    def python(cls, limit: int | None = None) -> PrintOptions:
        """`[1, 2, 3]`, like a Python list."""
        return cls(first="[", last="]", sep=", ", limit=limit)

    @classmethod
    def truncated(cls, limit: int) -> PrintOptions:
        """Default delimiters, at most `limit` elements."""
        return cls(limit=limit)


def format_list[T](
    ll: LazyList[T],
    render: Renderer[T] = repr,
    options: PrintOptions | None = None,
) -> str:
    """
    Render `ll` with `options` delimiters.

    Example:
        format_list(of_list([1, 2, 3]))                              # "[^1; 2; 3^]"
        format_list(eternity(), options=PrintOptions.truncated(2))   # "[^None; None; ...^]"
    """
    opts = options if options is not None else PrintOptions.default()
    parts: list[str] = []
    rest = ll
    while opts.limit is None or len(parts) < opts.limit:
        match rest.force():
            case Cons(head, tail):
                parts.append(render(head))
                rest = tail
            case Nil():
                return f"{opts.first}{opts.sep.join(parts)}{opts.last}"
            case _ as unreachable:
                assert_never(unreachable)

    if not (rest.is_forced and isinstance(rest.force(), Nil)):
        parts.append(opts.ellipsis)
    return f"{opts.first}{opts.sep.join(parts)}{opts.last}"


def print_list[T](
    ll: LazyList[T],
    out: typing.TextIO | None = None,
    render: Renderer[T] = repr,
    options: PrintOptions | None = None,
) -> None:
    """Write `format_list(ll, ...)` to `out` (default: stdout), no newline."""
    stream = out if out is not None else sys.stdout
    stream.write(format_list(ll, render, options))


__all__ = ("PrintOptions", "format_list", "print_list")
