"""Character stream adapters

A text stream read one character per force, and a lazy list of
characters exposed as a readable text stream."""

from __future__ import annotations

import io
import typing

from ..core.node import NIL, Cons, LazyList, Node
from .iterator import Cursor


def of_char_stream(stream: typing.TextIO) -> LazyList[str]:
    """
    Lazy list of the characters of `stream`.

    Each forced position reads exactly one character, so the stream is
    never advanced past what has been consumed.
    """

    def step() -> Node[str]:
        char = stream.read(1)
        if not char:
            return NIL
        return Cons(char, LazyList(step))

    return LazyList(step)


class CharStream(io.TextIOBase):
    """
    Readable text stream over a lazy list of characters.

    Reading `n` characters forces exactly `n` positions of the list.
    """

    def __init__(self, ll: LazyList[str]) -> None:
        super().__init__()
        self._cursor = Cursor(ll)

    def readable(self) -> bool:
        return True

    def _ensure_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed stream")

    def read(self, size: int | None = -1) -> str:
        self._ensure_open()
        if size is None or size < 0:
            return "".join(self._cursor)
        if size == 0:
            return ""
        chars: list[str] = []
        for char in self._cursor:
            chars.append(char)
            if len(chars) == size:
                break
        return "".join(chars)

    def readline(self, size: int | None = -1) -> str:  # type: ignore[override]
        self._ensure_open()
        chars: list[str] = []
        if size == 0:
            return ""
        for char in self._cursor:
            chars.append(char)
            if char == "\n" or (size is not None and 0 < size == len(chars)):
                break
        return "".join(chars)


def to_char_stream(ll: LazyList[str]) -> CharStream:
    """Expose a lazy list of characters as a text stream."""
    return CharStream(ll)


__all__ = ("CharStream", "of_char_stream", "to_char_stream")
