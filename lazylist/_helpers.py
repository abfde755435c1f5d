"""Internal helpers for lazylist.

Common callbacks used as defaults across multiple modules.
These are not part of the public API."""

from __future__ import annotations

import typing


def natural_compare(a: typing.Any, b: typing.Any) -> int:
    """Three-way comparison using the natural Python ordering."""
    return (a > b) - (a < b)


def natural_equal(a: typing.Any, b: typing.Any) -> bool:
    """Structural equality: `a == b`."""
    return bool(a == b)


def identical(a: typing.Any, b: typing.Any) -> bool:
    """Physical equality: `a is b`."""
    return a is b


__all__ = (
    "identical",
    "natural_compare",
    "natural_equal",
)
