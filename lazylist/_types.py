"""
Core type definitions for lazylist.

Алиасы для колбэков, используемых по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Callback aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# IndexedPredicate = predicate that also sees the element position
type IndexedPredicate[T] = Callable[[int, T], bool]

# Comparator = three-way comparison: negative, zero or positive
type Comparator[T] = Callable[[T, T], int]

# Equality = pairwise equivalence test
type Equality[T] = Callable[[T, T], bool]

# Renderer = element-to-text function used by the printer
type Renderer[T] = Callable[[T], str]


__all__ = (
    "Comparator",
    "Equality",
    "IndexedPredicate",
    "Predicate",
    "Renderer",
)
