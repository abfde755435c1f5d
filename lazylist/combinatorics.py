"""
Combinatorial generators
========================

Both generators return lazy lists of fresh Python lists. Results are
produced by append/map over recursively smaller instances, and every
recursive instance is itself suspended, so consuming a prefix of the
results never builds the whole 2^n / n! space.

Elements are treated by position: duplicate values in the input give
duplicate results.

Forcing nests one Python frame per input item, so inputs of a few hundred
items can exceed the interpreter recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterable

from .core.node import EMPTY, Cons, LazyList, Node
from .structure.append import append
from .transform.map import map


def combinations[T](items: Iterable[T]) -> LazyList[list[T]]:
    """
    All 2^n sublists of `items`, order of elements preserved.

    Sublists of the rest come first, then the same sublists with the
    first item prepended.

    Example:
        to_list(combinations([1, 2]))  # [[], [2], [1], [1, 2]]
    """
    pool = list(items)

    def subsets_from(i: int) -> LazyList[list[T]]:
        if i == len(pool):
            return LazyList.of_node(Cons([], EMPTY))
        head = pool[i]

        def compute() -> Node[list[T]]:
            rest = subsets_from(i + 1)
            with_head = map(rest, lambda subset: [head, *subset])
            return append(rest, with_head).force()

        return LazyList(compute)

    return subsets_from(0)


def permutations[T](items: Iterable[T]) -> LazyList[list[T]]:
    """
    All n! orderings of `items`.

    Example:
        to_list(permutations([1, 2, 3]))
        # [[1, 2, 3], [1, 3, 2], [2, 3, 1], [2, 1, 3], [3, 2, 1], [3, 1, 2]]
    """

    # Pick the first element from `among`; `passed` holds items already
    # declined as first, still available for later positions.
    def choose_first(among: list[T], passed: list[T]) -> LazyList[list[T]]:
        def compute() -> Node[list[T]]:
            if not among:
                return Cons([], EMPTY)
            head, rest = among[0], among[1:]
            if not rest:
                return starting_with(head, passed).force()
            return append(
                starting_with(head, rest + passed),
                choose_first(rest, [head, *passed]),
            ).force()

        return LazyList(compute)

    def starting_with(head: T, others: list[T]) -> LazyList[list[T]]:
        return map(choose_first(others, []), lambda perm: [head, *perm])

    return choose_first(list(items), [])


__all__ = ("combinations", "permutations")
