from __future__ import annotations

import itertools

from _infra import banner, run
from kungfu import Nothing, Some

import lazylist as L


def fibonacci() -> L.LazyList[int]:
    return L.unfold((0, 1), lambda state: Some((state[0], (state[1], state[0] + state[1]))))


def main() -> None:
    truncated = L.PrintOptions.truncated(10)

    banner("fibonacci via unfold")
    print(L.format_list(fibonacci(), options=truncated))

    banner("filter + map over an unbounded stream")
    odd_squares = L.map(L.filter(fibonacci(), lambda n: n % 2 == 1), lambda n: n * n)
    print(L.format_list(odd_squares, options=truncated))

    banner("pulling from a Python iterator")
    counter = itertools.count(100)
    ll = L.of_iterator(counter)
    print(L.to_list(L.take(ll, 3)))
    print(f"next from the iterator itself: {next(counter)}")

    banner("cursor clones")
    cur = L.cursor(fibonacci())
    for _ in range(5):
        next(cur)
    twin = cur.clone()
    print([next(cur) for _ in range(3)], [next(twin) for _ in range(3)])

    banner("zip against an unbounded list")
    try:
        L.iterate2(L.of_list("abc"), fibonacci(), lambda a, b: None)
    except L.DifferentListSizeError as exc:
        print(f"error: {exc}")

    banner("from_while")
    words = iter("the lazy list".split())
    ll = L.from_while(lambda: Some(w) if (w := next(words, None)) is not None else Nothing())
    print(L.format_list(ll, str))


if __name__ == "__main__":
    run(main)
