from __future__ import annotations

from _infra import Probe, banner, run

import lazylist as L


def main() -> None:
    banner("map is lazy")
    probe = Probe("square")
    squares = L.map(L.range_inclusive(1, 1_000_000), probe.wrap(lambda x: x * x))
    print(L.format_list(L.take(squares, 3)))
    probe.report()

    banner("forced once, shared by every handle")
    print(L.format_list(L.take(squares, 3)))
    probe.report()

    banner("append never touches the second list early")
    ll = L.of_list([1, 2]) + L.of_list([3, 4])
    print(L.format_list(ll, options=L.PrintOptions.python()))

    banner("drop walks eagerly")
    try:
        L.drop(L.range_inclusive(1, 5), 10)
    except L.InvalidIndexError as exc:
        print(f"error: {exc} (index={exc.index})")


if __name__ == "__main__":
    run(main)
