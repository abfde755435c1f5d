from __future__ import annotations

from _infra import banner, run
from kungfu import Error, Ok

import lazylist as L
from lazylist import exceptionless as X


def main() -> None:
    banner("combinations")
    print(sorted(L.to_list(L.combinations([1, 2, 3]))))

    banner("a prefix of 2^40 subsets")
    print(L.to_list(L.take(L.combinations(range(40)), 4)))

    banner("permutations")
    for perm in L.permutations("abc"):
        print("".join(perm))

    banner("first permutation whose neighbours all differ by more than one")
    found = X.find(
        L.permutations(range(1, 6)),
        lambda p: all(abs(a - b) > 1 for a, b in zip(p, p[1:])),
    )
    print(found)

    banner("exceptionless indexed access")
    for n in (2, 200):
        match X.at(L.permutations("abc"), n):
            case Ok(value):
                print(f"at {n}: {value}")
            case Error(err):
                print(f"at {n}: {err}")


if __name__ == "__main__":
    run(main)
