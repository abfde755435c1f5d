from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class Probe:
    """Counts calls to a wrapped function, to show what laziness saves."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.calls = 0

    def wrap[T, R](self, f: Callable[[T], R]) -> Callable[[T], R]:
        def counted(x: T) -> R:
            self.calls += 1
            return f(x)
        return counted

    def report(self) -> None:  # pragma: no cover (examples only)
        print(f"  {self.name}: {self.calls} call(s)")


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
