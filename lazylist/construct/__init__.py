from .fixed import eternity, range_inclusive, repeat, tabulate
from .generate import from_while, seq, unfold

__all__ = (
    # Generator-driven
    "from_while",
    "seq",
    "unfold",
    # Fixed shape
    "eternity",
    "range_inclusive",
    "repeat",
    "tabulate",
)
