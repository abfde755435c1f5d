from .access import cons, force, get, is_empty, peek, uncons
from .node import EMPTY, NIL, Cons, LazyList, Nil, Node

__all__ = (
    # Nodes
    "Cons",
    "Nil",
    "NIL",
    "Node",
    # Suspension
    "EMPTY",
    "LazyList",
    # Access
    "cons",
    "force",
    "get",
    "is_empty",
    "peek",
    "uncons",
)
