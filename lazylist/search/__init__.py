from .find import find, find_opt, findi, findi_opt, rfind, rfind_opt, rfindi, rfindi_opt
from .member import (
    assoc,
    assq,
    exists,
    for_all,
    index_of,
    index_ofq,
    mem,
    mem_assoc,
    mem_assq,
    memq,
    rindex_of,
    rindex_ofq,
)

__all__ = (
    # Strict
    "find",
    "findi",
    "rfind",
    "rfindi",
    "assoc",
    "assq",
    # Option
    "find_opt",
    "findi_opt",
    "rfind_opt",
    "rfindi_opt",
    "index_of",
    "index_ofq",
    "rindex_of",
    "rindex_ofq",
    # Predicates
    "exists",
    "for_all",
    "mem",
    "mem_assoc",
    "mem_assq",
    "memq",
)
