from .chars import CharStream, of_char_stream, to_char_stream
from .eager import eager_of_list, of_array, of_list, to_array, to_list
from .iterator import Cursor, cursor, of_iterator, to_iterator

__all__ = (
    # Eager sequences
    "eager_of_list",
    "of_array",
    "of_list",
    "to_array",
    "to_list",
    # Iterators
    "Cursor",
    "cursor",
    "of_iterator",
    "to_iterator",
    # Character streams
    "CharStream",
    "of_char_stream",
    "to_char_stream",
)
