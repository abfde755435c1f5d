from __future__ import annotations


class LazyListError(Exception):
    """Base class for every failure raised by lazylist operations."""


class EmptyListError(LazyListError, LookupError):
    """First or last element requested from an empty list."""

    def __init__(self, operation: str = "") -> None:
        self.operation = operation
        prefix = f"{operation}(): " if operation else ""
        super().__init__(f"{prefix}empty list")


class InvalidIndexError(LazyListError, IndexError):
    """Index or count is negative or past the end of the list."""

    index: int

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Invalid index {index}")


class NotFoundError(LazyListError, LookupError):
    """No element satisfied the search predicate."""

    def __init__(self, message: str = "No matching element") -> None:
        super().__init__(message)


class DifferentListSizeError(LazyListError, ValueError):
    """A two-list operation reached the end of one list before the other."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}(): lists have different sizes")


class InvalidArgumentError(LazyListError, ValueError):
    """A fixed-length constructor received a negative length."""

    argument: str

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(message)


class RecursiveForceError(LazyListError, RuntimeError):
    """A suspension was forced again while its own computation was running."""

    def __init__(self) -> None:
        super().__init__("Suspension forced recursively during its own evaluation")


__all__ = (
    "DifferentListSizeError",
    "EmptyListError",
    "InvalidArgumentError",
    "InvalidIndexError",
    "LazyListError",
    "NotFoundError",
    "RecursiveForceError",
)
