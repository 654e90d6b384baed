"""
Error types raised by the full graph generators and their collaborators.

Each error also derives from the closest built-in exception, so callers
that catch ``ValueError``, ``IndexError`` or ``MemoryError`` keep working.
"""

from typing import Optional


class FullGraphError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgument(FullGraphError, ValueError):
    """An argument is outside its accepted domain (e.g. negative vertex count)."""


class IndexOutOfRange(FullGraphError, IndexError):
    """An edge endpoint does not lie in ``[0, n)``."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        value: Optional[int] = None,
    ):
        super().__init__(message)
        self.position = position
        self.value = value


class AllocationFailure(FullGraphError, MemoryError):
    """An edge buffer could not reserve the requested capacity."""

    def __init__(self, message: str, requested: Optional[int] = None):
        super().__init__(message)
        self.requested = requested


__all__ = [
    "FullGraphError",
    "InvalidArgument",
    "IndexOutOfRange",
    "AllocationFailure",
]
