"""
Error hierarchy for BoundedArray.

There is exactly one domain failure: an index that fails the bounds
check. It is raised at the point of access, before storage is read or
written, and is never recovered from inside the package.
"""

from __future__ import annotations

from typing import Optional


# Stable, human-readable description surfaced to callers
INDEX_OUT_OF_BOUNDS_MESSAGE = "Index out of bounds."


class BoundedArrayError(Exception):
    """Base class for all BoundedArray failures."""
    pass


class IndexOutOfBoundsError(BoundedArrayError, IndexError):
    """
    Raised when an index fails the ``0 <= index < size`` check.

    The message is always INDEX_OUT_OF_BOUNDS_MESSAGE. The offending
    index and the array size are kept as attributes for callers that
    want more detail than the message gives.
    """

    def __init__(self, index: Optional[int] = None, size: Optional[int] = None):
        self.index = index
        self.size = size
        super().__init__(INDEX_OUT_OF_BOUNDS_MESSAGE)

    def __str__(self) -> str:
        return INDEX_OUT_OF_BOUNDS_MESSAGE
