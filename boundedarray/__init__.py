# BoundedArray
# Fixed-size, bounds-checked integer storage

"""
Core invariant: every element access passes through a single bounds
check before storage is touched.

This package exposes the BoundedArray type and its error hierarchy.
"""

from .bounded import BoundedArray, Slot
from .errors import BoundedArrayError, IndexOutOfBoundsError

__all__ = [
    "BoundedArray",
    "BoundedArrayError",
    "IndexOutOfBoundsError",
    "Slot",
]
