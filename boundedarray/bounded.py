"""
BoundedArray — fixed-size, bounds-checked integer storage.

SYSTEM INVARIANT:
    Every read and every write goes through is_valid_index() before the
    storage is touched. An invalid index raises IndexOutOfBoundsError;
    it is never clamped, wrapped, or replaced by a default value.

Storage model:
    An instance exclusively owns one array.array of C ints. A
    zero-length instance owns nothing (storage is None). Deep-copy
    assignment releases the old block and allocates a fresh one, so two
    instances never share storage.
"""

from __future__ import annotations

import logging
import operator
from array import array
from typing import Any, Iterator, Optional

from .errors import IndexOutOfBoundsError


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Signed C int, the fixed-width element type
ELEMENT_TYPECODE = "i"

# Rendering: [e0, e1, ..., en-1]\n
RENDER_OPEN = "["
RENDER_CLOSE = "]"
RENDER_SEPARATOR = ", "
RENDER_TERMINATOR = "\n"


def _require_size(size: Any) -> int:
    """
    Accept only a real integer as a requested size.

    bool is rejected even though it subclasses int: BoundedArray(True)
    is never an intentional size.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(
            f"BoundedArray size must be an int, got {type(size).__name__}"
        )
    return size


# =============================================================================
# SLOT (writable binding)
# =============================================================================

class Slot:
    """
    A live, writable binding to one element of a BoundedArray.

    The slot does not cache the value or the storage. Each read or write
    goes back through the owning array, so the bounds check runs again
    even if the owner was reassigned to a shorter array in between.
    """

    __slots__ = ("_owner", "_index")

    def __init__(self, owner: BoundedArray, index: int):
        self._owner = owner
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> int:
        return self._owner.get(self._index)

    @value.setter
    def value(self, new_value: int) -> None:
        self._owner.set(self._index, new_value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        if not self._owner.is_valid_index(self._index):
            return f"Slot(index={self._index}, value=<out of bounds>)"
        return f"Slot(index={self._index}, value={self.value})"


# =============================================================================
# BOUNDED ARRAY
# =============================================================================

class BoundedArray:
    """
    An owned, fixed-length sequence of C ints with checked access.

    Construction:
        BoundedArray()   — empty, no storage allocated
        BoundedArray(n)  — n zero-initialized elements; n <= 0 is empty

    Access:
        get(i) / array[i]            — read, bounds-checked
        get_mutable(i)               — writable Slot, bounds-checked
        set(i, v) / array[i] = v     — write, bounds-checked

    Copy:
        assign(source)  — deep copy into this instance, returns self
        copy()          — deep copy into a new instance
    """

    def __init__(self, size: int = 0):
        size = _require_size(size)
        self._storage: Optional[array] = None
        self._size = 0

        if size > 0:
            self._allocate(size)
        elif size < 0:
            logger.debug("Requested size %d is negative, array is empty", size)

    # -------------------------------------------------------------------------
    # Storage lifecycle
    # -------------------------------------------------------------------------

    def _allocate(self, size: int, values: Optional[array] = None) -> None:
        """Take ownership of a new block of `size` elements."""
        if values is None:
            self._storage = array(ELEMENT_TYPECODE, [0]) * size
        else:
            self._storage = array(ELEMENT_TYPECODE)
            for i in range(size):
                self._storage.append(values[i])
        self._size = size
        logger.debug("Allocated storage for %d elements", size)

    def release(self) -> None:
        """
        Drop the owned storage. Safe to call more than once.

        After release the instance is empty.
        """
        if self._storage is not None:
            logger.debug("Releasing storage of %d elements", self._size)
        self._storage = None
        self._size = 0

    def __enter__(self) -> BoundedArray:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.release()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def size(self) -> int:
        """Number of elements."""
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_valid_index(self, index: int) -> bool:
        """Bounds check: True iff 0 <= index < size()."""
        return self._in_bounds(operator.index(index))

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < self._size

    def _checked_index(self, index: int) -> int:
        """Run the bounds check, raising before any storage access."""
        index = operator.index(index)
        if not self._in_bounds(index):
            raise IndexOutOfBoundsError(index, self._size)
        return index

    # -------------------------------------------------------------------------
    # Element access
    # -------------------------------------------------------------------------

    def get(self, index: int) -> int:
        """
        Read the element at `index`.

        Raises:
            IndexOutOfBoundsError: If is_valid_index(index) is False
        """
        index = self._checked_index(index)
        return self._storage[index]

    def get_mutable(self, index: int) -> Slot:
        """
        Bind a writable Slot to the element at `index`.

        Raises:
            IndexOutOfBoundsError: If is_valid_index(index) is False
        """
        index = self._checked_index(index)
        return Slot(self, index)

    def set(self, index: int, value: int) -> None:
        """
        Overwrite the element at `index`.

        Raises:
            IndexOutOfBoundsError: If is_valid_index(index) is False
            TypeError: If value is not an integer
            OverflowError: If value does not fit a C int
        """
        index = self._checked_index(index)
        self._storage[index] = value

    def __getitem__(self, index: int) -> int:
        if isinstance(index, slice):
            raise TypeError("BoundedArray does not support slicing")
        return self.get(index)

    def __setitem__(self, index: int, value: int) -> None:
        if isinstance(index, slice):
            raise TypeError("BoundedArray does not support slicing")
        self.set(index, value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for i in range(self._size):
            yield self.get(i)

    def to_list(self) -> list[int]:
        return list(self)

    # -------------------------------------------------------------------------
    # Copy
    # -------------------------------------------------------------------------

    def assign(self, source: BoundedArray) -> BoundedArray:
        """
        Deep-copy `source` into this instance.

        The current storage is released and a new block sized to
        source.size() is allocated and filled element by element.
        Assigning an instance to itself changes nothing and allocates
        nothing.

        Returns:
            self, so assignments can be chained
        """
        if not isinstance(source, BoundedArray):
            raise TypeError(
                f"Cannot assign {type(source).__name__} to BoundedArray"
            )

        if source is self:
            logger.debug("Self-assignment, storage kept as is")
            return self

        logger.debug("Deep copy of %d elements", source._size)
        self.release()
        if not source.is_empty():
            self._allocate(source._size, source._storage)
        return self

    def copy(self) -> BoundedArray:
        """Return a new instance holding a deep copy of this one."""
        return BoundedArray().assign(self)

    def __copy__(self) -> BoundedArray:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> BoundedArray:
        return self.copy()

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedArray):
            return NotImplemented
        return self._size == other._size and self.to_list() == other.to_list()

    __hash__ = None

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _format(self) -> str:
        body = RENDER_SEPARATOR.join(str(value) for value in self)
        return f"{RENDER_OPEN}{body}{RENDER_CLOSE}"

    def render(self) -> str:
        """
        Render as text: "[e0, e1, ..., en-1]\\n", or "[]\\n" when empty.

        Writing the text anywhere is the caller's business.
        """
        return self._format() + RENDER_TERMINATOR

    def __str__(self) -> str:
        return self._format()

    def __repr__(self) -> str:
        return f"BoundedArray({self.to_list()!r})"
