"""
Demonstration sequence for BoundedArray.

Walks through construction, element access, rendering, and deep copy,
then makes one deliberately invalid access. The failure is caught
around the whole sequence, reported, and the run still ends normally.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from ..bounded import BoundedArray
from ..errors import IndexOutOfBoundsError


SEPARATOR = " -----------------------------------------"

# Sizes used by the walkthrough
SMALL_SIZE = 10
FILLED_SIZE = 11
FILL_STEP = 10
COPY_OVERWRITE_INDEX = 5
COPY_OVERWRITE_VALUE = 999
INVALID_INDEX = 12


def fill_with_step(target: BoundedArray, step: int) -> BoundedArray:
    """Write index * step into every element of `target`."""
    for i in range(target.size()):
        target[i] = i * step
    return target


def run_demo(stream: Optional[TextIO] = None) -> None:
    """
    Run the demonstration, writing everything to `stream`.

    IndexOutOfBoundsError is the only failure caught here. Anything
    else propagates.
    """
    out = stream if stream is not None else sys.stdout

    def emit(line: str = "") -> None:
        print(line, file=out)

    try:
        emit(" Creating an empty array.")
        a = BoundedArray()
        emit(f" a.size() is {a.size()}")
        emit(f" a.is_empty() is {a.is_empty()}")

        emit(SEPARATOR)

        emit(f" Creating an array containing {SMALL_SIZE} elements.")
        b = BoundedArray(SMALL_SIZE)
        emit(f" b.size() is {b.size()}")
        emit(f" b.is_empty() is {b.is_empty()}")

        emit(SEPARATOR)

        emit(" Setting b[0] = 10 ")
        b.get_mutable(0).value = 10
        emit(f" b[0] is {b[0]}")

        emit(SEPARATOR)

        emit(" Getting b[0] ")
        emit(f" b[0] is {b.get(0)}")

        emit(SEPARATOR)

        emit(" Rendering an array ")
        c = fill_with_step(BoundedArray(FILLED_SIZE), FILL_STEP)
        out.write(c.render())

        emit(SEPARATOR)

        emit(" Deep copy array ")
        d = BoundedArray(FILLED_SIZE)
        d.assign(c)
        d[COPY_OVERWRITE_INDEX] = COPY_OVERWRITE_VALUE
        out.write(c.render())
        out.write(d.render())

        emit(SEPARATOR)

        emit(f" Trying to access b[{INVALID_INDEX}] ")
        emit(f" b[{INVALID_INDEX}] is {b[INVALID_INDEX]}")

    except IndexOutOfBoundsError as e:
        emit(f"Exception: {e}")
