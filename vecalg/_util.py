from __future__ import annotations

from typing import Any

from vecalg.exceptions import IndexOutOfBoundsError, NullInputError


def check_index(index: int, size: int) -> int:
    """Return `index` if it lies in `[0, size)`, else raise IndexOutOfBoundsError.

    Negative indices are rejected rather than wrapped around like a list.
    """
    if index < 0 or index >= size:
        raise IndexOutOfBoundsError(index, size)
    return index


def check_not_none(**named: Any) -> None:
    """Raise NullInputError naming the first argument that is None."""
    for name, value in named.items():
        if value is None:
            raise NullInputError(f"{name} must not be None")
