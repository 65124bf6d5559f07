from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import ClassVar, Literal

import numpy as np

from vecalg import _util
from vecalg.exceptions import (
    DivisionByZeroError,
    LengthMismatchError,
    UnsupportedRepresentationError,
)

DIVISION_EPSILON = 1e-6
"""Divisors with a magnitude below this are treated as zero."""


class DenseVector:
    """A growable sequence of floats where the position is the index.

    Every index in `[0, size)` holds a value.
    Arithmetic methods mutate the vector in place.

    Examples
    --------
    >>> from vecalg import DenseVector
    >>> v = DenseVector(3)
    >>> v
    DenseVector([0.0, 0.0, 0.0])
    >>> v[1] = 2.0
    >>> v.plus_number(1)
    >>> v
    DenseVector([1.0, 3.0, 1.0])
    >>> v.inner_product()
    11.0
    """

    kind: ClassVar[Literal["dense"]] = "dense"

    def __init__(self, size: int = 0) -> None:
        """Create a zero-filled DenseVector.

        Parameters
        ----------
        size :
            The number of elements, each initialized to 0.0.
        """
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._values: list[float] = [0.0] * size

    @classmethod
    def from_values(cls, values: Iterable[float]) -> DenseVector:
        """Create a DenseVector holding a copy of `values`, in order.

        Examples
        --------
        >>> DenseVector.from_values([1, 2.5])
        DenseVector([1.0, 2.5])
        """
        result = cls()
        result._values = [float(v) for v in values]
        return result

    @property
    def size(self) -> int:
        """The number of elements."""
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        # iterate over a snapshot so that every traversal is independent
        return iter(tuple(self._values))

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseVector):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._values!r})"

    def get(self, index: int) -> float:
        """Get the value at `index`.

        Raises IndexOutOfBoundsError if `index` is not in `[0, size)`.
        """
        return self._values[_util.check_index(index, self.size)]

    def set(self, index: int, value: float) -> None:
        """Set the value at `index`. This never grows the vector.

        Raises IndexOutOfBoundsError if `index` is not in `[0, size)`.
        """
        self._values[_util.check_index(index, self.size)] = float(value)

    def append(self, value: float) -> None:
        """Grow the vector by one element."""
        self._values.append(float(value))

    def set_vector(self, other: DenseVector) -> None:
        """Overwrite every element with the corresponding element of `other`."""
        self._check_same_size(other)
        self._values[:] = other._values

    def set_zeros(self) -> None:
        """Set every element to 0.0, keeping the size."""
        self._values = [0.0] * self.size

    def clear(self) -> None:
        """Remove all elements, so the size becomes 0."""
        self._values.clear()

    def copy(self) -> DenseVector:
        """Return an independent copy of this vector."""
        return DenseVector.from_values(self._values)

    def plus_vector(self, other: DenseVector) -> None:
        """Add `other` to this vector, elementwise."""
        self._check_same_size(other)
        self._values = [a + b for a, b in zip(self._values, other._values)]

    def minus_vector(self, other: DenseVector) -> None:
        """Subtract `other` from this vector, elementwise."""
        self._check_same_size(other)
        self._values = [a - b for a, b in zip(self._values, other._values)]

    def multiply_vector(self, other: DenseVector) -> None:
        """Multiply this vector by `other`, elementwise."""
        self._check_same_size(other)
        self._values = [a * b for a, b in zip(self._values, other._values)]

    def plus_number(self, number: float) -> None:
        self._values = [a + number for a in self._values]

    def minus_number(self, number: float) -> None:
        self._values = [a - number for a in self._values]

    def multiply_number(self, number: float) -> None:
        self._values = [a * number for a in self._values]

    def divide_number(self, number: float) -> None:
        """Divide every element by `number`.

        Raises DivisionByZeroError if `abs(number)` is below `DIVISION_EPSILON`.
        """
        if abs(number) < DIVISION_EPSILON:
            raise DivisionByZeroError(
                f"Divisor {number} is too close to zero (< {DIVISION_EPSILON})"
            )
        self._values = [a / number for a in self._values]

    def scalar_product(self, other: DenseVector) -> float:
        """The dot product of this vector and `other`.

        Examples
        --------
        >>> a = DenseVector.from_values([1, 2])
        >>> a.scalar_product(DenseVector.from_values([4, 5]))
        14.0
        """
        self._check_same_size(other)
        return sum((a * b for a, b in zip(self._values, other._values)), 0.0)

    def inner_product(self) -> float:
        """The sum of the squared elements, 0.0 for an empty vector."""
        return sum((a * a for a in self._values), 0.0)

    def format(self, limit: int | None = None) -> str:
        """Format the elements separated by spaces.

        Parameters
        ----------
        limit :
            If given, only format the first `limit` elements.

        Examples
        --------
        >>> DenseVector.from_values([1, 2, 3]).format(limit=2)
        '1.0 2.0'
        """
        values = self._values if limit is None else self._values[:limit]
        return " ".join(str(v) for v in values)

    def to_list(self) -> list[float]:
        return list(self._values)

    def to_numpy(self) -> np.ndarray:
        """Return the elements as a 1D float64 numpy array."""
        return np.array(self._values, dtype=np.float64)

    def _check_same_size(self, other: DenseVector) -> None:
        _util.check_not_none(other=other)
        if not isinstance(other, DenseVector):
            raise UnsupportedRepresentationError(
                f"Expected a DenseVector, got {type(other).__name__}"
            )
        if other.size != self.size:
            raise LengthMismatchError(self.size, other.size)
