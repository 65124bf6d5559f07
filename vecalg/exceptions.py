from __future__ import annotations


class VecalgError(Exception):
    """Base class for all vecalg errors."""


class LengthMismatchError(ValueError, VecalgError):
    """Two vectors (or a vector and an output vector) differ in logical size."""

    def __init__(self, left: int, right: int) -> None:
        self.left: int = left
        """The logical size of the first vector."""
        self.right: int = right
        """The logical size of the second vector."""
        super().__init__(f"Vector lengths must match, got {left} and {right}")


class IndexOutOfBoundsError(IndexError, VecalgError):
    """An index is outside of `[0, size)` for a vector."""

    def __init__(self, index: int, size: int) -> None:
        self.index: int = index
        """The offending index."""
        self.size: int = size
        """The logical size of the vector that was accessed."""
        super().__init__(f"Index {index} is out of bounds for size {size}")


class NullInputError(TypeError, VecalgError):
    """A required vector argument was None."""


class DivisionByZeroError(ZeroDivisionError, VecalgError):
    """A scalar divisor was too close to zero."""


class UnsupportedRepresentationError(TypeError, VecalgError):
    """An operand is neither a dense nor a sparse vector."""


class ConcurrentModificationError(RuntimeError, VecalgError):
    """A sparse vector was structurally modified while it was being traversed."""


class UnboundedLengthError(ValueError, VecalgError):
    """An operation needs a finite length, but the vector is unbounded."""
