from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator, Mapping
import sys
from typing import ClassVar, Literal

from vecalg import _util
from vecalg.exceptions import ConcurrentModificationError
from vecalg.vector._pair import Pair

UNBOUNDED = sys.maxsize
"""The logical length of a SparseVector created without one."""


class SparseVector:
    """A vector that only stores its present entries.

    Indices that are not present are implicitly 0.0.
    The vector has a fixed logical length, and every present index
    lies in `[0, length)`. Explicit zeros can be stored, they are not pruned.

    Iterating yields [Pair][vecalg.vector.Pair]s of the present entries,
    in ascending index order. Adding or removing an entry while a traversal
    is in progress makes that traversal raise ConcurrentModificationError.

    Examples
    --------
    >>> from vecalg import SparseVector
    >>> v = SparseVector(5, {3: 4.0, 1: 2.0})
    >>> list(v)
    [Pair(index=1, value=2.0), Pair(index=3, value=4.0)]
    >>> v.get(0) is None
    True
    >>> v[0]
    0.0
    >>> v.n_present, len(v)
    (2, 5)
    """

    kind: ClassVar[Literal["sparse"]] = "sparse"

    def __init__(
        self,
        length: int = UNBOUNDED,
        entries: Mapping[int, float] | Iterable[tuple[int, float]] | None = None,
    ) -> None:
        """Create a SparseVector.

        Parameters
        ----------
        length :
            The logical length. Defaults to UNBOUNDED.
        entries :
            Initial entries, either a mapping from index to value,
            or an iterable of (index, value) pairs such as Pairs.
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        self._length = length
        self._values: dict[int, float] = {}
        # kept sorted, so traversal never needs to sort
        self._keys: list[int] = []
        self._version = 0
        if entries is not None:
            if isinstance(entries, Mapping):
                entries = entries.items()
            for index, value in entries:
                self.set(index, value)

    @property
    def length(self) -> int:
        """The logical length, independent of how many entries are present."""
        return self._length

    @property
    def n_present(self) -> int:
        """The number of explicitly stored entries."""
        return len(self._keys)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Pair]:
        version = self._version
        for index in self._keys:
            yield Pair(index, self._values[index])
            if self._version != version:
                raise ConcurrentModificationError(
                    "SparseVector was modified during traversal"
                )

    def __contains__(self, index: object) -> bool:
        return index in self._values

    def __getitem__(self, index: int) -> float:
        """The logical value at `index`, 0.0 if not present."""
        _util.check_index(index, self._length)
        return self._values.get(index, 0.0)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    def __delitem__(self, index: int) -> None:
        self.remove(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseVector):
            return NotImplemented
        return self._length == other._length and self._values == other._values

    def __repr__(self) -> str:
        length = "UNBOUNDED" if self._length == UNBOUNDED else self._length
        return f"{self.__class__.__name__}({length}, {self.to_dict()!r})"

    def get(self, index: int) -> float | None:
        """Get the stored value at `index`, or None if it is not present.

        Raises IndexOutOfBoundsError if `index` is not in `[0, length)`.
        """
        _util.check_index(index, self._length)
        return self._values.get(index)

    def set(self, index: int, value: float) -> None:
        """Store `value` at `index`, overwriting any previous value.

        Raises IndexOutOfBoundsError if `index` is not in `[0, length)`.
        """
        _util.check_index(index, self._length)
        if index not in self._values:
            bisect.insort(self._keys, index)
            self._version += 1
        self._values[index] = float(value)

    def remove(self, index: int) -> None:
        """Remove the entry at `index`, making it implicitly 0.0 again.

        Raises IndexOutOfBoundsError if `index` is not in `[0, length)`,
        and KeyError if it is in range but not present.
        """
        _util.check_index(index, self._length)
        del self._values[index]
        del self._keys[bisect.bisect_left(self._keys, index)]
        self._version += 1

    def clear(self) -> None:
        """Remove all entries. The logical length is unchanged."""
        self._values.clear()
        self._keys.clear()
        self._version += 1

    def indices(self) -> list[int]:
        """The present indices, ascending."""
        return list(self._keys)

    def to_dict(self) -> dict[int, float]:
        """The present entries as a dict, in ascending index order."""
        return {index: self._values[index] for index in self._keys}

    def copy(self) -> SparseVector:
        """Return an independent copy of this vector."""
        return SparseVector(self._length, self.to_dict())
