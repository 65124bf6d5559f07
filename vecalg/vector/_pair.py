from __future__ import annotations

from typing import NamedTuple


class Pair(NamedTuple):
    """An (index, value) entry of a vector.

    Pairs are produced fresh during traversal of a
    [SparseVector][vecalg.vector.SparseVector], so they never alias
    the vector's storage.

    Examples
    --------
    >>> from vecalg import Pair
    >>> p = Pair(3, 1.5)
    >>> p.index, p.value
    (3, 1.5)
    >>> index, value = p
    >>> index
    3
    """

    index: int
    value: float
