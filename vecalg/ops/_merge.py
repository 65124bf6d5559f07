"""Alignment of ordered (index, value) streams."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from vecalg.exceptions import IndexOutOfBoundsError
from vecalg.vector import Pair


def merge_join(
    left: Iterable[Pair], right: Iterable[Pair]
) -> Iterator[tuple[int, float | None, float | None]]:
    """Align two streams of pairs that are sorted by ascending index.

    This is a two-pointer merge, so it runs in O(n + m).

    Parameters
    ----------
    left :
        The pairs of the first vector, ascending by index.
    right :
        The pairs of the second vector, ascending by index.

    Returns
    -------
    Iterator[tuple[int, float | None, float | None]]
        One `(index, left_value, right_value)` tuple for every index
        present in either side, ascending.
        The value of the side where the index is absent is None.

    Examples
    --------
    >>> from vecalg import Pair
    >>> a = [Pair(1, 2.0), Pair(3, 4.0)]
    >>> b = [Pair(3, 1.0), Pair(4, 5.0)]
    >>> list(merge_join(a, b))
    [(1, 2.0, None), (3, 4.0, 1.0), (4, None, 5.0)]
    """
    left_iter = iter(left)
    right_iter = iter(right)
    lp = next(left_iter, None)
    rp = next(right_iter, None)
    while lp is not None and rp is not None:
        if lp.index < rp.index:
            yield lp.index, lp.value, None
            lp = next(left_iter, None)
        elif lp.index > rp.index:
            yield rp.index, None, rp.value
            rp = next(right_iter, None)
        else:
            yield lp.index, lp.value, rp.value
            lp = next(left_iter, None)
            rp = next(right_iter, None)
    # at most one of these tails is non-empty
    while lp is not None:
        yield lp.index, lp.value, None
        lp = next(left_iter, None)
    while rp is not None:
        yield rp.index, None, rp.value
        rp = next(right_iter, None)


def densify(pairs: Iterable[Pair], size: int) -> Iterator[float]:
    """Expand ascending pairs into one value per index in `[0, size)`.

    Indices in the gaps between pairs, and after the last pair, are 0.0.
    Raises IndexOutOfBoundsError if a pair's index is `>= size`.

    Examples
    --------
    >>> list(densify([Pair(1, 2.0), Pair(3, 4.0)], 5))
    [0.0, 2.0, 0.0, 4.0, 0.0]
    """
    start_index = 0
    for index, value in pairs:
        if index >= size:
            raise IndexOutOfBoundsError(index, size)
        for _ in range(start_index, index):
            yield 0.0
        yield value
        start_index = index + 1
    for _ in range(start_index, size):
        yield 0.0
