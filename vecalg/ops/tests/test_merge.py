from __future__ import annotations

import pytest

from vecalg import Pair
from vecalg.exceptions import IndexOutOfBoundsError
from vecalg.ops import densify, merge_join


def _pairs(d: dict[int, float]) -> list[Pair]:
    return [Pair(i, v) for i, v in sorted(d.items())]


@pytest.mark.parametrize(
    "left,right,expected",
    [
        pytest.param({}, {}, [], id="both_empty"),
        pytest.param({}, {2: 1.0}, [(2, None, 1.0)], id="left_empty"),
        pytest.param({2: 1.0}, {}, [(2, 1.0, None)], id="right_empty"),
        pytest.param(
            {1: 2.0, 3: 4.0},
            {3: 1.0, 4: 5.0},
            [(1, 2.0, None), (3, 4.0, 1.0), (4, None, 5.0)],
            id="interleaved",
        ),
        pytest.param(
            {0: 1.0, 1: 1.0},
            {5: 2.0, 6: 2.0},
            [(0, 1.0, None), (1, 1.0, None), (5, None, 2.0), (6, None, 2.0)],
            id="disjoint_left_tail",
        ),
        pytest.param(
            {5: 1.0},
            {0: 2.0, 1: 2.0, 9: 3.0},
            [(0, None, 2.0), (1, None, 2.0), (5, 1.0, None), (9, None, 3.0)],
            id="right_tail",
        ),
        pytest.param(
            {0: 1.0, 2: 0.0},
            {0: 3.0, 2: 4.0},
            [(0, 1.0, 3.0), (2, 0.0, 4.0)],
            id="same_keys_explicit_zero",
        ),
    ],
)
def test_merge_join(left, right, expected):
    assert list(merge_join(_pairs(left), _pairs(right))) == expected


def test_merge_join_consumes_iterators_lazily():
    def gen():
        yield Pair(0, 1.0)
        raise AssertionError("should not be reached")

    it = merge_join(gen(), [Pair(0, 2.0), Pair(1, 3.0)])
    assert next(it) == (0, 1.0, 2.0)


@pytest.mark.parametrize(
    "pairs,size,expected",
    [
        pytest.param({}, 3, [0.0, 0.0, 0.0], id="empty"),
        pytest.param({}, 0, [], id="size_zero"),
        pytest.param({0: 1.0, 2: 3.0}, 3, [1.0, 0.0, 3.0], id="edges"),
        pytest.param({1: 2.0}, 4, [0.0, 2.0, 0.0, 0.0], id="gaps_and_tail"),
    ],
)
def test_densify(pairs, size, expected):
    assert list(densify(_pairs(pairs), size)) == expected


def test_densify_index_past_size():
    with pytest.raises(IndexOutOfBoundsError):
        list(densify(_pairs({1: 1.0, 3: 1.0}), 3))
