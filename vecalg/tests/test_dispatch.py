from __future__ import annotations

import logging

import pytest

from vecalg import DenseVector, SparseVector
from vecalg._dispatch import PairDispatch, kind_of
from vecalg.exceptions import NullInputError, UnsupportedRepresentationError


@pytest.fixture
def table() -> PairDispatch[str]:
    t = PairDispatch[str]("describe")
    for left in ["dense", "sparse"]:
        for right in ["dense", "sparse"]:

            def impl(a, b, *args, _key=(left, right), **kwargs):
                return _key, args, kwargs

            t.register(left, right)(impl)
    return t


@pytest.mark.parametrize(
    "a,b,expected",
    [
        pytest.param(DenseVector(1), DenseVector(1), ("dense", "dense"), id="dd"),
        pytest.param(DenseVector(1), SparseVector(1), ("dense", "sparse"), id="ds"),
        pytest.param(SparseVector(1), DenseVector(1), ("sparse", "dense"), id="sd"),
        pytest.param(SparseVector(1), SparseVector(1), ("sparse", "sparse"), id="ss"),
    ],
)
def test_routes_by_kind(table, a, b, expected):
    assert table(a, b, 1, x=2) == (expected, (1,), {"x": 2})


def test_kind_tag_not_class():
    class TaggedDense:
        kind = "dense"

    assert kind_of(TaggedDense()) == "dense"


@pytest.mark.parametrize("bad", [[1.0], 3.0, "dense", object()])
def test_unsupported(table, bad):
    with pytest.raises(UnsupportedRepresentationError):
        table(bad, DenseVector(1))
    with pytest.raises(UnsupportedRepresentationError):
        kind_of(bad)


def test_null(table):
    with pytest.raises(NullInputError, match="a must not be None"):
        table(None, DenseVector(1))
    with pytest.raises(NullInputError, match="b must not be None"):
        table(DenseVector(1), None)


def test_missing_implementation():
    t = PairDispatch[int]("partial")
    t.register("dense", "dense")(lambda a, b: 1)
    assert t(DenseVector(1), DenseVector(1)) == 1
    with pytest.raises(NotImplementedError, match="sparse x dense"):
        t(SparseVector(1), DenseVector(1))


def test_logs_dispatch(table, caplog):
    with caplog.at_level(logging.DEBUG, logger="vecalg._dispatch"):
        table(SparseVector(1), DenseVector(1))
    assert "describe: sparse x dense -> impl" in caplog.text
