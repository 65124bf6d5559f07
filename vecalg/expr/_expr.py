"""Vector operations on ibis expressions."""

from __future__ import annotations

from typing import Literal, TypeVar

import ibis
import ibis.expr.types as ir

from vecalg.exceptions import UnsupportedRepresentationError
from vecalg.vector import DenseVector, SparseVector


@ibis.udf.scalar.builtin(name="array_sum")
def _array_sum(a) -> float: ...


# for duckdb
@ibis.udf.scalar.builtin(name="list_dot_product")
def _array_dot_product(a, b) -> float: ...


T = TypeVar("T", ir.MapValue, ir.ArrayValue)


def to_expr(vec: DenseVector | SparseVector) -> ir.ArrayValue | ir.MapValue:
    """Lift an in-memory vector into an ibis literal.

    A DenseVector becomes an `array<float64>`,
    a SparseVector becomes a `map<int64, float64>` of its present entries.
    The logical length of a SparseVector is not carried over.

    Examples
    --------
    >>> from vecalg import DenseVector, SparseVector
    >>> from vecalg.expr import to_expr
    >>> to_expr(DenseVector.from_values([1, 2])).execute() == [1.0, 2.0]
    True
    >>> to_expr(SparseVector(5, {3: 4.0})).execute() == {3: 4.0}
    True
    """
    if isinstance(vec, DenseVector):
        return ibis.literal(vec.to_list(), type="array<float64>")
    if isinstance(vec, SparseVector):
        return ibis.literal(vec.to_dict(), type="map<int64, float64>")
    raise UnsupportedRepresentationError(
        f"Expected a DenseVector or SparseVector, got {type(vec).__name__}"
    )


def dot(a: T, b: T) -> ir.FloatingValue:
    """The dot product of two vectors of the same representation.

    For maps, only keys present in both vectors contribute.
    A NULL input gives NULL.

    Examples
    --------
    >>> import ibis
    >>> from vecalg.expr import dot
    >>> dot(ibis.array([1, 2]), ibis.array([4, 5])).execute()  # 1*4 + 2*5
    14.0
    >>> m1 = ibis.map({1: 2, 3: 4})
    >>> m2 = ibis.map({3: 1, 4: 5})
    >>> dot(m1, m2).execute()  # only key 3 is shared
    4.0
    """
    if isinstance(a, ir.ArrayValue) and isinstance(b, ir.ArrayValue):
        return _array_dot_product(a, b)
    elif isinstance(a, ir.MapValue) and isinstance(b, ir.MapValue):
        shared = a.keys().filter(lambda k: b.contains(k))
        result = _array_dot_product(
            shared.map(lambda k: a[k]), shared.map(lambda k: b[k])
        )
        return _null_if_either_null(a, b, result)
    else:
        raise UnsupportedRepresentationError(
            f"Unsupported types {type(a)} and {type(b)}"
        )


def square_error(a: T, b: T) -> ir.FloatingValue:
    """The sum of squared differences between two vectors.

    For sparse vectors, a key missing from one side counts as 0.
    Dense vectors of different lengths give NULL.
    An empty vector gives NULL, as does a NULL input.

    Examples
    --------
    >>> import ibis
    >>> from vecalg.expr import square_error
    >>> square_error(ibis.array([1, 2]), ibis.array([4, 6])).execute()
    25.0
    >>> m1 = ibis.map({1: 2.0, 3: 4.0})
    >>> m2 = ibis.map({3: 1.0, 4: 5.0})
    >>> square_error(m1, m2).execute()  # 2**2 + 3**2 + 5**2
    38.0
    """
    return _sum_of_diffs(a, b, lambda d: d**2)


def abs_error(a: T, b: T) -> ir.FloatingValue:
    """The sum of absolute differences between two vectors.

    For sparse vectors, a key missing from one side counts as 0.
    Dense vectors of different lengths give NULL.
    An empty vector gives NULL, as does a NULL input.

    Examples
    --------
    >>> import ibis
    >>> from vecalg.expr import abs_error
    >>> m1 = ibis.map({1: 2.0, 3: 4.0})
    >>> m2 = ibis.map({3: 1.0, 4: 5.0})
    >>> abs_error(m1, m2).execute()
    10.0
    """
    return _sum_of_diffs(a, b, lambda d: d.abs())


def abs_sum(vec: T) -> ir.FloatingValue:
    """The sum of the absolute values of a vector's elements.

    An empty vector gives NULL, as does a NULL input.

    Examples
    --------
    >>> import ibis
    >>> from vecalg.expr import abs_sum
    >>> abs_sum(ibis.map({0: -3.0, 7: 4.0})).execute()
    7.0
    """
    return _array_sum(_values(vec).map(lambda x: x.abs()))


def scale(vec: T, number: float | ir.NumericValue) -> T:
    """Multiply every element of a vector by a scalar.

    The result has the same type as the input. Sparse keys are kept as is.

    Examples
    --------
    >>> import ibis
    >>> from vecalg.expr import scale
    >>> scale(ibis.array([1, 2]), 2).execute()
    [2, 4]
    """
    if isinstance(vec, ir.ArrayValue):
        return vec.map(lambda x: x * number)
    elif isinstance(vec, ir.MapValue):
        return ibis.map(vec.keys(), vec.values().map(lambda x: x * number))
    else:
        raise UnsupportedRepresentationError(f"Unsupported type {type(vec)}")


def norm(vec: T, *, metric: Literal["l1", "l2"] = "l2") -> ir.FloatingValue:
    """The length of a vector.

    Parameters
    ----------
    vec :
        A dense array or a sparse map.
    metric : {"l1", "l2"}, default "l2"
        "l1" is the sum of absolute values, the same as `abs_sum`.
        "l2" is the Euclidean length.

    Examples
    --------
    >>> import ibis
    >>> from vecalg.expr import norm
    >>> norm(ibis.array([-3, 4])).execute()
    5.0
    """
    if metric == "l1":
        return abs_sum(vec)
    if metric == "l2":
        return _array_sum(_values(vec).map(lambda x: x * x)).sqrt()
    raise ValueError(f"Unsupported norm {metric}")


def _sum_of_diffs(a: T, b: T, loss) -> ir.FloatingValue:
    if isinstance(a, ir.ArrayValue) and isinstance(b, ir.ArrayValue):
        # zip pads the shorter array with NULLs, which array_sum would skip
        diffs = a.zip(b).map(lambda struct: loss(struct.f1 - struct.f2))
        return (a.length() == b.length()).ifelse(_array_sum(diffs), ibis.null())
    elif isinstance(a, ir.MapValue) and isinstance(b, ir.MapValue):
        keys = a.keys().union(b.keys())
        diffs = keys.map(lambda k: loss(a.get(k, 0) - b.get(k, 0)))
        # the union of keys treats a NULL map like an empty one
        return _null_if_either_null(a, b, _array_sum(diffs))
    else:
        raise UnsupportedRepresentationError(
            f"Unsupported types {type(a)} and {type(b)}"
        )


def _null_if_either_null(
    a: ir.MapValue, b: ir.MapValue, result: ir.FloatingValue
) -> ir.FloatingValue:
    return (a.isnull() | b.isnull()).ifelse(ibis.null(), result)


def _values(vec: T) -> ir.ArrayValue:
    if isinstance(vec, ir.ArrayValue):
        return vec
    elif isinstance(vec, ir.MapValue):
        return vec.values()
    else:
        raise UnsupportedRepresentationError(f"Unsupported type {type(vec)}")
