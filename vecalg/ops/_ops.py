"""Operations that combine vectors of any representation.

Unlike the methods of DenseVector and SparseVector, these never modify
their inputs. They either return a result or write into an explicit
output vector.
"""

from __future__ import annotations

import logging
from typing import Callable, Union

from vecalg import _util
from vecalg._dispatch import PairDispatch, kind_of
from vecalg.exceptions import (
    LengthMismatchError,
    UnboundedLengthError,
    UnsupportedRepresentationError,
)
from vecalg.ops._merge import densify, merge_join
from vecalg.vector import UNBOUNDED, DenseVector, SparseVector

logger = logging.getLogger(__name__)

Vector = Union[DenseVector, SparseVector]

ROUND_TO_ZERO = 1e-7
"""Values with a magnitude at or below this are treated as zero."""


def _check_lengths(a: Vector, b: Vector) -> None:
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))


_scalar_product = PairDispatch[float]("scalar_product")


@_scalar_product.register("dense", "dense")
def _dot_dense_dense(a: DenseVector, b: DenseVector) -> float:
    return a.scalar_product(b)


@_scalar_product.register("sparse", "dense")
def _dot_sparse_dense(a: SparseVector, b: DenseVector) -> float:
    _check_lengths(a, b)
    # absent sparse entries contribute nothing, so only visit present ones
    return sum((value * b.get(index) for index, value in a), 0.0)


@_scalar_product.register("dense", "sparse")
def _dot_dense_sparse(a: DenseVector, b: SparseVector) -> float:
    return _dot_sparse_dense(b, a)


@_scalar_product.register("sparse", "sparse")
def _dot_sparse_sparse(a: SparseVector, b: SparseVector) -> float:
    _check_lengths(a, b)
    return sum(
        (x * y for _, x, y in merge_join(a, b) if x is not None and y is not None),
        0.0,
    )


def _error_dispatch(name: str, loss: Callable[[float], float]) -> PairDispatch:
    """Build the table for a sum of `loss(a[i] - b[i])` over every index."""
    table = PairDispatch[float](name)

    @table.register("dense", "dense")
    def _dense_dense(a: DenseVector, b: DenseVector) -> float:
        _check_lengths(a, b)
        return sum((loss(x - y) for x, y in zip(a, b)), 0.0)

    @table.register("sparse", "dense")
    def _sparse_dense(a: SparseVector, b: DenseVector) -> float:
        _check_lengths(a, b)
        # the dense values in the gaps between sparse entries still count
        return sum((loss(x - y) for x, y in zip(densify(a, b.size), b)), 0.0)

    @table.register("dense", "sparse")
    def _dense_sparse(a: DenseVector, b: SparseVector) -> float:
        _check_lengths(a, b)
        return sum((loss(x - y) for x, y in zip(a, densify(b, a.size))), 0.0)

    @table.register("sparse", "sparse")
    def _sparse_sparse(a: SparseVector, b: SparseVector) -> float:
        _check_lengths(a, b)
        return sum(
            (loss((x or 0.0) - (y or 0.0)) for _, x, y in merge_join(a, b)), 0.0
        )

    return table


_square_error = _error_dispatch("square_error", lambda d: d * d)
_abs_error = _error_dispatch("abs_error", abs)


def scalar_product(a: Vector, b: Vector) -> float:
    """The dot product of two vectors of any representation.

    Parameters
    ----------
    a :
        The first vector, dense or sparse.
    b :
        The second vector, dense or sparse. Must have the same length as `a`.

    Returns
    -------
    float
        `sum(a[i] * b[i])` over every index.

    Examples
    --------
    >>> from vecalg import DenseVector, SparseVector, ops
    >>> a = SparseVector(5, {1: 2.0, 3: 4.0})
    >>> b = SparseVector(5, {3: 1.0, 4: 5.0})
    >>> ops.scalar_product(a, b)
    4.0
    >>> ops.scalar_product(a, DenseVector.from_values([1, 1, 1, 1, 1]))
    6.0
    """
    return _scalar_product(a, b)


def square_error(a: Vector, b: Vector) -> float:
    """The sum of squared differences, `sum((a[i] - b[i]) ** 2)`.

    Indices absent from a sparse operand count as 0.0.

    Examples
    --------
    >>> from vecalg import SparseVector, ops
    >>> a = SparseVector(5, {1: 2.0, 3: 4.0})
    >>> b = SparseVector(5, {3: 1.0, 4: 5.0})
    >>> ops.square_error(a, b)
    38.0
    """
    return _square_error(a, b)


def abs_error(a: Vector, b: Vector) -> float:
    """The sum of absolute differences, `sum(abs(a[i] - b[i]))`.

    Indices absent from a sparse operand count as 0.0.

    Examples
    --------
    >>> from vecalg import SparseVector, ops
    >>> a = SparseVector(5, {1: 2.0, 3: 4.0})
    >>> b = SparseVector(5, {3: 1.0, 4: 5.0})
    >>> ops.abs_error(a, b)
    10.0
    """
    return _abs_error(a, b)


def abs_sum(vec: Vector) -> float:
    """The sum of `abs(vec[i])` over every index.

    Only the present entries of a sparse vector are visited.

    Examples
    --------
    >>> from vecalg import DenseVector, SparseVector, ops
    >>> ops.abs_sum(DenseVector.from_values([1, -2, 0]))
    3.0
    >>> ops.abs_sum(SparseVector(3, {1: -2.0, 0: 1.0}))
    3.0
    """
    _util.check_not_none(vec=vec)
    if kind_of(vec) == "sparse":
        values = (value for _, value in vec)
    else:
        values = iter(vec)
    return sum((abs(v) for v in values), 0.0)


_multiply_number = PairDispatch[None]("multiply_number")


@_multiply_number.register("dense", "dense")
@_multiply_number.register("sparse", "dense")
def _multiply_into_dense(
    in_vec: Vector, out_vec: DenseVector, number: float, threshold: float
) -> None:
    _check_lengths(in_vec, out_vec)
    if in_vec.kind == "sparse":
        values = list(densify(in_vec, out_vec.size))
    else:
        values = list(in_vec)
    for index, value in enumerate(values):
        out_vec.set(index, value * number)


@_multiply_number.register("dense", "sparse")
@_multiply_number.register("sparse", "sparse")
def _multiply_into_sparse(
    in_vec: Vector, out_vec: SparseVector, number: float, threshold: float
) -> None:
    _check_lengths(in_vec, out_vec)
    if in_vec.kind == "sparse":
        scaled = [(index, value * number) for index, value in in_vec]
    else:
        scaled = [(index, value * number) for index, value in enumerate(in_vec)]
    out_vec.clear()
    for index, value in scaled:
        if abs(value) > threshold:
            out_vec.set(index, value)
    logger.debug(
        "multiply_number: pruned %d of %d entries",
        len(scaled) - out_vec.n_present,
        len(scaled),
    )


def multiply_number(
    in_vec: Vector,
    number: float,
    out_vec: Vector,
    *,
    threshold: float = ROUND_TO_ZERO,
) -> None:
    """Write `in_vec * number` into `out_vec`.

    `in_vec` is left untouched. Every input is read before `out_vec`
    is written, so passing the same vector for both scales it in place.

    Parameters
    ----------
    in_vec :
        The vector to scale, dense or sparse.
    number :
        The scalar to multiply by.
    out_vec :
        Where to write the result. Must have the same length as `in_vec`.
        If it is dense, every position is overwritten.
        If it is sparse, it is cleared first, and then only the entries
        whose magnitude is greater than `threshold` are stored.
    threshold :
        Only used for a sparse `out_vec`.

    Examples
    --------
    >>> from vecalg import DenseVector, SparseVector, ops
    >>> out = SparseVector(2)
    >>> ops.multiply_number(DenseVector.from_values([0.0000001, 5.0]), 1.0, out)
    >>> out
    SparseVector(2, {1: 5.0})
    """
    _util.check_not_none(in_vec=in_vec, out_vec=out_vec)
    _multiply_number(in_vec, out_vec, number, threshold)


def dense_to_sparse(
    vec: DenseVector, *, threshold: float = ROUND_TO_ZERO
) -> SparseVector:
    """Convert a DenseVector to a SparseVector of the same length.

    Only entries with `abs(value) > threshold` are kept,
    so negative entries survive the conversion.

    Examples
    --------
    >>> from vecalg import DenseVector, ops
    >>> ops.dense_to_sparse(DenseVector.from_values([0.0, -1.5, 1e-9, 2.0]))
    SparseVector(4, {1: -1.5, 3: 2.0})
    """
    _util.check_not_none(vec=vec)
    if kind_of(vec) != "dense":
        raise UnsupportedRepresentationError(
            f"Expected a DenseVector, got {type(vec).__name__}"
        )
    result = SparseVector(vec.size)
    for index, value in enumerate(vec):
        if abs(value) > threshold:
            result.set(index, value)
    logger.debug(
        "dense_to_sparse: kept %d of %d entries", result.n_present, vec.size
    )
    return result


def sparse_to_dense(vec: SparseVector, size: int | None = None) -> DenseVector:
    """Convert a SparseVector to a fully materialized DenseVector.

    Parameters
    ----------
    vec :
        The vector to convert.
    size :
        The size of the result. Defaults to the logical length of `vec`,
        so it is required when `vec` is UNBOUNDED.
        Raises IndexOutOfBoundsError if `vec` has an entry at or past `size`.

    Examples
    --------
    >>> from vecalg import SparseVector, ops
    >>> ops.sparse_to_dense(SparseVector(4, {1: 2.0}))
    DenseVector([0.0, 2.0, 0.0, 0.0])
    """
    _util.check_not_none(vec=vec)
    if kind_of(vec) != "sparse":
        raise UnsupportedRepresentationError(
            f"Expected a SparseVector, got {type(vec).__name__}"
        )
    if size is None:
        if vec.length == UNBOUNDED:
            raise UnboundedLengthError(
                "An explicit size is needed to densify an UNBOUNDED SparseVector"
            )
        size = vec.length
    return DenseVector.from_values(densify(vec, size))


def copy(vec: Vector) -> Vector:
    """Return an independent deep copy of a vector of either representation."""
    _util.check_not_none(vec=vec)
    kind_of(vec)
    return vec.copy()
