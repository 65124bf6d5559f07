from __future__ import annotations

import random

import pytest

from vecalg import DenseVector, SparseVector, ops


def create_sparse(length: int, n_present: int, seed: int) -> SparseVector:
    rng = random.Random(seed)
    indices = rng.sample(range(length), n_present)
    return SparseVector(length, {i: rng.uniform(-1, 1) for i in indices})


def _as_dense(vec: DenseVector | SparseVector) -> DenseVector:
    return ops.sparse_to_dense(vec) if vec.kind == "sparse" else vec


@pytest.mark.parametrize(
    "op",
    [
        pytest.param(ops.scalar_product, id="scalar_product"),
        pytest.param(ops.square_error, id="square_error"),
    ],
)
@pytest.mark.parametrize(
    "kinds",
    [
        pytest.param(("sparse", "sparse"), id="sparse-sparse"),
        pytest.param(("sparse", "dense"), id="sparse-dense"),
        pytest.param(("dense", "dense"), id="dense-dense"),
    ],
)
@pytest.mark.parametrize(
    "n_present",
    [
        pytest.param(100, id="100"),
        pytest.param(10_000, id="10k"),
    ],
)
def test_benchmark_ops(op, kinds, n_present, benchmark):
    length = 100_000
    vecs: list[DenseVector | SparseVector] = []
    for seed, kind in enumerate(kinds):
        vec = create_sparse(length, n_present, seed)
        if kind == "dense":
            vec = ops.sparse_to_dense(vec)
        vecs.append(vec)
    expected = op(*(_as_dense(v) for v in vecs))
    result = benchmark(op, *vecs)
    assert result == pytest.approx(expected)
