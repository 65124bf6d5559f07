from __future__ import annotations

import pytest

from vecalg import DenseVector, SparseVector


def assert_vectors_equal(
    left: DenseVector | SparseVector,
    right: DenseVector | SparseVector,
    *,
    abs: float = 1e-9,
) -> None:
    """Assert two vectors have the same representation, length, and entries."""
    assert left.kind == right.kind
    assert len(left) == len(right)
    if isinstance(left, SparseVector):
        assert left.indices() == right.indices()
        assert list(left.to_dict().values()) == pytest.approx(
            list(right.to_dict().values()), abs=abs
        )
    else:
        assert left.to_list() == pytest.approx(right.to_list(), abs=abs)
