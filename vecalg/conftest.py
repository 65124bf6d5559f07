from __future__ import annotations

import dataclasses
import os
import random
from typing import Protocol

import ibis
import pytest

from vecalg import DenseVector, SparseVector

# we want to have pytest assert introspection in the helpers
pytest.register_assert_rewrite("vecalg.tests.util")


@pytest.fixture
def backend() -> ibis.BaseBackend:
    return ibis.duckdb.connect()


@dataclasses.dataclass(frozen=True)
class LogicalVector:
    """The same logical vector, available in both representations."""

    values: tuple[float, ...]

    def dense(self) -> DenseVector:
        return DenseVector.from_values(self.values)

    def sparse(self) -> SparseVector:
        return SparseVector(
            len(self.values), {i: v for i, v in enumerate(self.values) if v != 0}
        )

    def as_(self, kind: str) -> DenseVector | SparseVector:
        if kind == "dense":
            return self.dense()
        elif kind == "sparse":
            return self.sparse()
        else:
            assert False, kind


class LogicalVectorFactory(Protocol):
    def __call__(
        self, length: int, *, density: float = 0.5, seed: int = 0
    ) -> LogicalVector: ...


@pytest.fixture
def logical_vector_factory() -> LogicalVectorFactory:
    def factory(length: int, *, density: float = 0.5, seed: int = 0):
        rng = random.Random(seed)
        values = tuple(
            rng.uniform(-10, 10) if rng.random() < density else 0.0
            for _ in range(length)
        )
        return LogicalVector(values)

    return factory


@pytest.fixture(params=["dense", "sparse"])
def kind(request) -> str:
    """Parametrize a test over both representations."""
    return request.param


@pytest.fixture(params=["dense", "sparse"])
def other_kind(request) -> str:
    """A second, independent, representation parameter."""
    return request.param


@pytest.fixture(autouse=True)
def set_env(monkeypatch):
    # disable color for doctests so we don't have to include escape codes in docstrings
    monkeypatch.setitem(os.environ, "NO_COLOR", "1")
    # Explicitly set the column width to be as large as needed
    monkeypatch.setitem(os.environ, "COLUMNS", "88")
    starting_opts = ibis.options
    yield
    ibis.options = starting_opts
