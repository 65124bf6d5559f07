from __future__ import annotations

import datetime
import random
from time import time
from typing import Callable

from vecalg import DenseVector, SparseVector, ops

LENGTH = 1_000_000


def _random_sparse(n_present: int, seed: int) -> SparseVector:
    rng = random.Random(seed)
    indices = rng.sample(range(LENGTH), n_present)
    return SparseVector(LENGTH, {i: rng.uniform(-1, 1) for i in indices})


def run_benchmark(
    name: str,
    fn: Callable[..., float],
    a: DenseVector | SparseVector,
    b: DenseVector | SparseVector,
) -> None:
    start = time()
    fn(a, b)
    end = time()
    print(f"{name:<35} took {end - start:>8.4f} seconds")


def main():
    print(f"run at {datetime.datetime.now(datetime.timezone.utc).isoformat()}")
    for n_present in [1_000, 100_000]:
        s1 = _random_sparse(n_present, 0)
        s2 = _random_sparse(n_present, 1)
        d1 = ops.sparse_to_dense(s1)
        d2 = ops.sparse_to_dense(s2)
        for fn in [ops.scalar_product, ops.square_error]:
            prefix = f"{fn.__name__}[{n_present}]"
            run_benchmark(f"{prefix} sparse x sparse", fn, s1, s2)
            run_benchmark(f"{prefix} sparse x dense", fn, s1, d2)
            run_benchmark(f"{prefix} dense x dense", fn, d1, d2)


if __name__ == "__main__":
    main()
