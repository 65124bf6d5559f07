"""Dense (contiguous) and sparse (index-keyed) in-memory vectors."""

from __future__ import annotations

from vecalg.vector._dense import DIVISION_EPSILON as DIVISION_EPSILON
from vecalg.vector._dense import DenseVector as DenseVector
from vecalg.vector._pair import Pair as Pair
from vecalg.vector._sparse import UNBOUNDED as UNBOUNDED
from vecalg.vector._sparse import SparseVector as SparseVector
