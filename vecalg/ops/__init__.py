"""Arithmetic across dense and sparse vectors, in any combination."""

from __future__ import annotations

from vecalg.ops._merge import densify as densify
from vecalg.ops._merge import merge_join as merge_join
from vecalg.ops._ops import ROUND_TO_ZERO as ROUND_TO_ZERO
from vecalg.ops._ops import Vector as Vector
from vecalg.ops._ops import abs_error as abs_error
from vecalg.ops._ops import abs_sum as abs_sum
from vecalg.ops._ops import copy as copy
from vecalg.ops._ops import dense_to_sparse as dense_to_sparse
from vecalg.ops._ops import multiply_number as multiply_number
from vecalg.ops._ops import scalar_product as scalar_product
from vecalg.ops._ops import sparse_to_dense as sparse_to_dense
from vecalg.ops._ops import square_error as square_error
