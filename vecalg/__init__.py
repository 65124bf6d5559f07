from __future__ import annotations

import importlib.metadata
import warnings

from vecalg import exceptions as exceptions
from vecalg import expr as expr
from vecalg import ops as ops
from vecalg import vector as vector
from vecalg.ops import ROUND_TO_ZERO as ROUND_TO_ZERO
from vecalg.vector import UNBOUNDED as UNBOUNDED
from vecalg.vector import DenseVector as DenseVector
from vecalg.vector import Pair as Pair
from vecalg.vector import SparseVector as SparseVector

try:
    __version__ = importlib.metadata.version(__name__)
except importlib.metadata.PackageNotFoundError as e:
    warnings.warn(f"Could not determine version of {__name__}\n{e!s}", stacklevel=2)
    __version__ = "unknown"
