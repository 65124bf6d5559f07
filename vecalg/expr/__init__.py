"""Vector algebra on ibis expressions.

Dense vectors are array<numeric> and sparse vectors are map<int64, numeric>.
"""

from __future__ import annotations

from vecalg.expr._expr import abs_error as abs_error
from vecalg.expr._expr import abs_sum as abs_sum
from vecalg.expr._expr import dot as dot
from vecalg.expr._expr import norm as norm
from vecalg.expr._expr import scale as scale
from vecalg.expr._expr import square_error as square_error
from vecalg.expr._expr import to_expr as to_expr
