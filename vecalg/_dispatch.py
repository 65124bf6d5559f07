from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Literal, TypeVar

from vecalg import _util
from vecalg.exceptions import UnsupportedRepresentationError

logger = logging.getLogger(__name__)

Kind = Literal["dense", "sparse"]
KINDS: tuple[Kind, ...] = ("dense", "sparse")

Ret = TypeVar("Ret")
F = TypeVar("F", bound=Callable[..., Any])


def kind_of(vec: Any) -> Kind:
    """The representation tag of a vector, eg "dense" or "sparse"."""
    kind = getattr(vec, "kind", None)
    if kind not in KINDS:
        raise UnsupportedRepresentationError(
            f"Expected a DenseVector or SparseVector, got {type(vec).__name__}"
        )
    return kind


class PairDispatch(Generic[Ret]):
    """An operation table keyed by the representations of two vectors.

    Similar to functools.singledispatch, but dispatches on both operands,
    using their explicit `kind` tag instead of their class.

    Examples
    --------
    >>> from vecalg import DenseVector, SparseVector
    >>> describe = PairDispatch[str]("describe")
    >>> @describe.register("dense", "dense")
    ... def _dd(a, b):
    ...     return "both dense"
    >>> @describe.register("dense", "sparse")
    ... def _ds(a, b):
    ...     return "dense, then sparse"
    >>> describe(DenseVector(2), SparseVector(2))
    'dense, then sparse'
    >>> describe(SparseVector(2), SparseVector(2))
    Traceback (most recent call last):
    ...
    NotImplementedError: describe is not implemented for sparse x sparse
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.implementations: dict[tuple[Kind, Kind], Callable[..., Ret]] = {}
        """Mutable, so users can add or replace implementations."""

    def register(self, left: Kind, right: Kind) -> Callable[[F], F]:
        """Register the implementation for a (left, right) representation pair."""

        def decorator(implementation: F) -> F:
            self.implementations[(left, right)] = implementation
            return implementation

        return decorator

    def __call__(self, a: Any, b: Any, *args: Any, **kwargs: Any) -> Ret:
        """Route to the implementation for the representations of `a` and `b`."""
        _util.check_not_none(a=a, b=b)
        key = (kind_of(a), kind_of(b))
        try:
            implementation = self.implementations[key]
        except KeyError:
            raise NotImplementedError(
                f"{self.name} is not implemented for {key[0]} x {key[1]}"
            ) from None
        logger.debug("%s: %s x %s -> %s", self.name, *key, implementation.__name__)
        return implementation(a, b, *args, **kwargs)
