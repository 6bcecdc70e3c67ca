"""
Semirings: an additive monoid paired with a multiplicative binary operator.

Matrix products compute output[i, j] = add_k multiply(A[i, k], B[k, j]).
Element-wise addition uses the add monoid, element-wise multiplication the
multiply operator.
"""

from __future__ import annotations
from typing import Any

from .base import AlgebraicOperator


class Semiring(AlgebraicOperator):
    kind = "semiring"

    @property
    def add_monoid(self) -> Any:
        return self.handle.monoid

    @property
    def multiply_operator(self) -> Any:
        return self.handle.binaryop


class PlusTimes(Semiring):
    """Conventional arithmetic (+, x)."""
    engine_name = "plus_times"


class MinPlus(Semiring):
    """Shortest-path (min, +)."""
    engine_name = "min_plus"


class MaxPlus(Semiring):
    engine_name = "max_plus"


class MinSecond(Semiring):
    engine_name = "min_second"


class AnyPair(Semiring):
    """Structural product: 1 wherever some k links i and j."""
    engine_name = "any_pair"


class LogicalOrLogicalAnd(Semiring):
    """Boolean (or, and)."""
    engine_name = "lor_land"
