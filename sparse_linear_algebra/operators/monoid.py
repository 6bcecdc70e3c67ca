"""
Monoids: associative binary operators with an identity value.

Used as the combining operation of element-wise addition and multiplication.
"""

from __future__ import annotations
from typing import Any

from .base import AlgebraicOperator


class Monoid(AlgebraicOperator):
    kind = "monoid"

    @property
    def identity(self) -> Any:
        return self.handle.identity

    @property
    def binary_operator_handle(self) -> Any:
        """The monoid's operation as a plain binary operator."""
        return self.handle.binaryop


class Plus(Monoid):
    engine_name = "plus"


class Times(Monoid):
    engine_name = "times"


class Min(Monoid):
    engine_name = "min"


class Max(Monoid):
    engine_name = "max"


class AnyValue(Monoid):
    engine_name = "any"


class LogicalOr(Monoid):
    engine_name = "lor"


class LogicalAnd(Monoid):
    engine_name = "land"
