"""
Unary operators: value -> value, applied to every stored element.
"""

from __future__ import annotations

from .base import AlgebraicOperator


class UnaryOperator(AlgebraicOperator):
    kind = "unary"

    @property
    def input_type(self):
        return self.handle.type

    @property
    def output_type(self):
        return self.handle.return_type


class Identity(UnaryOperator):
    engine_name = "identity"


class AdditiveInverse(UnaryOperator):
    """Negation: x -> -x."""
    engine_name = "ainv"


class MultiplicativeInverse(UnaryOperator):
    """x -> 1/x."""
    engine_name = "minv"


class AbsoluteValue(UnaryOperator):
    engine_name = "abs"


class LogicalNegation(UnaryOperator):
    engine_name = "lnot"


class One(UnaryOperator):
    """Maps every stored value to 1 (True for BOOL)."""
    engine_name = "one"
