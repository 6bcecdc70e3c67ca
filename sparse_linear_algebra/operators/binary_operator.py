"""
Binary operators, and their use as accumulators.

Any binary operator may serve as the accumulator of an applier: the freshly
computed value t at a coordinate is combined with the value c already stored
there as op(c, t). Assignment is the exception: it has no engine handle and
stores t, discarding c.
"""

from __future__ import annotations
from typing import Any, Optional

from .base import AlgebraicOperator


class BinaryOperator(AlgebraicOperator):
    kind = "binary"

    @property
    def input_type(self):
        return self.handle.type

    @property
    def output_type(self):
        return self.handle.return_type

    @property
    def accumulator_handle(self) -> Optional[Any]:
        """Engine accumulator; None means overwrite."""
        return self.handle


class Assignment(BinaryOperator):
    """
    Accumulator that overwrites the output entry.

    Needs no engine handle, so it can be built before the engine is started.
    """

    def __post_init__(self):
        object.__setattr__(self, "handle", None)

    @property
    def name(self) -> str:
        return "assignment"


class First(BinaryOperator):
    """(x, y) -> x"""
    engine_name = "first"


class Second(BinaryOperator):
    """(x, y) -> y"""
    engine_name = "second"


class Plus(BinaryOperator):
    engine_name = "plus"


class Minus(BinaryOperator):
    engine_name = "minus"


class Times(BinaryOperator):
    engine_name = "times"


class Min(BinaryOperator):
    engine_name = "min"


class Max(BinaryOperator):
    engine_name = "max"


class AnyValue(BinaryOperator):
    """(x, y) -> x or y, whichever the engine picks."""
    engine_name = "any"


class LogicalOr(BinaryOperator):
    engine_name = "lor"


class LogicalAnd(BinaryOperator):
    engine_name = "land"
