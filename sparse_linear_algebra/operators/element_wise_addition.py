"""
Element-wise addition: output coordinates are the UNION of the operands'.

A coordinate stored in one operand only forwards that operand's value
unchanged; a coordinate stored in both is combined by the operator:
    BinaryOperator -> the operator itself
    Monoid         -> the monoid's operation
    Semiring       -> the semiring's add monoid

Usage:
    addition = ElementWiseVectorAddition(binary_operator.Times("INT32"))
    addition.apply(u, v, w)                      # w = u .+ v
    addition.apply_with_mask(Mask(m), u, v, w)   # only where m is true
"""

from __future__ import annotations
from typing import Any
from dataclasses import dataclass, field

from ..collections import SparseMatrix, SparseVector
from .applier import ElementWiseApplier
from .base import AlgebraicOperator
from .binary_operator import Assignment, BinaryOperator
from .monoid import Monoid
from .options import OperatorOptions
from .semiring import Semiring


@dataclass(frozen=True)
class _ElementWiseAddition(ElementWiseApplier):
    operator: AlgebraicOperator
    options: OperatorOptions = field(default_factory=OperatorOptions)
    accumulator: BinaryOperator = field(default_factory=Assignment)
    _operator_handle: Any = field(init=False, repr=False, compare=False)
    _accumulator_handle: Any = field(init=False, repr=False, compare=False)

    engine_method = "ewise_add"

    def _compile_operator(self) -> Any:
        if isinstance(self.operator, Semiring):
            return self.operator.add_monoid
        if isinstance(self.operator, (Monoid, BinaryOperator)) and self.operator.handle is not None:
            return self.operator.handle
        raise TypeError(
            f"{type(self).__name__} needs a BinaryOperator, Monoid or Semiring, "
            f"got {type(self.operator).__name__}"
        )


class ElementWiseVectorAddition(_ElementWiseAddition):
    """u .+ v for sparse vectors."""
    collection_type = SparseVector
    supports_transpose_first = False
    supports_transpose_second = False


class ElementWiseMatrixAddition(_ElementWiseAddition):
    """A .+ B for sparse matrices; either operand may be read transposed."""
    collection_type = SparseMatrix
