"""
Element-wise multiplication: output coordinates are the INTERSECTION of the
operands'. Coordinates stored in one operand only are dropped.

Combination by:
    BinaryOperator -> the operator itself
    Monoid         -> the monoid's operation
    Semiring       -> the semiring's multiply operator
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
class _ElementWiseMultiplication(ElementWiseApplier):
    operator: AlgebraicOperator
    options: OperatorOptions = field(default_factory=OperatorOptions)
    accumulator: BinaryOperator = field(default_factory=Assignment)
    _operator_handle: Any = field(init=False, repr=False, compare=False)
    _accumulator_handle: Any = field(init=False, repr=False, compare=False)

    engine_method = "ewise_mult"

    def _compile_operator(self) -> Any:
        if isinstance(self.operator, Semiring):
            return self.operator.multiply_operator
        if isinstance(self.operator, Monoid):
            return self.operator.binary_operator_handle
        if isinstance(self.operator, BinaryOperator) and self.operator.handle is not None:
            return self.operator.handle
        raise TypeError(
            f"{type(self).__name__} needs a BinaryOperator, Monoid or Semiring, "
            f"got {type(self.operator).__name__}"
        )


class ElementWiseVectorMultiplication(_ElementWiseMultiplication):
    """u .* v for sparse vectors."""
    collection_type = SparseVector
    supports_transpose_first = False
    supports_transpose_second = False


class ElementWiseMatrixMultiplication(_ElementWiseMultiplication):
    """A .* B for sparse matrices; either operand may be read transposed."""
    collection_type = SparseMatrix
