"""
Semiring products.

    MatrixMultiplication        C = A (+.x) B        (mxm)
    MatrixVectorMultiplication  w = A (+.x) u        (mxv)
    VectorMatrixMultiplication  w = u (+.x) A        (vxm)

output[i, j] = add over k of multiply(A[i, k], B[k, j]), taken only over k
where both operands store an entry; coordinates with no such k stay absent.
Transpose options apply to matrix operands only.

Example (PlusTimes):
    [[1, 3],     [[5, 7],     [[23, 31],
     [2, 4]]  x   [6, 8]]  =   [34, 46]]
"""

from __future__ import annotations
from typing import Any
from dataclasses import dataclass, field

from ..collections import SparseMatrix, SparseVector
from .applier import OperatorApplier, SELECT_ALL
from .binary_operator import Assignment, BinaryOperator
from .mask import MaskLike
from .options import OperatorOptions
from .semiring import Semiring


@dataclass(frozen=True)
class _SemiringProduct(OperatorApplier):
    operator: Semiring
    options: OperatorOptions = field(default_factory=OperatorOptions)
    accumulator: BinaryOperator = field(default_factory=Assignment)
    _operator_handle: Any = field(init=False, repr=False, compare=False)
    _accumulator_handle: Any = field(init=False, repr=False, compare=False)

    def _compile_operator(self) -> Any:
        if not isinstance(self.operator, Semiring):
            raise TypeError(
                f"{type(self).__name__} needs a Semiring, got {type(self.operator).__name__}"
            )
        return self.operator.handle


class MatrixMultiplication(_SemiringProduct):
    """Matrix x matrix product."""

    def apply(self, multiplier: SparseMatrix, multiplicant: SparseMatrix,
              product: SparseMatrix) -> None:
        self.apply_with_mask(SELECT_ALL, multiplier, multiplicant, product)

    def apply_with_mask(self, mask: MaskLike, multiplier: SparseMatrix,
                        multiplicant: SparseMatrix, product: SparseMatrix) -> None:
        self._expect(multiplier, SparseMatrix, "multiplier")
        self._expect(multiplicant, SparseMatrix, "multiplicant")
        self._expect(product, SparseMatrix, "product")
        self._check_domains(("multiplier", multiplier), ("multiplicant", multiplicant))

        descriptor = self.options.descriptor
        left = descriptor.first(multiplier.graphblas_matrix)
        right = descriptor.second(multiplicant.graphblas_matrix)
        self._write(mask, product, lambda: left.mxm(right, self._operator_handle))


class MatrixVectorMultiplication(_SemiringProduct):
    """Matrix x vector product; only the matrix may be transposed."""
    supports_transpose_second = False

    def apply(self, multiplier: SparseMatrix, multiplicant: SparseVector,
              product: SparseVector) -> None:
        self.apply_with_mask(SELECT_ALL, multiplier, multiplicant, product)

    def apply_with_mask(self, mask: MaskLike, multiplier: SparseMatrix,
                        multiplicant: SparseVector, product: SparseVector) -> None:
        self._expect(multiplier, SparseMatrix, "multiplier")
        self._expect(multiplicant, SparseVector, "multiplicant")
        self._expect(product, SparseVector, "product")
        self._check_domains(("multiplier", multiplier), ("multiplicant", multiplicant))

        left = self.options.descriptor.first(multiplier.graphblas_matrix)
        right = multiplicant.graphblas_vector
        self._write(mask, product, lambda: left.mxv(right, self._operator_handle))


class VectorMatrixMultiplication(_SemiringProduct):
    """Vector x matrix product; only the matrix may be transposed."""
    supports_transpose_first = False

    def apply(self, multiplier: SparseVector, multiplicant: SparseMatrix,
              product: SparseVector) -> None:
        self.apply_with_mask(SELECT_ALL, multiplier, multiplicant, product)

    def apply_with_mask(self, mask: MaskLike, multiplier: SparseVector,
                        multiplicant: SparseMatrix, product: SparseVector) -> None:
        self._expect(multiplier, SparseVector, "multiplier")
        self._expect(multiplicant, SparseMatrix, "multiplicant")
        self._expect(product, SparseVector, "product")
        self._check_domains(("multiplier", multiplier), ("multiplicant", multiplicant))

        left = multiplier.graphblas_vector
        right = self.options.descriptor.second(multiplicant.graphblas_matrix)
        self._write(mask, product, lambda: left.vxm(right, self._operator_handle))
