"""
Unary map: output coordinates are the argument's stored coordinates, each
value replaced by unary_operator(value), then written through mask and
accumulator.

Works on vectors and matrices alike; argument and output must be the same
kind of collection. transpose_first reads a matrix argument transposed and is
ignored for vectors.
"""

from __future__ import annotations
from typing import Any, Union
from dataclasses import dataclass, field

from ..collections import SparseCollection, SparseMatrix, SparseVector
from .applier import OperatorApplier, SELECT_ALL
from .binary_operator import Assignment, BinaryOperator
from .mask import MaskLike
from .options import OperatorOptions
from .unary_operator import UnaryOperator

Collection = Union[SparseVector, SparseMatrix]


@dataclass(frozen=True)
class UnaryOperatorApplier(OperatorApplier):
    """
    Unary map over a vector or a matrix.

    Whether the argument is a vector is only known per call, so
    transpose_first cannot be rejected at construction; it applies to matrix
    arguments and is ignored for vector arguments.
    """
    operator: UnaryOperator
    options: OperatorOptions = field(default_factory=OperatorOptions)
    accumulator: BinaryOperator = field(default_factory=Assignment)
    _operator_handle: Any = field(init=False, repr=False, compare=False)
    _accumulator_handle: Any = field(init=False, repr=False, compare=False)

    supports_transpose_second = False

    def _compile_operator(self) -> Any:
        if not isinstance(self.operator, UnaryOperator):
            raise TypeError(
                f"UnaryOperatorApplier needs a UnaryOperator, got {type(self.operator).__name__}"
            )
        return self.operator.handle

    def apply(self, argument: Collection, product: Collection) -> None:
        self.apply_with_mask(SELECT_ALL, argument, product)

    def apply_with_mask(self, mask: MaskLike, argument: Collection, product: Collection) -> None:
        self._expect(argument, SparseCollection, "argument")
        if isinstance(argument, SparseMatrix):
            self._expect(product, SparseMatrix, "product")
            handle = self.options.descriptor.first(argument.graphblas_matrix)
        else:
            self._expect(product, SparseVector, "product")
            handle = argument.graphblas_handle
        self._check_domains(("argument", argument))

        self._write(mask, product, lambda: handle.apply(self._operator_handle))

    # Names matching the collection kind, for callers that prefer to be explicit

    def apply_to_vector(self, argument: SparseVector, product: SparseVector) -> None:
        self._expect(argument, SparseVector, "argument")
        self.apply(argument, product)

    def apply_to_vector_with_mask(self, mask: MaskLike, argument: SparseVector,
                                  product: SparseVector) -> None:
        self._expect(argument, SparseVector, "argument")
        self.apply_with_mask(mask, argument, product)

    def apply_to_matrix(self, argument: SparseMatrix, product: SparseMatrix) -> None:
        self._expect(argument, SparseMatrix, "argument")
        self.apply(argument, product)

    def apply_to_matrix_with_mask(self, mask: MaskLike, argument: SparseMatrix,
                                  product: SparseMatrix) -> None:
        self._expect(argument, SparseMatrix, "argument")
        self.apply_with_mask(mask, argument, product)
