"""
Column extraction.

    output[i] = source[selector[i], column_index]

The selector is ALL_INDICES (every row, in order) or an ordered list of row
indices, which may repeat. The output vector's length must equal the number
of selected rows. With options.transpose_first the source is read transposed,
so the row at `column_index` is extracted instead.

Example:
    source (3x2), column 0 = [1, 2, 3]
    MatrixColumnExtractor().apply(source, 0, [0, 2], output)   # output = [1, 3]
"""

from __future__ import annotations
from typing import Any
from dataclasses import dataclass, field

from ..collections import SparseMatrix, SparseVector
from ..error import DimensionMismatchError
from ..index import ElementIndex, IndexSelector, check_index, resolve_index_selector, \
    number_of_selected_indices
from .applier import OperatorApplier, SELECT_ALL
from .binary_operator import Assignment, BinaryOperator
from .mask import MaskLike
from .options import OperatorOptions


@dataclass(frozen=True)
class MatrixColumnExtractor(OperatorApplier):
    options: OperatorOptions = field(default_factory=OperatorOptions)
    accumulator: BinaryOperator = field(default_factory=Assignment)
    _operator_handle: Any = field(init=False, repr=False, compare=False)
    _accumulator_handle: Any = field(init=False, repr=False, compare=False)

    supports_transpose_second = False

    def apply(self, source: SparseMatrix, column_index: ElementIndex,
              row_selector: IndexSelector, output: SparseVector) -> None:
        self.apply_with_mask(SELECT_ALL, source, column_index, row_selector, output)

    def apply_with_mask(self, mask: MaskLike, source: SparseMatrix,
                        column_index: ElementIndex, row_selector: IndexSelector,
                        output: SparseVector) -> None:
        """
        Raises:
            IndexOutOfBoundsError: a selected row, or the column, lies outside source
            DimensionMismatchError: output length differs from the selection size
        """
        self._expect(source, SparseMatrix, "source")
        self._expect(output, SparseVector, "output")

        transposed = self.options.transpose_first
        row_bound, column_bound = source.size
        if transposed:
            row_bound, column_bound = column_bound, row_bound

        column_index = check_index(column_index, column_bound, "column index")
        rows = resolve_index_selector(row_selector, row_bound, "row index")

        selected = number_of_selected_indices(rows, row_bound)
        if output.length != selected:
            raise DimensionMismatchError(
                f"Output length {output.length} does not match {selected} selected rows"
            )

        matrix = source.graphblas_matrix
        if transposed:
            self._write(mask, output, lambda: matrix[column_index, rows])
        else:
            self._write(mask, output, lambda: matrix[rows, column_index])
