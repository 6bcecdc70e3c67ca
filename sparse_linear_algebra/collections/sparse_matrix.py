"""
SparseMatrix - coordinate-keyed sparse collection backed by a graphblas Matrix.
"""

from __future__ import annotations
from typing import Any, Iterable, List, NamedTuple, Optional, Tuple, Union, TYPE_CHECKING

import numpy as np

from ..constants import DEFAULT_VALUE_TYPE
from ..context import Context, engine
from ..error import DimensionMismatchError
from ..index import ElementIndex, check_index
from ..value_types import resolve_value_type
from .collection import SparseCollection

if TYPE_CHECKING:
    from ..operators.binary_operator import BinaryOperator


class Size(NamedTuple):
    row_height: int
    column_width: int


class Coordinate(NamedTuple):
    row_index: ElementIndex
    column_index: ElementIndex


class MatrixElement(NamedTuple):
    """One stored element: (row, column, value)."""
    row_index: ElementIndex
    column_index: ElementIndex
    value: Any

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.row_index, self.column_index)


class SparseMatrix(SparseCollection):
    """
    Sparse matrix of fixed size.

    Args:
        context: Context the matrix is built against
        size: Size or (row_height, column_width)
        value_type: value domain (default INT64)
    """

    def __init__(self, context: Context, size: Union[Size, Tuple[int, int]],
                 value_type: Any = DEFAULT_VALUE_TYPE):
        size = Size(*size)
        dtype = resolve_value_type(value_type)
        gb = engine()
        handle = context.call(
            lambda: gb.Matrix(dtype, nrows=size.row_height, ncols=size.column_width)
        )
        super().__init__(context, handle)

    @classmethod
    def from_graphblas(cls, context: Context, matrix: Any) -> "SparseMatrix":
        """Wrap an existing graphblas Matrix without copying."""
        obj = cls.__new__(cls)
        SparseCollection.__init__(obj, context, matrix)
        return obj

    @classmethod
    def from_element_list(
        cls,
        context: Context,
        size: Union[Size, Tuple[int, int]],
        elements: Iterable[Union[MatrixElement, Tuple[ElementIndex, ElementIndex, Any]]],
        value_type: Any = DEFAULT_VALUE_TYPE,
        duplicates: Optional["BinaryOperator"] = None,
    ) -> "SparseMatrix":
        """
        Build a matrix from (row, column, value) triples.

        Args:
            duplicates: binary operator combining values given for the same
                coordinate; None lets the engine reject duplicates

        Raises:
            IndexOutOfBoundsError: a coordinate lies outside the matrix
        """
        size = Size(*size)
        elements = list(elements)
        if not elements:
            return cls(context, size, value_type)

        rows = [check_index(row, size.row_height, "row index") for row, _, _ in elements]
        columns = [check_index(col, size.column_width, "column index") for _, col, _ in elements]
        values = [value for _, _, value in elements]
        dtype = resolve_value_type(value_type)
        dup_op = duplicates.handle if duplicates is not None else None

        gb = engine()
        handle = context.call(
            lambda: gb.Matrix.from_coo(
                rows, columns, values, dtype=dtype,
                nrows=size.row_height, ncols=size.column_width, dup_op=dup_op,
            )
        )
        return cls.from_graphblas(context, handle)

    @classmethod
    def from_dense(cls, context: Context, arr: np.ndarray,
                   value_type: Any = None) -> "SparseMatrix":
        """
        Build a matrix from a dense 2D numpy array, storing its non-zero entries.

        Args:
            value_type: value domain (default: inferred from arr.dtype)
        """
        if arr.ndim != 2:
            raise DimensionMismatchError(f"Expected 2D array, got {arr.ndim}D")

        if value_type is None:
            value_type = arr.dtype

        rows, cols = np.nonzero(arr)
        elements = zip(rows.tolist(), cols.tolist(), arr[rows, cols].tolist())
        return cls.from_element_list(context, arr.shape, elements, value_type)

    @property
    def graphblas_matrix(self) -> Any:
        return self._handle

    @property
    def size(self) -> Size:
        return Size(self._handle.nrows, self._handle.ncols)

    @property
    def row_height(self) -> int:
        return self._handle.nrows

    @property
    def column_width(self) -> int:
        return self._handle.ncols

    def _check_coordinate(self, coordinate: Tuple[ElementIndex, ElementIndex]) -> Coordinate:
        row, col = coordinate
        return Coordinate(
            check_index(row, self.row_height, "row index"),
            check_index(col, self.column_width, "column index"),
        )

    def element_value(self, coordinate: Tuple[ElementIndex, ElementIndex]) -> Optional[Any]:
        """Stored value at (row, column), or None if nothing is stored there."""
        row, col = self._check_coordinate(coordinate)
        return self._context.call(lambda: self._handle.get(row, col), self)

    def element_value_or_default(self, coordinate: Tuple[ElementIndex, ElementIndex]) -> Any:
        """Stored value at (row, column), or the domain's zero."""
        value = self.element_value(coordinate)
        return self._zero() if value is None else value

    def set_element(self, element: Union[MatrixElement, Tuple[ElementIndex, ElementIndex, Any]]) -> None:
        row, col, value = element
        row, col = self._check_coordinate((row, col))

        def assign():
            self._handle[row, col] = value

        self._context.call(assign, self)

    def element_list(self) -> List[MatrixElement]:
        """Stored elements in row-major order."""
        rows, cols, values = self._context.call(self._handle.to_coo, self)
        return [
            MatrixElement(int(r), int(c), v)
            for r, c, v in zip(rows.tolist(), cols.tolist(), values.tolist())
        ]

    def to_dict(self) -> dict:
        return {element.coordinate: element.value for element in self.element_list()}

    def to_dense(self) -> np.ndarray:
        """Dense numpy copy; absent entries become zero."""
        dense = np.zeros(self.size, dtype=self.value_type.np_type)
        for row, col, value in self.element_list():
            dense[row, col] = value
        return dense
