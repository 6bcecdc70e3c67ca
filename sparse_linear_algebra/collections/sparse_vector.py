"""
SparseVector - index-keyed sparse collection backed by a graphblas Vector.
"""

from __future__ import annotations
from typing import Any, Iterable, List, NamedTuple, Optional, Tuple, Union, TYPE_CHECKING

from ..constants import DEFAULT_VALUE_TYPE
from ..context import Context, engine
from ..index import ElementIndex, check_index
from ..value_types import resolve_value_type
from .collection import SparseCollection

if TYPE_CHECKING:
    from ..operators.binary_operator import BinaryOperator


class VectorElement(NamedTuple):
    """One stored element: (index, value)."""
    index: ElementIndex
    value: Any


class SparseVector(SparseCollection):
    """
    Sparse vector of fixed length.

    Args:
        context: Context the vector is built against
        length: number of addressable indices
        value_type: value domain (default INT64)
    """

    def __init__(self, context: Context, length: int,
                 value_type: Any = DEFAULT_VALUE_TYPE):
        dtype = resolve_value_type(value_type)
        gb = engine()
        handle = context.call(lambda: gb.Vector(dtype, size=length))
        super().__init__(context, handle)

    @classmethod
    def from_graphblas(cls, context: Context, vector: Any) -> "SparseVector":
        """Wrap an existing graphblas Vector without copying."""
        obj = cls.__new__(cls)
        SparseCollection.__init__(obj, context, vector)
        return obj

    @classmethod
    def from_element_list(
        cls,
        context: Context,
        length: int,
        elements: Iterable[Union[VectorElement, Tuple[ElementIndex, Any]]],
        value_type: Any = DEFAULT_VALUE_TYPE,
        duplicates: Optional["BinaryOperator"] = None,
    ) -> "SparseVector":
        """
        Build a vector from (index, value) pairs.

        Args:
            duplicates: binary operator combining values given for the same
                index; None lets the engine reject duplicates

        Raises:
            IndexOutOfBoundsError: an index is outside [0, length)
        """
        elements = list(elements)
        if not elements:
            return cls(context, length, value_type)

        indices = [check_index(index, length) for index, _ in elements]
        values = [value for _, value in elements]
        dtype = resolve_value_type(value_type)
        dup_op = duplicates.handle if duplicates is not None else None

        gb = engine()
        handle = context.call(
            lambda: gb.Vector.from_coo(indices, values, dtype=dtype, size=length, dup_op=dup_op)
        )
        return cls.from_graphblas(context, handle)

    @property
    def graphblas_vector(self) -> Any:
        return self._handle

    @property
    def length(self) -> int:
        return self._handle.size

    def element_value(self, index: ElementIndex) -> Optional[Any]:
        """Stored value at index, or None if nothing is stored there."""
        index = check_index(index, self.length)
        return self._context.call(lambda: self._handle.get(index), self)

    def element_value_or_default(self, index: ElementIndex) -> Any:
        """Stored value at index, or the domain's zero."""
        value = self.element_value(index)
        return self._zero() if value is None else value

    def set_element(self, index: ElementIndex, value: Any) -> None:
        index = check_index(index, self.length)

        def assign():
            self._handle[index] = value

        self._context.call(assign, self)

    def element_list(self) -> List[VectorElement]:
        """Stored elements in index order."""
        indices, values = self._context.call(self._handle.to_coo, self)
        return [VectorElement(int(i), v) for i, v in zip(indices.tolist(), values.tolist())]

    def to_dict(self) -> dict:
        return {element.index: element.value for element in self.element_list()}
