"""
Shared accessor surface of sparse collections.

The operator layer consumes only this surface: the Context a collection was
built against, its read-only engine handle, its shape and value type.
"""

from __future__ import annotations
from typing import Any, Tuple

from ..context import Context
from ..value_types import zero_of


class SparseCollection:
    """Base for SparseVector and SparseMatrix. Not thread-safe."""

    def __init__(self, context: Context, handle: Any):
        self._context = context
        self._handle = handle

    @property
    def context(self) -> Context:
        return self._context

    @property
    def graphblas_handle(self) -> Any:
        """Engine object backing this collection; writes go through appliers."""
        return self._handle

    @property
    def value_type(self):
        """graphblas DataType of the stored values."""
        return self._handle.dtype

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(self._handle.shape)

    def number_of_stored_elements(self) -> int:
        return self._context.call(lambda: self._handle.nvals, self)

    def clear(self) -> None:
        """Remove every stored element, keeping dimensions."""
        self._context.call(self._handle.clear, self)

    def wait(self) -> None:
        """Complete deferred engine work on this collection."""
        self._context.synchronize(self)

    def _zero(self):
        return zero_of(self.value_type)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shape={self.shape}, "
            f"value_type={self.value_type.name}, nvals={self._handle.nvals})"
        )
