"""
Error taxonomy for the operator layer.

Every failure reported by the engine is translated into one of these types by
Context.call. Validation performed before an engine call raises the same types,
so callers see a single taxonomy regardless of where a precondition failed.

Each class also derives from the builtin exception a Python caller would
conventionally catch (IndexError for bad indices, ValueError for shape
problems, ...).
"""

from __future__ import annotations
from typing import Optional


class SparseLinearAlgebraError(Exception):
    """Base class. `diagnostic` holds engine-side detail when available."""

    def __init__(self, message: str, diagnostic: Optional[str] = None):
        self.message = message
        self.diagnostic = diagnostic
        if diagnostic:
            message = f"{message} [{diagnostic}]"
        super().__init__(message)


class InitializationError(SparseLinearAlgebraError, RuntimeError):
    """Engine setup could not complete."""


class DomainMismatchError(SparseLinearAlgebraError, TypeError):
    """Operand value type cannot be read in the operator's domain."""


class DimensionMismatchError(SparseLinearAlgebraError, ValueError):
    """Operand, mask or output shapes are incompatible."""


class IndexOutOfBoundsError(SparseLinearAlgebraError, IndexError):
    """An index lies outside the collection it addresses."""


class InvalidOrUninitializedHandleError(SparseLinearAlgebraError, RuntimeError):
    """An engine handle is invalid, or the engine was never initialized."""


class OutOfMemoryError(SparseLinearAlgebraError, MemoryError):
    """The engine could not allocate memory for the result."""
