"""
Sparse Linear Algebra - typed operator layer over GraphBLAS

Build immutable, thread-shareable operators once; apply them repeatedly to
sparse vectors and matrices, with optional masking and accumulation. All
numeric work is done by SuiteSparse:GraphBLAS through python-graphblas.

Usage:
    from sparse_linear_algebra import Context, Mode, SparseMatrix
    from sparse_linear_algebra.operators import MatrixMultiplication, semiring

    context = Context.init(Mode.NON_BLOCKING)
    a = SparseMatrix.from_element_list(context, (2, 2), [(0, 0, 1), (1, 1, 2)], "INT32")
    c = SparseMatrix(context, (2, 2), "INT32")
    MatrixMultiplication(semiring.PlusTimes("INT32")).apply(a, a, c)
"""

__version__ = "0.1.0"

from .context import Context, Mode
from .error import (
    SparseLinearAlgebraError,
    InitializationError,
    DomainMismatchError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidOrUninitializedHandleError,
    OutOfMemoryError,
)
from .index import ALL_INDICES
from .collections import (
    SparseVector,
    SparseMatrix,
    Size,
    Coordinate,
    MatrixElement,
    VectorElement,
)

__all__ = [
    "Context",
    "Mode",
    "SparseLinearAlgebraError",
    "InitializationError",
    "DomainMismatchError",
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
    "InvalidOrUninitializedHandleError",
    "OutOfMemoryError",
    "ALL_INDICES",
    "SparseVector",
    "SparseMatrix",
    "Size",
    "Coordinate",
    "MatrixElement",
    "VectorElement",
]
