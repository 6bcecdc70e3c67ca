"""
Sparse collections the operator layer reads from and writes into.
"""

from .collection import SparseCollection
from .sparse_vector import SparseVector, VectorElement
from .sparse_matrix import SparseMatrix, Size, Coordinate, MatrixElement

__all__ = [
    "SparseCollection",
    "SparseVector",
    "VectorElement",
    "SparseMatrix",
    "Size",
    "Coordinate",
    "MatrixElement",
]
