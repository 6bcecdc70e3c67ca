"""
Operators and operator appliers.

Algebraic objects (unary_operator, binary_operator, monoid, semiring) are
grouped in submodules because several share a name (Plus is both a binary
operator and a monoid):

    from sparse_linear_algebra.operators import binary_operator, semiring
    binary_operator.Plus("INT32")
    semiring.PlusTimes("INT32")

Appliers, options and masks are exported here directly.
"""

from . import unary_operator, binary_operator, monoid, semiring
from .options import OperatorOptions, Descriptor
from .mask import SelectAll, Mask
from .applier import SELECT_ALL
from .element_wise_addition import ElementWiseVectorAddition, ElementWiseMatrixAddition
from .element_wise_multiplication import (
    ElementWiseVectorMultiplication,
    ElementWiseMatrixMultiplication,
)
from .multiplication import (
    MatrixMultiplication,
    MatrixVectorMultiplication,
    VectorMatrixMultiplication,
)
from .extract import MatrixColumnExtractor
from .apply import UnaryOperatorApplier

__all__ = [
    "unary_operator",
    "binary_operator",
    "monoid",
    "semiring",
    "OperatorOptions",
    "Descriptor",
    "SelectAll",
    "Mask",
    "SELECT_ALL",
    "ElementWiseVectorAddition",
    "ElementWiseMatrixAddition",
    "ElementWiseVectorMultiplication",
    "ElementWiseMatrixMultiplication",
    "MatrixMultiplication",
    "MatrixVectorMultiplication",
    "VectorMatrixMultiplication",
    "MatrixColumnExtractor",
    "UnaryOperatorApplier",
]
