"""
Common machinery of the operator appliers.

An applier binds {operator, options, accumulator} once; its handles are
compiled in __post_init__ and never change, so an applier can be shared by
threads without locking. Each apply call borrows its operands and output, and
performs one engine call through the output's Context:

    output(mask=..., accum=..., replace=...) << expression

Write rule per output coordinate c, with T the computed result:
    c not selected by the mask -> prior value kept (cleared under replace)
    c selected, Assignment     -> T[c], or no entry if T has none
    c selected, accumulator op -> op(C[c], T[c]) where both exist, else
                                  whichever of C[c], T[c] exists
"""

from __future__ import annotations
from typing import Any, Callable, ClassVar, Tuple, Type
import logging

from ..collections import SparseCollection
from ..value_types import check_domain
from .binary_operator import BinaryOperator
from .mask import MaskLike, SelectAll, as_mask
from .options import OperatorOptions

logger = logging.getLogger(__name__)

SELECT_ALL = SelectAll()


class OperatorApplier:
    """
    Mixin for frozen applier dataclasses with `options` and `accumulator` fields.

    Subclasses set which transposes they support and may override
    _compile_operator() to derive the engine operator they call with.
    """
    supports_transpose_first: ClassVar[bool] = True
    supports_transpose_second: ClassVar[bool] = True

    def __post_init__(self):
        if not isinstance(self.options, OperatorOptions):
            raise TypeError(f"options must be OperatorOptions, got {type(self.options).__name__}")
        if not isinstance(self.accumulator, BinaryOperator):
            raise TypeError(
                f"accumulator must be a BinaryOperator, got {type(self.accumulator).__name__}"
            )
        self.options.require(
            type(self).__name__,
            transpose_first=self.supports_transpose_first,
            transpose_second=self.supports_transpose_second,
        )
        object.__setattr__(self, "_accumulator_handle", self.accumulator.accumulator_handle)
        object.__setattr__(self, "_operator_handle", self._compile_operator())
        logger.debug("Built %s (accumulator=%s, options=%s)",
                     type(self).__name__, self.accumulator.name, self.options)

    def _compile_operator(self) -> Any:
        return None

    # -------------------------------------------------------------------------
    # Per-call helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _expect(collection: Any, expected: Type[SparseCollection], role: str) -> None:
        if not isinstance(collection, expected):
            raise TypeError(
                f"{role} must be a {expected.__name__}, got {type(collection).__name__}"
            )

    def _check_domains(self, *operands: Tuple[str, SparseCollection]) -> None:
        domain = self.operator.value_type
        for role, operand in operands:
            check_domain(operand.value_type, domain, role)

    def _write(self, mask: MaskLike, output: SparseCollection,
               expression: Callable[[], Any]) -> None:
        """
        Evaluate `expression` into `output` under mask and accumulator.

        The mask is validated before the engine is called; the update itself
        runs inside output.context.call so engine failures are translated.
        """
        descriptor = self.options.descriptor
        engine_mask = as_mask(mask).engine_mask(output, descriptor)
        arguments = descriptor.output_arguments(engine_mask, self._accumulator_handle)
        target = output.graphblas_handle

        def update():
            if arguments:
                target(**arguments) << expression()
            else:
                target << expression()

        output.context.call(update, output)


class ElementWiseApplier(OperatorApplier):
    """
    Shared apply path of the element-wise families.

    Subclasses set `collection_type` (SparseVector or SparseMatrix) and
    `engine_method` ("ewise_add" or "ewise_mult").
    """
    collection_type: ClassVar[Type[SparseCollection]] = SparseCollection
    engine_method: ClassVar[str] = ""

    def apply(self, first: SparseCollection, second: SparseCollection,
              output: SparseCollection) -> None:
        self.apply_with_mask(SELECT_ALL, first, second, output)

    def apply_with_mask(self, mask: MaskLike, first: SparseCollection,
                        second: SparseCollection, output: SparseCollection) -> None:
        self._expect(first, self.collection_type, "first operand")
        self._expect(second, self.collection_type, "second operand")
        self._expect(output, self.collection_type, "output")
        self._check_domains(("first operand", first), ("second operand", second))

        descriptor = self.options.descriptor
        left = descriptor.first(first.graphblas_handle)
        right = descriptor.second(second.graphblas_handle)
        combine = getattr(left, self.engine_method)
        self._write(mask, output, lambda: combine(right, self._operator_handle))
