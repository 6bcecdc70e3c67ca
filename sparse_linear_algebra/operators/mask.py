"""
Masks: which output coordinates an apply call may write.

SelectAll places no restriction; complemented through options.complement_mask
it selects nothing, so only replace_output can change the output. Mask
selects the coordinates stored in a collection whose values cast to true;
structural=True selects by presence alone, complement=True inverts the
selection. OperatorOptions can add to this:
the effective flags are

    structural = mask.structural or options.structural_mask
    complement = mask.complement != options.complement_mask

Coordinates a mask does not select keep their prior output value (they are
cleared instead when options.replace_output is set).
"""

from __future__ import annotations
from typing import Any, Optional, Union
from dataclasses import dataclass

from ..collections import SparseCollection
from ..context import engine
from ..error import DimensionMismatchError
from .options import Descriptor


@dataclass(frozen=True)
class SelectAll:
    """Every coordinate the algebra produces may be written (none, if complemented)."""

    def engine_mask(self, output: SparseCollection, descriptor: Descriptor) -> Optional[Any]:
        if not descriptor.complement_mask:
            return None
        # Complement of select-all: structure of an empty collection
        gb = engine()
        if len(output.shape) == 1:
            empty = gb.Vector(bool, size=output.shape[0])
        else:
            empty = gb.Matrix(bool, nrows=output.shape[0], ncols=output.shape[1])
        return empty.S


@dataclass(frozen=True)
class Mask:
    """
    Selection by a boolean-castable collection.

    Attributes:
        collection: SparseVector for vector outputs, SparseMatrix for matrix
            outputs, with the output's dimensions
        complement: invert the selection
        structural: select stored coordinates regardless of value
    """
    collection: SparseCollection
    complement: bool = False
    structural: bool = False

    def engine_mask(self, output: SparseCollection, descriptor: Descriptor) -> Any:
        """
        Build the engine mask for one call writing into `output`.

        Raises:
            DimensionMismatchError: mask and output dimensions differ
        """
        if self.collection.shape != output.shape:
            raise DimensionMismatchError(
                f"Mask shape {self.collection.shape} does not match output shape {output.shape}"
            )

        handle = self.collection.graphblas_handle
        structural = self.structural or descriptor.structural_mask
        complement = self.complement != descriptor.complement_mask

        engine_mask = handle.S if structural else handle.V
        return ~engine_mask if complement else engine_mask


MaskLike = Union[SelectAll, Mask, SparseCollection]


def as_mask(mask: MaskLike) -> Union[SelectAll, Mask]:
    """Accept a bare collection where a Mask is expected."""
    if isinstance(mask, (SelectAll, Mask)):
        return mask
    if isinstance(mask, SparseCollection):
        return Mask(mask)
    raise TypeError(f"Expected SelectAll, Mask or a sparse collection, got {type(mask).__name__}")
