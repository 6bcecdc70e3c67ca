"""
Operator options and the descriptor they compile into.

OperatorOptions is the caller-facing configuration; Descriptor is the frozen,
compiled form an applier keeps and consults on every call. Both are built once
per applier.

Defaults: no transpose, merge into the existing output (no replace), read mask
values as given (value mask, no complement).
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, fields


@dataclass(frozen=True)
class Descriptor:
    """
    Compiled execution configuration.

    first()/second() present operands to the engine (transposed or not);
    output_arguments() builds the keyword arguments of the output update
    (mask, accum, replace).
    """
    transpose_first: bool
    transpose_second: bool
    replace_output: bool
    structural_mask: bool
    complement_mask: bool

    def first(self, operand: Any) -> Any:
        return operand.T if self.transpose_first else operand

    def second(self, operand: Any) -> Any:
        return operand.T if self.transpose_second else operand

    def output_arguments(self, engine_mask: Optional[Any],
                         accumulator_handle: Optional[Any]) -> Dict[str, Any]:
        arguments: Dict[str, Any] = {}
        if engine_mask is not None:
            arguments["mask"] = engine_mask
            # Without a mask every coordinate is selected, so replace is a no-op
            if self.replace_output:
                arguments["replace"] = True
        if accumulator_handle is not None:
            arguments["accum"] = accumulator_handle
        return arguments


@dataclass(frozen=True)
class OperatorOptions:
    """
    Execution configuration of one applier.

    Attributes:
        transpose_first: read the first (matrix) operand transposed
        transpose_second: read the second (matrix) operand transposed
        replace_output: clear output entries the mask does not select
        structural_mask: select by presence in the mask, ignoring its values
        complement_mask: invert the mask's selection
    """
    transpose_first: bool = False
    transpose_second: bool = False
    replace_output: bool = False
    structural_mask: bool = False
    complement_mask: bool = False
    descriptor: Descriptor = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        for f in fields(self):
            if f.init and not isinstance(getattr(self, f.name), bool):
                raise TypeError(f"{f.name} must be a bool, got {getattr(self, f.name)!r}")
        object.__setattr__(self, "descriptor", Descriptor(
            transpose_first=self.transpose_first,
            transpose_second=self.transpose_second,
            replace_output=self.replace_output,
            structural_mask=self.structural_mask,
            complement_mask=self.complement_mask,
        ))

    def require(self, applier: str, transpose_first: bool = True,
                transpose_second: bool = True) -> None:
        """
        Check these options against what an applier supports.

        Raises:
            ValueError: a transpose is requested for an operand that cannot be
                transposed (a vector, or an absent operand)
        """
        if self.transpose_first and not transpose_first:
            raise ValueError(f"{applier} does not support transpose_first")
        if self.transpose_second and not transpose_second:
            raise ValueError(f"{applier} does not support transpose_second")
