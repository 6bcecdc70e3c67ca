"""
Value domains.

Collections and operators name their value domain with anything the engine's
dtype lookup understands ("INT32", numpy.int32, int, float, bool, a graphblas
DataType). Operands are read in an operator's evaluation domain by implicit
casting; only casts allowed by IMPLICIT_CAST_RULE are accepted.
"""

from __future__ import annotations
from typing import Any

import numpy as np

from .constants import IMPLICIT_CAST_RULE
from .context import engine
from .error import DomainMismatchError


def resolve_value_type(value_type: Any):
    """
    Resolve a value-type designator to a graphblas DataType.

    Raises:
        DomainMismatchError: if the engine knows no such type
    """
    dtypes = engine().dtypes
    try:
        return dtypes.lookup_dtype(value_type)
    except (KeyError, TypeError, ValueError) as exc:
        raise DomainMismatchError(f"Unknown value type: {value_type!r}") from exc


def is_implicitly_castable(source, domain) -> bool:
    """True if values of type `source` may be read in `domain` without an explicit cast."""
    if source == domain:
        return True
    return bool(np.can_cast(source.np_type, domain.np_type, casting=IMPLICIT_CAST_RULE))


def check_domain(source, domain, role: str) -> None:
    """Raise DomainMismatchError if `source` cannot be read in `domain`."""
    if not is_implicitly_castable(source, domain):
        raise DomainMismatchError(
            f"{role} has value type {source.name}, which cannot be read in domain {domain.name}"
        )


def zero_of(value_type):
    """Zero (False for BOOL) of a DataType as a Python scalar."""
    return value_type.np_type.type(0).item()
