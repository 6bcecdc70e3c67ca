"""
Algebraic operator handles.

An AlgebraicOperator is a frozen value built from a value domain. Construction
resolves the domain and compiles exactly one typed engine operator (for
example binary.plus[INT32]); after that nothing about the object can change,
so one instance may be shared by any number of threads.

Subclasses name the engine namespace (`kind`) and operator (`engine_name`):

    class Plus(BinaryOperator):
        engine_name = "plus"

    plus = Plus("INT32")
    plus.handle          # typed engine operator
"""

from __future__ import annotations
from typing import Any, ClassVar, Optional
from dataclasses import dataclass, field

from ..constants import DEFAULT_VALUE_TYPE
from ..context import engine
from ..error import DomainMismatchError
from ..value_types import resolve_value_type


def compile_handle(kind: str, name: str, domain) -> Any:
    """
    Look up the typed engine operator `kind.name[domain]`.

    Raises:
        DomainMismatchError: the engine has no variant of the operator for domain
    """
    untyped = getattr(getattr(engine(), kind), name)
    try:
        return untyped[domain]
    except (KeyError, TypeError, ValueError) as exc:
        raise DomainMismatchError(
            f"{kind}.{name} is not defined for value type {domain.name}"
        ) from exc


@dataclass(frozen=True)
class AlgebraicOperator:
    """
    Typed algebraic object compiled into one immutable engine handle.

    Attributes:
        value_type: evaluation domain (resolved to a graphblas DataType)
        handle: typed engine operator, read-only
    """
    value_type: Any = DEFAULT_VALUE_TYPE
    handle: Any = field(init=False, repr=False, compare=False)

    kind: ClassVar[str] = ""
    engine_name: ClassVar[Optional[str]] = None

    def __post_init__(self):
        domain = resolve_value_type(self.value_type)
        object.__setattr__(self, "value_type", domain)
        object.__setattr__(self, "handle", compile_handle(self.kind, self.engine_name, domain))

    @property
    def name(self) -> str:
        return f"{self.kind}.{self.engine_name}[{self.value_type.name}]"
