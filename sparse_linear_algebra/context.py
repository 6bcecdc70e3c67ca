"""
Execution Context - the single gateway to the GraphBLAS engine

Responsibilities:
    1. Initialize the engine once, in BLOCKING or NON_BLOCKING mode
    2. Run every engine operation through Context.call
    3. Translate engine exceptions (the status codes of the C API) into the
       error taxonomy of sparse_linear_algebra.error

A Context is a frozen value. It is created by Context.init and passed
explicitly to every collection; operators and appliers reach the engine
through the collections they are applied to. There is no locking here:
nothing in a Context can change after construction.

Usage:
    from sparse_linear_algebra import Context, Mode

    context = Context.init(Mode.NON_BLOCKING)
    vector = SparseVector(context, 4, "INT32")

Note on NON_BLOCKING:
    The engine may defer work, so an error caused by call N can be reported by
    call N+k. Use Context.synchronize(collection) to force completion at a
    chosen point.
"""

from __future__ import annotations
from typing import Any, Callable, List, Optional, Tuple, Type, TypeVar
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
import logging

# Importing the package does not start the engine; touching any of its
# attributes (gb.Matrix, gb.binary, ...) does, in its own default mode.
import graphblas as gb

from .constants import ENGINE_BACKEND, DEFAULT_MODE_BLOCKING
from .error import (
    SparseLinearAlgebraError,
    InitializationError,
    DomainMismatchError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidOrUninitializedHandleError,
    OutOfMemoryError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Mode(Enum):
    """Engine execution mode."""
    BLOCKING = "blocking"
    NON_BLOCKING = "non_blocking"

    @property
    def blocking(self) -> bool:
        return self is Mode.BLOCKING


DEFAULT_MODE = Mode.BLOCKING if DEFAULT_MODE_BLOCKING else Mode.NON_BLOCKING

# Mode the process-wide engine was started in; None until Context.init succeeds
_engine_mode: Optional[Mode] = None


def engine():
    """
    Return the initialized graphblas module.

    Raises:
        InvalidOrUninitializedHandleError: if no Context has initialized the engine
    """
    if _engine_mode is None:
        raise InvalidOrUninitializedHandleError(
            "GraphBLAS engine is not initialized; call Context.init() first"
        )
    return gb


# =============================================================================
# SECTION 1: Engine exception translation
# =============================================================================

# Engine exception name -> error type. Names missing from the installed
# python-graphblas are skipped.
_ENGINE_ERRORS: Tuple[Tuple[str, Type[SparseLinearAlgebraError]], ...] = (
    ("DomainMismatch", DomainMismatchError),
    ("DimensionMismatch", DimensionMismatchError),
    ("OutOfMemory", OutOfMemoryError),
    ("InsufficientSpace", OutOfMemoryError),
    ("IndexOutOfBound", IndexOutOfBoundsError),
    ("InvalidIndex", IndexOutOfBoundsError),
    ("UninitializedObject", InvalidOrUninitializedHandleError),
    ("InvalidObject", InvalidOrUninitializedHandleError),
    ("NullPointer", InvalidOrUninitializedHandleError),
)


@lru_cache(maxsize=1)
def _engine_error_table() -> Tuple[List[Tuple[type, Type[SparseLinearAlgebraError]]], type]:
    from graphblas import exceptions

    table = [
        (getattr(exceptions, name), error_type)
        for name, error_type in _ENGINE_ERRORS
        if hasattr(exceptions, name)
    ]
    return table, exceptions.GraphblasException


def _error_type_for(exc: BaseException) -> Optional[Type[SparseLinearAlgebraError]]:
    """Map an engine exception to an error type, or None if it is not an engine error."""
    table, base = _engine_error_table()
    for engine_type, error_type in table:
        if isinstance(exc, engine_type):
            return error_type
    if isinstance(exc, IndexError):
        return IndexOutOfBoundsError
    if isinstance(exc, base):
        return SparseLinearAlgebraError
    return None


def _describe_output(output: Any) -> str:
    handle = getattr(output, "graphblas_handle", output)
    name = getattr(handle, "name", type(handle).__name__)
    shape = getattr(handle, "shape", None)
    dtype = getattr(handle, "dtype", None)
    return f"output {name} shape={shape} dtype={dtype}"


# =============================================================================
# SECTION 2: Context
# =============================================================================

@dataclass(frozen=True)
class Context:
    """
    Shared handle on the initialized engine.

    Attributes:
        mode: execution mode the engine was started in
    """
    mode: Mode = DEFAULT_MODE

    @classmethod
    def init(cls, mode: Mode = DEFAULT_MODE) -> "Context":
        """
        Initialize the engine and return a Context for it.

        Calling init again with the same mode returns an equivalent Context.

        Raises:
            InitializationError: engine already running in another mode, engine
                started implicitly before this call, or backend unavailable
        """
        global _engine_mode

        if _engine_mode is not None and _engine_mode is not mode:
            raise InitializationError(
                f"GraphBLAS engine already initialized in {_engine_mode.value} mode; "
                f"cannot re-initialize in {mode.value} mode"
            )

        try:
            gb.init(ENGINE_BACKEND, blocking=mode.blocking)
        except Exception as exc:
            raise InitializationError(
                f"Could not initialize GraphBLAS engine ({ENGINE_BACKEND}) in {mode.value} mode",
                diagnostic=str(exc),
            ) from exc

        if _engine_mode is None:
            logger.debug("GraphBLAS engine initialized: backend=%s mode=%s",
                         ENGINE_BACKEND, mode.value)
        _engine_mode = mode
        return cls(mode=mode)

    def call(self, operation: Callable[[], T], failed_output: Any = None) -> T:
        """
        Run one engine operation and translate any engine failure.

        Args:
            operation: zero-argument callable performing the engine work
            failed_output: collection the operation writes to; described in the
                error's diagnostic if the operation fails

        Returns:
            Whatever the operation returns

        Raises:
            SparseLinearAlgebraError (or a subclass) for engine failures.
            Other exceptions propagate unchanged.
        """
        try:
            return operation()
        except SparseLinearAlgebraError:
            raise
        except Exception as exc:
            error_type = _error_type_for(exc)
            if error_type is None:
                raise
            diagnostic = f"{type(exc).__name__}: {exc}"
            if failed_output is not None:
                diagnostic = f"{diagnostic}; {_describe_output(failed_output)}"
            logger.debug("Engine call failed: %s", diagnostic)
            raise error_type(_ERROR_MESSAGES[error_type], diagnostic=diagnostic) from exc

    def synchronize(self, collection: Any) -> None:
        """Complete deferred engine work on one collection, surfacing deferred errors."""
        self.call(lambda: collection.graphblas_handle.wait(), collection)

    @property
    def is_blocking(self) -> bool:
        return self.mode.blocking


_ERROR_MESSAGES = {
    DomainMismatchError: "Domain mismatch between operator and collections",
    DimensionMismatchError: "Dimension mismatch between operands, mask and output",
    OutOfMemoryError: "GraphBLAS engine ran out of memory",
    IndexOutOfBoundsError: "Index out of bounds",
    InvalidOrUninitializedHandleError: "Invalid or uninitialized GraphBLAS handle",
    SparseLinearAlgebraError: "GraphBLAS engine call failed",
}
