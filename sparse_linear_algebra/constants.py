# sparse_linear_algebra/constants.py
"""
Sparse Linear Algebra Constants

Engine:
- ENGINE_BACKEND: python-graphblas backend selected at Context.init
- DEFAULT_MODE_BLOCKING: execution mode used when the caller names none

Value domains:
- DEFAULT_VALUE_TYPE: domain used by collections and operators built without one
- IMPLICIT_CAST_RULE: numpy casting rule an operand type must satisfy to be
  read in an operator's evaluation domain
"""


# =============================================================================
# Engine
# =============================================================================

ENGINE_BACKEND = "suitesparse"

# Non-blocking lets the engine defer work; errors may surface at a later call
DEFAULT_MODE_BLOCKING = False


# =============================================================================
# Value domains
# =============================================================================

DEFAULT_VALUE_TYPE = "INT64"

# "same_kind" admits widening and same-kind narrowing (int64 -> int32),
# rejects float -> int and int -> bool
IMPLICIT_CAST_RULE = "same_kind"
