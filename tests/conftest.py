"""
conftest.py - shared fixtures for the sparse_linear_algebra test suite

The engine is process-wide and must be started before any engine object is
touched, so the context fixture is session-scoped and autouse.
"""

import pytest

from sparse_linear_algebra import Context, Mode, SparseMatrix, SparseVector


@pytest.fixture(scope="session", autouse=True)
def context():
    """NON_BLOCKING context shared by every test."""
    return Context.init(Mode.NON_BLOCKING)


@pytest.fixture
def make_vector(context):
    """Factory: make_vector(length, {index: value}, value_type)."""
    def _make(length, values=None, value_type="INT32"):
        elements = sorted((values or {}).items())
        return SparseVector.from_element_list(context, length, elements, value_type)
    return _make


@pytest.fixture
def make_matrix(context):
    """Factory: make_matrix((rows, cols), {(row, col): value}, value_type)."""
    def _make(size, values=None, value_type="INT32"):
        elements = [(row, col, value) for (row, col), value in sorted((values or {}).items())]
        return SparseMatrix.from_element_list(context, size, elements, value_type)
    return _make
