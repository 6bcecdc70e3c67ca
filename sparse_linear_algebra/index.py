"""
Element indices and index selectors.

An index selector picks the elements an extraction reads, in order:
either ALL_INDICES or an explicit iterable of indices, which may repeat.
"""

from __future__ import annotations
from typing import Iterable, Union
import operator

import numpy as np

from .error import IndexOutOfBoundsError

ElementIndex = int


class _AllIndices:
    """Selector matching every index of a dimension."""
    __slots__ = ()

    def __repr__(self) -> str:
        return "ALL_INDICES"


ALL_INDICES = _AllIndices()

IndexSelector = Union[_AllIndices, Iterable[ElementIndex]]


def check_index(index: ElementIndex, bound: int, what: str = "index") -> int:
    """
    Validate one index against an exclusive upper bound.

    Negative indices are rejected (the engine would read them from the end),
    and so are bools, which would otherwise pass as 0 and 1.

    Raises:
        TypeError: index is not an integer
        IndexOutOfBoundsError: index < 0 or index >= bound
    """
    if isinstance(index, (bool, np.bool_)):
        raise TypeError(f"{what} must be an integer, got {index!r}")
    index = operator.index(index)
    if index < 0 or index >= bound:
        raise IndexOutOfBoundsError(f"{what} {index} out of range [0, {bound})")
    return index


def resolve_index_selector(selector: IndexSelector, bound: int,
                           what: str = "index") -> Union[slice, np.ndarray]:
    """
    Translate a selector into the engine's indexing form.

    Returns:
        slice(None) for ALL_INDICES, else a validated uint64 index array
        (possibly empty)
    """
    if selector is ALL_INDICES:
        return slice(None)
    indices = [check_index(index, bound, what) for index in selector]
    return np.asarray(indices, dtype=np.uint64)


def number_of_selected_indices(resolved: Union[slice, np.ndarray], bound: int) -> int:
    """Length of a selector already passed through resolve_index_selector."""
    if isinstance(resolved, slice):
        return bound
    return len(resolved)
