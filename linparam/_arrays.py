"""
Low-level array copy helpers.

Every array that crosses the Parameter boundary goes through this module.
Users should not use this directly; use the Parameter API instead.
"""

from typing import Optional

import numpy as np

from .types import InvalidArgumentError

FLOAT_DTYPE = np.float64
LABEL_DTYPE = np.int64

_FLOAT_KINDS = "iuf"
_LABEL_KINDS = "iu"
_LABEL_MAX = int(np.iinfo(LABEL_DTYPE).max)


def _to_1d(values, name: str) -> np.ndarray:
    """Build a fresh 1-D array from any sequence.

    Raises:
        InvalidArgumentError: If values cannot form a 1-D array
    """
    try:
        arr = np.array(values, copy=True)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"'{name}' is not a numeric sequence: {e}") from e

    if arr.ndim != 1:
        raise InvalidArgumentError(
            f"'{name}' must be one-dimensional, got shape {arr.shape}"
        )
    return arr


def copy_floats(values, name: str) -> np.ndarray:
    """Copy a sequence of real numbers into a new float64 array.

    Args:
        values: List, tuple or array of numbers
        name: Field name used in error messages

    Returns:
        Array that shares no memory with values

    Raises:
        InvalidArgumentError: If values is not a 1-D numeric sequence
    """
    arr = _to_1d(values, name)
    if arr.size and arr.dtype.kind not in _FLOAT_KINDS:
        raise InvalidArgumentError(
            f"'{name}' must contain real numbers, got dtype {arr.dtype}"
        )
    return arr.astype(FLOAT_DTYPE, copy=False)


def copy_labels(values, name: str) -> np.ndarray:
    """Copy a sequence of integer class labels into a new int64 array.

    Floats are rejected rather than truncated, and unsigned values that do
    not fit in int64 are rejected rather than wrapped.
    """
    arr = _to_1d(values, name)
    if arr.size and arr.dtype.kind not in _LABEL_KINDS:
        raise InvalidArgumentError(
            f"'{name}' must contain integers, got dtype {arr.dtype}"
        )
    if arr.size and arr.dtype.kind == "u" and int(arr.max()) > _LABEL_MAX:
        raise InvalidArgumentError(
            f"'{name}' values must be <= {_LABEL_MAX}, got {int(arr.max())}"
        )
    return arr.astype(LABEL_DTYPE, copy=False)


def duplicate(arr: Optional[np.ndarray]) -> Optional[np.ndarray]:
    """Return an independent copy of a stored array, or None."""
    if arr is None:
        return None
    return arr.copy()


def length(arr: Optional[np.ndarray]) -> int:
    """Length of a stored array, 0 when unset."""
    if arr is None:
        return 0
    return len(arr)


def equal(a: Optional[np.ndarray], b: Optional[np.ndarray]) -> bool:
    """Value equality for optional stored arrays."""
    if a is None or b is None:
        return a is None and b is None
    return bool(np.array_equal(a, b))
