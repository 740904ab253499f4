"""
Real-number arrays.

Every algorithm in classbreaks runs in the floating point width of the
sample it receives (float32 or float64). These helpers turn caller input
into an engine-owned 1D array of a supported width.
"""

import numpy as np
from typing import Optional

from classbreaks.config import CONFIG


def resolve_dtype(dtype=None) -> np.dtype:
    """
    Resolve a requested dtype to a supported floating point width.

    None → CONFIG['numeric']['default_dtype'].
    Raises TypeError for anything other than float32 / float64.
    """
    if dtype is None:
        dtype = CONFIG['numeric']['default_dtype']
    resolved = np.dtype(dtype)
    if resolved.name not in CONFIG['numeric']['dtypes']:
        raise TypeError(
            f"Unsupported dtype: {resolved.name}. "
            f"Available: {list(CONFIG['numeric']['dtypes'])}"
        )
    return resolved


def as_real_array(values, dtype: Optional[np.dtype] = None) -> np.ndarray:
    """
    Copy values into a flat array of real numbers.

    When dtype is None, float32 / float64 input keeps its width and
    anything else (ints, lists of Python floats) becomes the default dtype.
    The result never shares memory with the caller's buffer.
    """
    arr = np.asarray(values)
    if dtype is None:
        if arr.dtype.name in CONFIG['numeric']['dtypes']:
            dtype = arr.dtype
    dtype = resolve_dtype(dtype)
    return np.array(arr, dtype=dtype, copy=True).ravel()


def sorted_copy(values, dtype: Optional[np.dtype] = None) -> np.ndarray:
    """Ascending, engine-owned copy of values."""
    arr = as_real_array(values, dtype)
    arr.sort(kind='stable')
    return arr
