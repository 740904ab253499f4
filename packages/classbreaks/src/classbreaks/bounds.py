"""
Classification Result
=====================
BoundsInfo bundles the breaks of one classification with the sample
statistics, and answers "which class does this value fall in".

Construction validates, in order:
    1. at least CONFIG['sample']['min_size'] values   → SampleTooSmallError
    2. every value finite                             → NonFiniteSampleError
    3. 2 <= class_count <= n, unless the method       → InvalidClassCountError
       computes its own count (HeadTail / TailHead)

then sorts a private copy of the sample, runs the break method, and
freezes the result. The caller's sample is never reordered.

Class membership:
    class 0   = [bounds[0], bounds[1]]
    class i   = (bounds[i], bounds[i+1]]     for i > 0
    below the minimum or above the maximum → None

Usage:
    from classbreaks import BoundsInfo
    info = BoundsInfo.new(5, values, 'JenksNaturalBreaks')
    info.bounds            # array([ 1.,  2.,  4.,  7.,  9., 12.])
    info.class_index(3.0)  # 1
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from classbreaks import stats
from classbreaks.config import CONFIG
from classbreaks.errors import (
    InvalidClassCountError,
    NonFiniteSampleError,
    SampleTooSmallError,
)
from classbreaks.methods import Method, break_function, parse_method
from classbreaks.real import sorted_copy

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class BoundsInfo:
    """Immutable classification of one sample."""
    method: Method
    class_count: int            # resolved: len(bounds) - 1
    bounds: np.ndarray          # read-only, ascending
    min: float
    max: float
    mean: float
    requested_class_count: int

    @classmethod
    def new(
        cls,
        class_count: int,
        values,
        method,
        dtype=None,
    ) -> "BoundsInfo":
        """
        Classify a sample.

        Args:
            class_count: Requested number of classes. Ignored by HeadTail
                         and TailHead, which derive it from the data.
            values: Sample (any 1D sequence of numbers). Not modified.
            method: Method or its textual name.
            dtype: float32 / float64. None keeps a float sample's width,
                   anything else becomes float64.

        Returns:
            BoundsInfo with class_count = len(bounds) - 1.
        """
        method = parse_method(method)
        v = sorted_copy(values, dtype)
        _validate(class_count, v, method)

        bounds = break_function(method)(v, class_count)
        bounds.setflags(write=False)
        resolved = len(bounds) - 1

        logger.debug(f"{method.value}: {resolved} classes over {len(v)} values")
        if resolved != class_count:
            logger.info(
                f"{method.value} resolved to {resolved} classes "
                f"(requested {class_count})"
            )

        return cls(
            method=method,
            class_count=resolved,
            bounds=bounds,
            min=v[0],
            max=v[-1],
            mean=stats.mean(v),
            requested_class_count=class_count,
        )

    # =================================================================
    # Class lookup
    # =================================================================

    def class_index(self, value: float) -> Optional[int]:
        """
        Index of the class containing value, or None when value lies
        outside [min, max] (or is NaN).
        """
        if not (self.bounds[0] <= value <= self.bounds[-1]):
            return None
        for i in range(self.class_count):
            if value <= self.bounds[i + 1]:
                return i
        return None

    def class_indices(self, values) -> List[Optional[int]]:
        """class_index of every value, in input order."""
        probe = np.asarray(values, dtype=self.bounds.dtype).ravel()
        idx = np.searchsorted(self.bounds, probe, side='left')
        idx = np.maximum(idx - 1, 0)
        inside = (probe >= self.bounds[0]) & (probe <= self.bounds[-1])
        return [int(i) if ok else None for i, ok in zip(idx, inside)]

    def class_counts(self, values) -> List[int]:
        """
        Number of values falling in each class. Values outside
        [min, max] are not counted.
        """
        counts = [0] * self.class_count
        for i in self.class_indices(values):
            if i is not None:
                counts[i] += 1
        return counts

    # =================================================================
    # Inspection
    # =================================================================

    @property
    def resolved_count_differs(self) -> bool:
        """True when the method settled on a different count than requested."""
        return self.class_count != self.requested_class_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            'method': self.method.value,
            'class_count': self.class_count,
            'requested_class_count': self.requested_class_count,
            'bounds': [float(b) for b in self.bounds],
            'min': float(self.min),
            'max': float(self.max),
            'mean': float(self.mean),
        }


def _validate(class_count: int, values: np.ndarray, method: Method) -> None:
    n = len(values)
    min_size = CONFIG['sample']['min_size']
    if n < min_size:
        raise SampleTooSmallError(n, min_size)

    n_invalid = int(np.count_nonzero(~np.isfinite(values)))
    if n_invalid:
        raise NonFiniteSampleError(n_invalid)

    min_count = CONFIG['class_count']['min']
    if method.fixed_count and not (min_count <= class_count <= n):
        raise InvalidClassCountError(class_count, min_count, n)


def classify_breaks(class_count: int, values, method, dtype=None) -> BoundsInfo:
    """Shortcut for BoundsInfo.new()."""
    return BoundsInfo.new(class_count, values, method, dtype=dtype)
