"""
Jenks natural breaks (Fisher-Jenks optimal 1D partition).

Chooses k - 1 cut points in an ascending sample so that the total
within-class sum of squared deviations is minimal.

Dynamic programming over two n × k tables:
    cost[l][j]   min total cost of the first l+1 values split into j+1 classes
    start[l][j]  1-based index where the last class of that split begins

For each prefix length l, the tail x[i3..l] is grown one value at a time
keeping S1 = Σx, S2 = Σx², w = count, so the tail cost is

    SSD(tail) = S2 - S1² / w

with no separate mean pass. Each tail is combined with the best split of
everything before it into j - 1 classes.

Backtracking from (n, k) through start[] recovers the cut points.
Boundaries are actual sample values: min, the value closing each class,
max.

O(n² · k) time, O(n · k) memory. Recomputed from scratch on every call.
"""

import logging
import numpy as np
from typing import Tuple

from classbreaks.real import as_real_array

logger = logging.getLogger(__name__)


class _Table:
    """
    Dense 2D table on a flat row-major buffer.

    Cell (row, col) lives at offset row * n_cols + col. Access goes
    through a (rows, cols) shaped view of the buffer, so every index is
    bounds-checked and row slices stay contiguous.
    """

    def __init__(self, n_rows: int, n_cols: int, fill, dtype):
        self.shape = (n_rows, n_cols)
        self.values = np.full(n_rows * n_cols, fill, dtype=dtype)
        self._grid = self.values.reshape(self.shape)

    def offset(self, ix: Tuple[int, int]) -> int:
        row, col = ix
        if not (0 <= row < self.shape[0] and 0 <= col < self.shape[1]):
            raise IndexError(f"cell {ix} outside table of shape {self.shape}")
        return row * self.shape[1] + col

    def get(self, ix: Tuple[int, int]):
        return self.values[self.offset(ix)]

    def set(self, ix: Tuple[int, int], value) -> None:
        self.values[self.offset(ix)] = value

    def row(self, row: int) -> np.ndarray:
        """Writable view of one row."""
        return self._grid[row]


def _fill_tables(values: np.ndarray, nb_class: int) -> _Table:
    n = len(values)
    real = values.dtype.type
    zero, one = real(0), real(1)

    start = _Table(n, nb_class, 1, np.intp)
    cost = _Table(n, nb_class, np.finfo(values.dtype).max, values.dtype)
    # a single value is one class with zero cost
    cost.set((0, 0), zero)

    for l in range(2, n + 1):
        s1 = s2 = w = zero
        cost_row = cost.row(l - 1)[1:]
        start_row = start.row(l - 1)[1:]
        for m in range(1, l + 1):
            i3 = l - m + 1
            val = values[i3 - 1]
            s2 += val * val
            s1 += val
            w += one
            ssd = s2 - (s1 * s1) / w
            i4 = i3 - 1
            if i4 != 0 and nb_class > 1:
                # j = 2..k at once; rows before l are never written here
                candidate = ssd + cost.row(i4 - 1)[:-1]
                better = cost_row >= candidate
                cost_row[better] = candidate[better]
                start_row[better] = i3
        start.set((l - 1, 0), 1)
        cost.set((l - 1, 0), ssd)

    return start


def natural_breaks(values: np.ndarray, nb_class: int) -> np.ndarray:
    """
    Jenks natural breaks of an ascending sample.

    Parameters
    ----------
    values : np.ndarray
        Ascending sample of n values.
    nb_class : int
        Number of classes k, 1 <= k <= n.

    Returns
    -------
    np.ndarray of k + 1 boundaries, all elements of values.
    """
    values = as_real_array(values)
    n = len(values)
    logger.debug(f"jenks: filling {n}x{nb_class} tables")

    start = _fill_tables(values, nb_class)

    kclass = [0] * nb_class
    row = n
    j = nb_class
    while j > 1:
        row = int(start.get((row - 1, j - 1))) - 1
        kclass[j - 2] = row
        j -= 1

    breaks = np.empty(nb_class + 1, dtype=values.dtype)
    breaks[0] = values[0]
    for i in range(1, nb_class):
        breaks[i] = values[kclass[i - 1] - 1]
    breaks[-1] = values[n - 1]
    return breaks
