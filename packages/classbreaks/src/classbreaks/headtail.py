"""
Head/tail breaks (Jiang 2013) and the mirrored tail/head variant.

Head/tail, for heavily right-skewed data:
    bounds = [min]
    m = mean(x)
    repeat:
        head = {v in x : v > m}
        m = mean(head); bounds.append(m)
    until len(head) < 2

Tail/head mirrors it with v < m, starting from the max, and the result
is reversed into ascending order.

The number of classes comes out of the data. Any class count a caller
asked for is ignored.

When every value of the current head is equal, the next head is empty:
iteration stops there (the last appended mean is already the extreme
value). A sample with no spread at all has no head and raises DomainError.
"""

import numpy as np

from classbreaks.errors import DomainError
from classbreaks.real import as_real_array


def _split_by_mean(values: np.ndarray, keep) -> list:
    real = values.dtype.type
    mean = values.sum() / real(values.size)
    breaks = []
    while True:
        part = values[keep(values, mean)]
        if part.size == 0:
            break
        mean = part.sum() / real(part.size)
        breaks.append(mean)
        if part.size < 2:
            break
    return breaks


def head_tail(values: np.ndarray) -> np.ndarray:
    """
    Head/tail breaks of an ascending sample.

    Returns
    -------
    np.ndarray of boundaries, ascending, first = min, last = max.
    Class count is len(result) - 1.
    """
    values = as_real_array(values)
    means = _split_by_mean(values, np.greater)
    if not means:
        raise DomainError('head_tail', "sample has no spread")
    return np.array([values[0]] + means, dtype=values.dtype)


def tail_head(values: np.ndarray) -> np.ndarray:
    """
    Tail/head breaks of an ascending sample: head/tail mirrored on the
    low end, for left-skewed data.

    Returns
    -------
    np.ndarray of boundaries, ascending, first = min, last = max.
    """
    values = as_real_array(values)
    means = _split_by_mean(values, np.less)
    if not means:
        raise DomainError('tail_head', "sample has no spread")
    breaks = [values[-1]] + means
    breaks.reverse()
    return np.array(breaks, dtype=values.dtype)
