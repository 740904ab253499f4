"""
Fixed-count break methods: equal interval, quantiles, arithmetic progression.

All three take an ascending sample and a class count k and return k + 1
boundaries in the sample's dtype. First boundary is the sample minimum,
last is the sample maximum.

Equal interval:
    bound(i) = min + i * (max - min) / k
    Last bound pinned to max so rounding never leaves it short.

Quantiles:
    bound(i) = x[floor(i * n / k + 0.49) - 1]     (0-based)
    Always an actual sample value, no interpolation.

Arithmetic progression:
    D = 1 + 2 + ... + k,  w = (max - min) / D
    bound(i) = bound(i-1) + i * w
    Class widths grow as w, 2w, 3w, ... → finer classes near the minimum,
    suited to long right tails.

Inputs are NOT sorted or validated here. Use classbreaks.bounds for that.
"""

import math
import numpy as np

from classbreaks.config import CONFIG
from classbreaks.real import as_real_array


def equal_interval(values: np.ndarray, nb_class: int) -> np.ndarray:
    """
    Equal-width breaks between the minimum and the maximum.

    Parameters
    ----------
    values : np.ndarray
        Ascending sample.
    nb_class : int
        Number of classes k >= 1.

    Returns
    -------
    np.ndarray of k + 1 boundaries.
    """
    values = as_real_array(values)
    lo, hi = values[0], values[-1]
    interval = (hi - lo) / values.dtype.type(nb_class)

    breaks = np.empty(nb_class + 1, dtype=values.dtype)
    val = lo
    for i in range(nb_class + 1):
        breaks[i] = val
        val += interval
    breaks[-1] = hi
    return breaks


def quantiles(values: np.ndarray, nb_class: int) -> np.ndarray:
    """
    Breaks holding roughly the same number of values per class.

    Parameters
    ----------
    values : np.ndarray
        Ascending sample.
    nb_class : int
        Number of classes k, 1 <= k <= len(values).

    Returns
    -------
    np.ndarray of k + 1 boundaries, each an element of values.
    """
    values = as_real_array(values)
    n = len(values)
    bias = CONFIG['quantiles']['rounding_bias']
    step = n / nb_class

    breaks = np.empty(nb_class + 1, dtype=values.dtype)
    breaks[0] = values[0]
    for i in range(1, nb_class):
        qidx = int(math.floor(i * step + bias))
        breaks[i] = values[qidx - 1]
    breaks[-1] = values[n - 1]
    return breaks


def arithmetic(values: np.ndarray, nb_class: int) -> np.ndarray:
    """
    Breaks whose class widths follow an arithmetic progression.

    Parameters
    ----------
    values : np.ndarray
        Ascending sample.
    nb_class : int
        Number of classes k >= 1.

    Returns
    -------
    np.ndarray of k + 1 boundaries.
    """
    values = as_real_array(values)
    real = values.dtype.type
    lo, hi = values[0], values[-1]
    denominator = real(nb_class * (nb_class + 1) // 2)
    width = (hi - lo) / denominator

    breaks = np.empty(nb_class + 1, dtype=values.dtype)
    breaks[0] = lo
    for i in range(1, nb_class + 1):
        breaks[i] = breaks[i - 1] + real(i) * width
    breaks[-1] = hi
    return breaks
