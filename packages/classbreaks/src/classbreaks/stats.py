"""
Basic statistics over a sample: mean, median, variance, standard
deviation, kurtosis, root mean square, harmonic and geometric mean.

Every function takes a read-only sample (list, tuple or ndarray),
works on its own copy in the sample's floating point width and
returns a scalar of that width.

Undefined cases raise DomainError instead of returning NaN / inf:
    - any statistic of an empty sample
    - kurtosis of fewer than 4 values or of a constant sample
    - harmonic / geometric mean of a sample with a value <= 0
"""

import numpy as np

from classbreaks.config import CONFIG
from classbreaks.errors import DomainError
from classbreaks.real import as_real_array


def _nonempty(values, statistic: str) -> np.ndarray:
    arr = as_real_array(values)
    if arr.size == 0:
        raise DomainError(statistic, "empty sample")
    return arr


def _strictly_positive(values, statistic: str) -> np.ndarray:
    arr = _nonempty(values, statistic)
    if np.any(arr <= 0):
        raise DomainError(statistic, "requires only positive numbers as input")
    return arr


def mean(values: np.ndarray) -> float:
    """Arithmetic mean."""
    arr = _nonempty(values, 'mean')
    return arr.sum() / arr.dtype.type(arr.size)


def median(values: np.ndarray) -> float:
    """
    Middle value of the sorted sample.
    Even sizes average the two middle values.
    """
    arr = _nonempty(values, 'median')
    arr.sort()
    mid = arr.size // 2
    if arr.size % 2 == 1:
        return arr[mid]
    return (arr[mid - 1] + arr[mid]) / arr.dtype.type(2)


def sum_pow_deviations(values: np.ndarray, power: int) -> float:
    """Σ (x - mean)^power."""
    arr = _nonempty(values, 'sum_pow_deviations')
    deviations = arr - mean(arr)
    return np.sum(deviations ** power)


def variance(values: np.ndarray) -> float:
    """
    Population variance: sum of squared deviations divided by n
    (not n - 1).
    """
    arr = _nonempty(values, 'variance')
    return sum_pow_deviations(arr, 2) / arr.dtype.type(arr.size)


def standard_deviation(values: np.ndarray) -> float:
    """Square root of the population variance."""
    return np.sqrt(variance(values))


def kurtosis(values: np.ndarray) -> float:
    """
    Excess kurtosis, Fisher's definition (normal → 0.0).

    Uses the sample-size corrected estimator

        (n-1) / ((n-2)(n-3)) * (n(n+1) Σd⁴ / (Σd²)² - 3(n-1))

    where d = x - mean. Same quantity as
    scipy.stats.kurtosis(x, fisher=True, bias=False).
    """
    arr = _nonempty(values, 'kurtosis')
    min_size = CONFIG['kurtosis']['min_size']
    if arr.size < min_size:
        raise DomainError('kurtosis', f"needs at least {min_size} values, got {arr.size}")

    deviations = arr - mean(arr)
    squared = deviations * deviations
    m2 = np.sum(squared)
    m4 = np.sum(squared * squared)
    if m2 == 0:
        raise DomainError('kurtosis', "sample has zero variance")

    real = arr.dtype.type
    n = real(arr.size)
    one, two, three = real(1), real(2), real(3)
    return ((n - one) / ((n - two) * (n - three))
            * (n * (n + one) * m4 / (m2 * m2) - three * (n - one)))


def root_mean_square(values: np.ndarray) -> float:
    """sqrt(Σx² / n)."""
    arr = _nonempty(values, 'root_mean_square')
    return np.sqrt(np.sum(arr * arr) / arr.dtype.type(arr.size))


def harmonic_mean(values: np.ndarray) -> float:
    """n / Σ(1/x). Every value must be > 0."""
    arr = _strictly_positive(values, 'harmonic_mean')
    real = arr.dtype.type
    return real(arr.size) / np.sum(real(1) / arr)


def geometric_mean(values: np.ndarray) -> float:
    """
    n-th root of the product, computed as exp(mean(log x)) so large
    samples don't overflow the product. Every value must be > 0.
    """
    arr = _strictly_positive(values, 'geometric_mean')
    return np.exp(np.mean(np.log(arr)))
