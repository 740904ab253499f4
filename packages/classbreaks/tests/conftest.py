"""Shared fixtures for classbreaks tests."""
import numpy as np
import pytest


VALUES_76 = [
    1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 2.0, 2.0, 2.0, 2.0, 3.0, 3.0, 3.0, 3.0, 3.0, 3.0,
    3.0, 3.0, 3.0, 2.0, 2.0, 2.0, 2.0, 1.0, 1.0, 12.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0,
    10.0, 11.0, 5.0, 6.0, 7.0, 6.0, 5.0, 6.0, 7.0, 8.0, 8.0, 9.0, 8.0, 7.0, 6.0, 7.0, 8.0,
    9.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 2.0, 3.0, 3.0, 3.0, 4.0, 4.0, 4.0, 3.0,
    2.0, 2.0, 2.0, 1.0, 1.0, 1.0,
]


@pytest.fixture
def values76():
    """76 values in {1..12}, unsorted."""
    return list(VALUES_76)


@pytest.fixture
def sorted76():
    return np.sort(np.array(VALUES_76))
