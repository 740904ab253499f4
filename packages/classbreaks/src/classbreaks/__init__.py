"""
classbreaks — One-Dimensional Classification Breaks
===================================================

Partitions a sample of real values into ordered, contiguous classes for
thematic display (choropleth maps, legends).

Methods:
    EqualInterval        equal-width classes
    Quantiles            equal-count classes
    Arithmetic           widths growing w, 2w, 3w, ...
    HeadTail / TailHead  recursive mean splits, class count from the data
    JenksNaturalBreaks   minimal within-class squared deviation

Usage:
    import classbreaks

    info = classbreaks.BoundsInfo.new(4, values, 'Quantiles')
    info.bounds                 # ascending, len = info.class_count + 1
    info.class_index(3.2)       # 0-based class, or None outside [min, max]

    # Already sorted and validated? Call a break function directly.
    classbreaks.natural_breaks(sorted_values, 5)

    # Sample statistics
    classbreaks.stats.kurtosis(values)
"""

__version__ = '0.1.0'

from classbreaks import stats
from classbreaks.bounds import BoundsInfo, classify_breaks
from classbreaks.errors import (
    ClassificationError,
    DomainError,
    InvalidClassCountError,
    MethodParseError,
    NonFiniteSampleError,
    SampleTooSmallError,
    ValidationError,
)
from classbreaks.headtail import head_tail, tail_head
from classbreaks.intervals import arithmetic, equal_interval, quantiles
from classbreaks.jenks import natural_breaks
from classbreaks.methods import Method, break_function, parse_method

__all__ = [
    'BoundsInfo',
    'classify_breaks',
    'Method',
    'parse_method',
    'break_function',
    'equal_interval',
    'quantiles',
    'arithmetic',
    'head_tail',
    'tail_head',
    'natural_breaks',
    'stats',
    'ClassificationError',
    'MethodParseError',
    'ValidationError',
    'SampleTooSmallError',
    'InvalidClassCountError',
    'NonFiniteSampleError',
    'DomainError',
]
