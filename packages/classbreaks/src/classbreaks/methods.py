"""
Classification methods and their names.

Method names are matched exactly (case-sensitive) against
CONFIG['methods']['names']. The historical spelling 'EqualInverval'
is accepted as a synonym of 'EqualInterval'.

Usage:
    from classbreaks.methods import parse_method, break_function
    method = parse_method('JenksNaturalBreaks')
    breaks = break_function(method)(sorted_values, 5)
"""

from enum import Enum
from typing import Callable

from classbreaks.config import CONFIG
from classbreaks.errors import MethodParseError
from classbreaks.headtail import head_tail, tail_head
from classbreaks.intervals import arithmetic, equal_interval, quantiles
from classbreaks.jenks import natural_breaks


class Method(Enum):
    """Closed set of classification methods."""
    EQUAL_INTERVAL = 'EqualInterval'
    HEAD_TAIL = 'HeadTail'
    TAIL_HEAD = 'TailHead'
    NATURAL_BREAKS = 'JenksNaturalBreaks'
    QUANTILES = 'Quantiles'
    ARITHMETIC = 'Arithmetic'

    @property
    def fixed_count(self) -> bool:
        """False when the class count is computed from the data."""
        return self.value not in CONFIG['methods']['data_determined']


def parse_method(name) -> Method:
    """
    Method from its textual name.

    Method instances are returned unchanged.
    Raises MethodParseError for any unrecognized name.
    """
    if isinstance(name, Method):
        return name
    names = CONFIG['methods']['names']
    if not isinstance(name, str) or name not in names:
        raise MethodParseError(name, names)
    return Method(names[name])


_BREAK_FUNCTIONS = {
    Method.EQUAL_INTERVAL: equal_interval,
    Method.QUANTILES: quantiles,
    Method.ARITHMETIC: arithmetic,
    Method.NATURAL_BREAKS: natural_breaks,
    Method.HEAD_TAIL: lambda values, nb_class: head_tail(values),
    Method.TAIL_HEAD: lambda values, nb_class: tail_head(values),
}


def break_function(method: Method) -> Callable:
    """
    Break function for a method, as f(sorted_values, nb_class) → bounds.
    Head/tail variants ignore nb_class.
    """
    return _BREAK_FUNCTIONS[parse_method(method)]
