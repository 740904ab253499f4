"""
Errors raised by classbreaks.

Everything derives from ValueError so existing `except ValueError`
handlers keep catching bad input.

    ClassificationError
    ├── MethodParseError       unknown method name
    ├── ValidationError        rejected before any computation
    │   ├── SampleTooSmallError
    │   ├── InvalidClassCountError
    │   └── NonFiniteSampleError
    └── DomainError            value outside a formula's domain
"""

from typing import Optional


class ClassificationError(ValueError):
    """Base class for every classbreaks error."""


class MethodParseError(ClassificationError):
    """Unrecognized classification method name."""

    def __init__(self, name, valid):
        self.name = name
        self.valid = list(valid)
        super().__init__(
            f"Invalid classification name: {name!r}. "
            f"Expected one of: {', '.join(self.valid)}"
        )


class ValidationError(ClassificationError):
    """Input rejected before a result is built."""


class SampleTooSmallError(ValidationError):

    def __init__(self, size: int, min_size: int):
        self.size = size
        self.min_size = min_size
        super().__init__(
            f"Sample too small: {size} value(s), need at least {min_size}"
        )


class InvalidClassCountError(ValidationError):

    def __init__(self, class_count: int, min_count: int, max_count: int):
        self.class_count = class_count
        self.min_count = min_count
        self.max_count = max_count
        super().__init__(
            f"Invalid class count: {class_count} "
            f"(expected {min_count} <= class_count <= {max_count})"
        )


class NonFiniteSampleError(ValidationError):

    def __init__(self, n_invalid: int):
        self.n_invalid = n_invalid
        super().__init__(f"Sample contains {n_invalid} NaN or infinite value(s)")


class DomainError(ClassificationError):
    """
    A statistic was asked for outside its mathematical domain
    (non-positive value in a harmonic/geometric mean, empty sample,
    zero spread where a division by the spread is needed).
    """

    def __init__(self, statistic: str, reason: Optional[str] = None):
        self.statistic = statistic
        self.reason = reason
        message = f"{statistic} is undefined for this sample"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
