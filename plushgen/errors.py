"""
PlushGen Errors

Exception types raised by the genome generator. Both concrete errors also
derive from the matching builtin so callers catching ValueError or
RuntimeError keep working.
"""

import numbers


class PlushGenError(Exception):
    """Base class for all PlushGen errors."""


class InvalidArgument(PlushGenError, ValueError):
    """Raised for malformed sizes, empty pools, or invalid configuration."""


class MalformedGenerator(PlushGenError, RuntimeError):
    """Raised when an atom generator does not resolve to a concrete atom."""


def check_integer(value, name: str) -> int:
    """
    Return value as an int, rejecting floats, bools and other non-integers.

    Raises:
        InvalidArgument: If value is not an integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    return int(value)
