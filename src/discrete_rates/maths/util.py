"""Exceptions and argument checks shared by the numerical routines."""

import math
import operator


__copyright__ = "Copyright 2022-2026, The discrete_rates Project"
__license__ = "BSD-3"
__version__ = "2026.10.19"
__status__ = "Production"


class InvalidParameterError(ValueError):
    """a distribution parameter, category count or argument is out of domain"""


class ConvergenceError(RuntimeError):
    """a series or continued fraction did not converge within its cap"""


class RootNotBracketedError(ValueError):
    """the interval given to a root finder does not enclose the target"""


def check_positive(name, value):
    """returns value as a float, raising InvalidParameterError unless it is
    finite and > 0"""
    try:
        value = float(value)
    except (TypeError, ValueError) as err:
        raise InvalidParameterError(f"{name}={value!r} is not a number") from err

    if not (math.isfinite(value) and value > 0):
        raise InvalidParameterError(f"{name}={value} must be finite and > 0")
    return value


def check_in_interval(name, value, lower, upper):
    """returns value as a float, raising InvalidParameterError unless
    lower <= value <= upper"""
    try:
        value = float(value)
    except (TypeError, ValueError) as err:
        raise InvalidParameterError(f"{name}={value!r} is not a number") from err

    if not lower <= value <= upper:
        raise InvalidParameterError(f"{name}={value} not in [{lower}, {upper}]")
    return value


def check_num_categories(n):
    """returns n as an int, raising InvalidParameterError unless it is an
    integer >= 1"""
    try:
        n = operator.index(n)
    except TypeError as err:
        raise InvalidParameterError(f"number of categories {n!r} must be an int") from err

    if n < 1:
        raise InvalidParameterError(f"number of categories {n} must be >= 1")
    return n
