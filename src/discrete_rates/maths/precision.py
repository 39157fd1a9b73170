"""Machine constants used as convergence and underflow thresholds."""

import dataclasses
import functools
import math
import threading

import numpy


__copyright__ = "Copyright 2022-2026, The discrete_rates Project"
__license__ = "BSD-3"
__version__ = "2026.10.19"
__status__ = "Production"


@dataclasses.dataclass(frozen=True)
class Precision:
    """floating point limits for a numeric type

    Attributes
    ----------
    epsilon
        radix ** -mantissa_digits, the relative rounding unit
    log_epsilon
        natural log of epsilon
    tiny
        smallest positive normalised value
    log_tiny
        natural log of tiny
    """

    epsilon: float
    log_epsilon: float
    tiny: float
    log_tiny: float

    def __post_init__(self):
        if not 0 < self.tiny < self.epsilon < 1:
            raise ValueError(f"inconsistent limits tiny={self.tiny} eps={self.epsilon}")


def make_precision(dtype=numpy.float64) -> Precision:
    """returns the Precision of a numpy floating point type"""
    info = numpy.finfo(dtype)
    # binary radix, nmant excludes the implicit leading bit
    epsilon = 2.0 ** -(info.nmant + 1)
    tiny = float(info.tiny)
    return Precision(
        epsilon=epsilon,
        log_epsilon=math.log(epsilon),
        tiny=tiny,
        log_tiny=math.log(tiny),
    )


_lock = threading.Lock()


@functools.cache
def _machine_precision() -> Precision:
    return make_precision(numpy.float64)


def get_precision() -> Precision:
    """the process wide Precision for float64, computed on first use"""
    if _machine_precision.cache_info().currsize:
        return _machine_precision()
    with _lock:
        return _machine_precision()
