import math
import warnings

from discrete_rates.maths.precision import get_precision
from discrete_rates.maths.util import RootNotBracketedError


__copyright__ = "Copyright 2022-2026, The discrete_rates Project"
__license__ = "BSD-3"
__version__ = "2026.10.19"
__status__ = "Production"

MAXITER = 400


def _bisect(lo, hi, floor):
    """splitting point of [lo, hi]

    Non-negative brackets spanning more than a factor of 4 are split at their
    geometric mean, a zero lower end being replaced by floor.
    """
    base = max(lo, floor)
    if lo >= 0 and hi > 4 * base:
        return math.sqrt(base) * math.sqrt(hi)
    return lo + 0.5 * (hi - lo)


def expand_bracket(cdf, target, lo, hi, factor=2.0, maxiter=MAXITER):
    """grows hi geometrically until cdf(hi) >= target

    Parameters
    ----------
    cdf
        monotone non-decreasing function
    target
        the value to enclose
    lo, hi
        starting interval, hi > 0 and cdf(lo) <= target
    factor
        multiplier applied to hi at each step

    Returns
    -------
    (lo, hi) with cdf(lo) <= target <= cdf(hi)
    """
    if cdf(lo) > target:
        raise RootNotBracketedError(f"cdf({lo}) > {target}")

    for _ in range(maxiter):
        if cdf(hi) >= target:
            return lo, hi
        lo = hi
        hi *= factor
        if math.isinf(hi):
            break

    raise RootNotBracketedError(f"could not find an upper bound for {target}")


def invert(cdf, density, target, lo, hi, x0=None, maxiter=MAXITER, precision=None):
    """returns x in [lo, hi] such that cdf(x) is approximately target

    Parameters
    ----------
    cdf
        monotone non-decreasing function on [lo, hi]
    density
        derivative of cdf, or None. Used for Newton steps.
    target
        probability to invert
    lo, hi
        interval with cdf(lo) <= target <= cdf(hi)
    x0
        starting point, defaults to a bisection point of [lo, hi]
    maxiter
        maximum number of cdf evaluations inside the interval
    precision
        a Precision instance, defaults to the float64 limits

    Notes
    -----
    A Newton step is used when the density is positive and the step lands
    strictly inside the current interval, otherwise the interval is bisected.
    Once a Newton step fails to halve the error only bisection is used.
    """
    precision = get_precision() if precision is None else precision
    eps = precision.epsilon
    if hi < lo:
        (lo, hi) = (hi, lo)

    f_lo = cdf(lo) - target
    f_hi = cdf(hi) - target
    if f_lo > 0 or f_hi < 0:
        raise RootNotBracketedError(
            f"target {target} not within [cdf({lo}), cdf({hi})] = "
            f"[{f_lo + target}, {f_hi + target}]"
        )
    if f_lo == 0:
        return lo
    if f_hi == 0:
        return hi

    ftol = 2 * eps * min(target, 1 - target)
    xtol = 4 * eps
    x = _bisect(lo, hi, precision.tiny) if x0 is None or not lo < x0 < hi else x0
    (best, f_best) = (lo, f_lo) if -f_lo < f_hi else (hi, f_hi)
    use_newton = density is not None
    f_prev = None
    for _ in range(maxiter):
        f = cdf(x) - target
        if abs(f) <= abs(f_best):
            (best, f_best) = (x, f)
        if abs(f) <= ftol:
            return x

        if f_prev is not None and abs(f) > 0.5 * abs(f_prev):
            # newton is not converging, leave it to bisection
            use_newton = False

        if f < 0:
            lo = x
        else:
            hi = x

        if hi - lo <= xtol * max(abs(lo), abs(hi), precision.tiny):
            return best

        f_prev = None
        if use_newton:
            slope = density(x)
            if 0 < slope < math.inf:
                step = x - f / slope
                if lo < step < hi:
                    (x, f_prev) = (step, f)
                    continue

        x = _bisect(lo, hi, precision.tiny)

    warnings.warn(
        f"inverting for {target} stopped after {maxiter} iterations with "
        f"error {f_best}",
        RuntimeWarning,
    )
    return best
