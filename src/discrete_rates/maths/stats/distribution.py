"""Densities, CDFs, quantiles and truncated first moments of the gamma and
beta distributions.

The gamma distribution is parameterised by shape alpha and rate beta, so its
mean is alpha / beta. The beta distribution has shapes a and b, mean
a / (a + b).
"""

import math
import sys

from statistics import NormalDist

from discrete_rates.maths.precision import get_precision
from discrete_rates.maths.solve import expand_bracket, invert
from discrete_rates.maths.stats.special import (
    ln_beta,
    regularized_incomplete_beta,
    regularized_lower_gamma,
)
from discrete_rates.maths.util import check_in_interval, check_positive


__copyright__ = "Copyright 2022-2026, The discrete_rates Project"
__license__ = "BSD-3"
__version__ = "2026.10.19"
__status__ = "Production"

_std_normal = NormalDist()
# largest argument math.exp accepts without overflow
_LOG_MAX = math.log(sys.float_info.max)


def _exp(value):
    # densities near a singular edge can exceed the float range
    return math.inf if value > _LOG_MAX else math.exp(value)


def _edge_density(exponent):
    # limit of x**exponent as x -> 0
    if exponent < 0:
        return math.inf
    return 1.0 if exponent == 0 else 0.0


def gamma_pdf(x, alpha, beta=1.0):
    """density of gamma(alpha, rate=beta) at x"""
    alpha = check_positive("alpha", alpha)
    beta = check_positive("beta", beta)
    x = float(x)
    if x < 0:
        return 0.0
    if x == 0:
        return beta * _edge_density(alpha - 1)
    if math.isinf(x):
        return 0.0
    y = beta * x
    return beta * _exp((alpha - 1) * math.log(y) - y - math.lgamma(alpha))


def gamma_cdf(x, alpha, beta=1.0, precision=None):
    """Prob(X <= x) for X ~ gamma(alpha, rate=beta)"""
    alpha = check_positive("alpha", alpha)
    beta = check_positive("beta", beta)
    x = float(x)
    if x <= 0:
        return 0.0
    return regularized_lower_gamma(alpha, beta * x, precision=precision)


def gamma_partial_mean(x, alpha, beta=1.0, precision=None):
    """E[X; X <= x] for X ~ gamma(alpha, rate=beta)

    Notes
    -----
    x * density(x; alpha) is proportional to density(x; alpha + 1), so the
    truncated first moment is (alpha / beta) P(alpha + 1, beta * x).
    """
    alpha = check_positive("alpha", alpha)
    beta = check_positive("beta", beta)
    return alpha / beta * gamma_cdf(x, alpha + 1, beta, precision=precision)


def _standard_gamma_quantile(p, shape, precision):
    def cdf(x):
        return regularized_lower_gamma(shape, x, precision=precision)

    def density(x):
        return gamma_pdf(x, shape)

    # P(shape, x) <= x**shape / Gamma(shape + 1), the inverse of the latter
    # is a lower bound on the quantile
    log_lower = (math.log(p) + math.lgamma(shape + 1)) / shape
    lower = math.exp(log_lower) if log_lower > precision.log_tiny else 0.0
    if cdf(lower) > p:
        lower = 0.0

    # Wilson-Hilferty approximation as the starting point
    d = 1.0 / (9.0 * shape)
    y = 1.0 - d + _std_normal.inv_cdf(p) * math.sqrt(d)
    x0 = shape * y**3 if y > 0 else lower
    x0 = max(x0, lower)

    lo, hi = expand_bracket(cdf, p, lower, max(2 * x0, shape, 1.0))
    return invert(cdf, density, p, lo, hi, x0=x0, precision=precision)


def gamma_quantile(p, alpha, beta=1.0, precision=None):
    """returns x such that Prob(X <= x) = p for X ~ gamma(alpha, rate=beta)"""
    alpha = check_positive("alpha", alpha)
    beta = check_positive("beta", beta)
    p = check_in_interval("p", p, 0.0, 1.0)
    if p == 0:
        return 0.0
    if p == 1:
        return math.inf
    precision = get_precision() if precision is None else precision
    return _standard_gamma_quantile(p, alpha, precision) / beta


def beta_pdf(x, a, b):
    """density of beta(a, b) at x"""
    a = check_positive("a", a)
    b = check_positive("b", b)
    x = float(x)
    if x < 0 or x > 1:
        return 0.0
    if x == 0:
        return _edge_density(a - 1) / math.exp(ln_beta(a, b))
    if x == 1:
        return _edge_density(b - 1) / math.exp(ln_beta(a, b))
    return _exp((a - 1) * math.log(x) + (b - 1) * math.log1p(-x) - ln_beta(a, b))


def beta_cdf(x, a, b, precision=None):
    """Prob(X <= x) for X ~ beta(a, b)"""
    x = float(x)
    if x <= 0:
        x = 0.0
    elif x >= 1:
        x = 1.0
    return regularized_incomplete_beta(x, a, b, precision=precision)


def beta_partial_mean(x, a, b, precision=None):
    """E[X; X <= x] for X ~ beta(a, b)

    Notes
    -----
    x * density(x; a, b) is proportional to density(x; a + 1, b), so the
    truncated first moment is a / (a + b) I_x(a + 1, b).
    """
    a = check_positive("a", a)
    b = check_positive("b", b)
    return a / (a + b) * beta_cdf(x, a + 1, b, precision=precision)


def beta_quantile(p, a, b, precision=None):
    """returns x such that Prob(X <= x) = p for X ~ beta(a, b)"""
    a = check_positive("a", a)
    b = check_positive("b", b)
    p = check_in_interval("p", p, 0.0, 1.0)
    if p == 0:
        return 0.0
    if p == 1:
        return 1.0
    precision = get_precision() if precision is None else precision

    def cdf(x):
        return regularized_incomplete_beta(x, a, b, precision=precision)

    def density(x):
        return beta_pdf(x, a, b)

    # leading terms of the two tails, x**a / (a B(a, b)) and
    # 1 - (1 - x)**b / (b B(a, b))
    mean = a / (a + b)
    lbeta = ln_beta(a, b)
    if p < 0.5:
        log_x = (math.log(p) + math.log(a) + lbeta) / a
        x0 = min(math.exp(min(log_x, 0.0)), mean)
    else:
        log_1mx = (math.log1p(-p) + math.log(b) + lbeta) / b
        x0 = max(-math.expm1(min(log_1mx, 0.0)), mean)

    return invert(cdf, density, p, 0.0, 1.0, x0=x0, precision=precision)
