"""Equal probability rate categories for gamma and beta distributions.

Each of n categories carries probability 1/n and is represented by a single
rate, either the median or the mean of the distribution restricted to the
category. Rates are scaled so their average is 1.0.
"""

import dataclasses
import math
import warnings

import numpy

from discrete_rates.maths.stats.distribution import (
    beta_cdf,
    beta_partial_mean,
    beta_quantile,
    gamma_cdf,
    gamma_partial_mean,
    gamma_quantile,
)
from discrete_rates.maths.util import check_num_categories, check_positive


__copyright__ = "Copyright 2022-2026, The discrete_rates Project"
__license__ = "BSD-3"
__version__ = "2026.10.19"
__status__ = "Production"


@dataclasses.dataclass(frozen=True)
class Gamma:
    """gamma distribution with shape alpha and rate beta

    If beta is not provided it is set to alpha, so the mean is 1.
    """

    alpha: float
    beta: float | None = None

    def __post_init__(self):
        alpha = check_positive("alpha", self.alpha)
        beta = alpha if self.beta is None else check_positive("beta", self.beta)
        object.__setattr__(self, "alpha", alpha)
        object.__setattr__(self, "beta", beta)

    @property
    def support(self) -> tuple[float, float]:
        return 0.0, math.inf

    @property
    def mean(self) -> float:
        return self.alpha / self.beta

    def cdf(self, x: float) -> float:
        return gamma_cdf(x, self.alpha, self.beta)

    def quantile(self, p: float) -> float:
        return gamma_quantile(p, self.alpha, self.beta)

    def partial_mean(self, x: float) -> float:
        """E[X; X <= x]"""
        if math.isinf(x):
            return self.mean
        return gamma_partial_mean(x, self.alpha, self.beta)


@dataclasses.dataclass(frozen=True)
class Beta:
    """beta distribution with shapes a and b"""

    a: float
    b: float

    def __post_init__(self):
        object.__setattr__(self, "a", check_positive("a", self.a))
        object.__setattr__(self, "b", check_positive("b", self.b))

    @property
    def support(self) -> tuple[float, float]:
        return 0.0, 1.0

    @property
    def mean(self) -> float:
        return self.a / (self.a + self.b)

    def cdf(self, x: float) -> float:
        return beta_cdf(x, self.a, self.b)

    def quantile(self, p: float) -> float:
        return beta_quantile(p, self.a, self.b)

    def partial_mean(self, x: float) -> float:
        """E[X; X <= x]"""
        return beta_partial_mean(x, self.a, self.b)


@dataclasses.dataclass(frozen=True, eq=False)
class DiscreteRates:
    """result of discretising a rate distribution

    Attributes
    ----------
    rates
        one rate per category, their average is 1.0
    values
        the category representatives before scaling, medians or means on
        the scale of the distribution
    cutpoints
        the n - 1 interior category boundaries, on the scale of the
        distribution
    distribution
        the discretised distribution
    median
        whether rates are category medians (True) or means (False)
    """

    rates: numpy.ndarray
    values: numpy.ndarray
    cutpoints: numpy.ndarray
    distribution: Gamma | Beta
    median: bool

    @property
    def num_categories(self) -> int:
        return len(self.rates)

    @property
    def probs(self) -> numpy.ndarray:
        """the probability of each category"""
        return numpy.full(self.num_categories, 1.0 / self.num_categories)

    @property
    def bounds(self) -> numpy.ndarray:
        """the n + 1 category edges, bounds[i] and bounds[i + 1] enclose
        category i"""
        lower, upper = self.distribution.support
        return numpy.concatenate(([lower], self.cutpoints, [upper]))

    def scaled_rates(self) -> numpy.ndarray:
        """rates on the PAML scale

        Category means are returned as computed. Medians are scaled so they
        average the distribution mean.
        """
        if self.median:
            return self.rates * self.distribution.mean
        return self.values.copy()


def _category_medians(distribution, n):
    percentiles = (2 * numpy.arange(1, n + 1) - 1) / (2 * n)
    return numpy.array([distribution.quantile(p) for p in percentiles])


def _category_means(distribution, cutpoints, n):
    # n * (E[X; X <= c_i] - E[X; X <= c_{i-1}]), the edges contributing 0
    # and the full mean
    partial = [distribution.partial_mean(c) for c in cutpoints]
    partial = numpy.array([0.0] + partial + [distribution.mean])
    return n * numpy.diff(partial)


def _replace_out_of_bounds(distribution, values, bounds, n):
    """category means lost to cancellation are replaced by the category
    median, or the centre of the category if that also fails"""
    lower = bounds[:-1]
    upper = bounds[1:]
    outside = numpy.flatnonzero((values < lower) | (values > upper))
    if not len(outside):
        return values

    values = values.copy()
    for i in outside:
        value = distribution.quantile((i + 0.5) / n)
        if not lower[i] <= value <= upper[i] and math.isfinite(upper[i]):
            value = 0.5 * (lower[i] + upper[i])
        values[i] = value

    warnings.warn(
        f"means of categories {outside.tolist()} of {distribution} fell "
        "outside their bounds and were replaced",
        RuntimeWarning,
    )
    return values


def discretize(distribution: Gamma | Beta, n: int, median: bool = False) -> DiscreteRates:
    """divides distribution into n equal probability categories

    Parameters
    ----------
    distribution
        a Gamma or Beta instance
    n
        number of categories, >= 1
    median
        if True, each category is represented by its median, otherwise by
        its mean

    Returns
    -------
    DiscreteRates whose rates average to 1.0

    Notes
    -----
    Cutpoints increase strictly only while adjacent quantiles are
    distinguishable in float64. For extreme shapes, such as
    Beta(0.005, 0.005) with n = 10, the upper cutpoints can repeat or equal
    1.0 exactly.
    """
    if not isinstance(distribution, (Gamma, Beta)):
        raise TypeError(f"cannot discretise {type(distribution)}, use Gamma or Beta")
    n = check_num_categories(n)
    median = bool(median)

    if n == 1:
        if median:
            values = _category_medians(distribution, 1)
        else:
            values = numpy.array([distribution.mean])
        return DiscreteRates(
            rates=numpy.ones(1),
            values=values,
            cutpoints=numpy.empty(0),
            distribution=distribution,
            median=median,
        )

    cutpoints = numpy.array([distribution.quantile(k / n) for k in range(1, n)])
    if median:
        values = _category_medians(distribution, n)
    else:
        values = _category_means(distribution, cutpoints, n)
        lower, upper = distribution.support
        bounds = numpy.concatenate(([lower], cutpoints, [upper]))
        values = _replace_out_of_bounds(distribution, values, bounds, n)

    weights = numpy.full(n, 1.0 / n)
    scale = numpy.sum(values * weights)
    return DiscreteRates(
        rates=values / scale,
        values=values,
        cutpoints=cutpoints,
        distribution=distribution,
        median=median,
    )


def discrete_gamma_rates(
    alpha: float, beta: float, n: int, median: bool = False
) -> tuple[numpy.ndarray, numpy.ndarray]:
    """rates and cutpoints for n equal probability categories of
    gamma(alpha, rate=beta)

    The rates do not depend on beta as they are scaled to average 1.0,
    the n - 1 cutpoints are on the gamma(alpha, rate=beta) scale.
    """
    result = discretize(Gamma(alpha, beta), n, median=median)
    return result.rates, result.cutpoints


def discrete_beta_rates(
    a: float, b: float, n: int, median: bool = False
) -> tuple[numpy.ndarray, numpy.ndarray]:
    """rates and cutpoints for n equal probability categories of beta(a, b)

    The rates are scaled to average 1.0, the n - 1 cutpoints lie in [0, 1].
    """
    result = discretize(Beta(a, b), n, median=median)
    return result.rates, result.cutpoints
