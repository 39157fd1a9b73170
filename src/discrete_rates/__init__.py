"""Equal probability discretisation of gamma and beta rate distributions,
for modelling rate heterogeneity among sites in sequence evolution."""

import logging

from discrete_rates.evolve.categories import (
    Beta,
    DiscreteRates,
    Gamma,
    discrete_beta_rates,
    discrete_gamma_rates,
    discretize,
)
from discrete_rates.maths.precision import Precision, get_precision
from discrete_rates.maths.util import (
    ConvergenceError,
    InvalidParameterError,
    RootNotBracketedError,
)


__copyright__ = "Copyright 2022-2026, The discrete_rates Project"
__license__ = "BSD-3"
__version__ = "2026.10.19"
__status__ = "Production"

__all__ = [
    "Beta",
    "ConvergenceError",
    "DiscreteRates",
    "Gamma",
    "InvalidParameterError",
    "Precision",
    "RootNotBracketedError",
    "discrete_beta_rates",
    "discrete_gamma_rates",
    "discretize",
    "get_precision",
]

__numba_logger = logging.getLogger("numba")
__numba_logger.setLevel(logging.WARNING)
