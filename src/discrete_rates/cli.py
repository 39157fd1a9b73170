"""Command line access to discrete gamma and beta rate categories."""

import click
import numpy

from scitrack import CachingLogger

from discrete_rates.evolve.categories import Beta, Gamma, discretize
from discrete_rates.maths.util import InvalidParameterError


__copyright__ = "Copyright 2022-2026, The discrete_rates Project"
__license__ = "BSD-3"
__version__ = "2026.10.19"
__status__ = "Production"


def _format(values):
    return " ".join(f"{v:.6f}" for v in values)


def _report(distribution, ncat, median, scaled, logfile):
    try:
        result = discretize(distribution, ncat, median=median)
    except InvalidParameterError as err:
        raise click.BadParameter(str(err)) from err

    rates = result.scaled_rates() if scaled else result.rates
    click.echo(f"rates: {_format(rates)}")
    click.echo(f"cutpoints: {_format(result.cutpoints)}")

    if logfile is None:
        return

    logger = CachingLogger(create_dir=True)
    logger.log_file_path = str(logfile)
    logger.log_args(
        dict(distribution=distribution, ncat=ncat, median=median, scaled=scaled)
    )
    logger.log_versions(["discrete_rates", "numpy", "numba"])
    for label, values in (("rates", rates), ("cutpoints", result.cutpoints)):
        logger.log_message(numpy.array2string(values, precision=17), label=label)
    logger.shutdown()


_ncat = click.option(
    "-n",
    "--ncat",
    type=click.IntRange(min=1),
    default=4,
    show_default=True,
    help="number of categories",
)
_median = click.option(
    "--median",
    is_flag=True,
    help="use category medians instead of means",
)
_scaled = click.option(
    "--scaled",
    is_flag=True,
    help="scale rates to the distribution mean rather than 1",
)
_logfile = click.option(
    "--logfile", type=click.Path(dir_okay=False), help="record the run to this file"
)


@click.group()
@click.version_option(__version__)
def main():
    """equal probability rate categories for gamma and beta distributions"""


@main.command()
@click.option("--alpha", type=float, default=1.0, show_default=True, help="shape")
@click.option("--beta", type=float, default=None, help="rate, defaults to alpha")
@_ncat
@_median
@_scaled
@_logfile
def gamma(alpha, beta, ncat, median, scaled, logfile):
    """discretise gamma(alpha, rate=beta)"""
    try:
        dist = Gamma(alpha, beta)
    except InvalidParameterError as err:
        raise click.BadParameter(str(err)) from err
    _report(dist, ncat, median, scaled, logfile)


@main.command()
@click.option("-a", type=float, default=1.0, show_default=True, help="first shape")
@click.option("-b", type=float, default=1.0, show_default=True, help="second shape")
@_ncat
@_median
@_scaled
@_logfile
def beta(a, b, ncat, median, scaled, logfile):
    """discretise beta(a, b)"""
    try:
        dist = Beta(a, b)
    except InvalidParameterError as err:
        raise click.BadParameter(str(err)) from err
    _report(dist, ncat, median, scaled, logfile)


if __name__ == "__main__":
    main()
