import numpy
import pytest

from click.testing import CliRunner
from numpy.testing import assert_allclose

from discrete_rates.cli import main


__copyright__ = "Copyright 2022-2026, The discrete_rates Project"
__license__ = "BSD-3"
__version__ = "2026.10.19"
__status__ = "Production"


@pytest.fixture
def runner():
    return CliRunner()


def _parse(output):
    """returns the rates and cutpoints lines as arrays"""
    got = {}
    for line in output.splitlines():
        label, _, values = line.partition(":")
        got[label] = numpy.array([float(v) for v in values.split()])
    return got["rates"], got["cutpoints"]


def test_gamma(runner):
    result = runner.invoke(main, ["gamma", "--alpha", "0.5", "-n", "4"])
    assert result.exit_code == 0, result.output
    rates, cutpoints = _parse(result.output)
    assert rates.shape == (4,)
    assert cutpoints.shape == (3,)
    assert_allclose(rates.mean(), 1.0, atol=1e-6)


def test_gamma_scaled(runner):
    """scaled rates average the distribution mean"""
    args = ["gamma", "--alpha", "0.5", "--beta", "10", "-n", "4", "--scaled"]
    result = runner.invoke(main, args)
    assert result.exit_code == 0, result.output
    rates, _ = _parse(result.output)
    assert_allclose(rates, [0.001669, 0.012596, 0.041013, 0.144721], atol=2e-6)


def test_beta_median(runner):
    args = ["beta", "-a", "1.16", "-b", "3.54", "--ncat", "4", "--median", "--scaled"]
    result = runner.invoke(main, args)
    assert result.exit_code == 0, result.output
    rates, cutpoints = _parse(result.output)
    assert_allclose(rates, [0.053942, 0.156970, 0.284438, 0.491883], atol=2e-6)
    assert numpy.all((0 < cutpoints) & (cutpoints < 1))


def test_single_category(runner):
    result = runner.invoke(main, ["beta", "-n", "1"])
    assert result.exit_code == 0, result.output
    rates, cutpoints = _parse(result.output)
    assert_allclose(rates, [1.0])
    assert cutpoints.shape == (0,)


@pytest.mark.parametrize(
    "args",
    (
        ["gamma", "--alpha", "-1"],
        ["gamma", "--beta", "0"],
        ["beta", "-a", "0"],
        ["beta", "-n", "0"],
        ["gamma", "-n", "two"],
    ),
)
def test_invalid(runner, args):
    """bad parameters give a usage error"""
    result = runner.invoke(main, args)
    assert result.exit_code == 2
    assert "Invalid value" in result.output


def test_logfile(runner, LOG_DIR):
    """a log of the run is written when requested"""
    logfile = LOG_DIR / "gamma.log"
    args = ["gamma", "--alpha", "2", "-n", "3", "--logfile", str(logfile)]
    result = runner.invoke(main, args)
    assert result.exit_code == 0, result.output
    text = logfile.read_text()
    for expect in ("rates", "cutpoints", "numpy"):
        assert expect in text


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "2026.10.19" in result.output
