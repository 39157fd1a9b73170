import pytest

from discrete_rates.maths.precision import get_precision


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long running parameter sweeps")


@pytest.fixture(scope="session")
def eps() -> float:
    return get_precision().epsilon


@pytest.fixture
def LOG_DIR(tmp_path):
    """makes a temporary directory for log files"""
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    return log_dir
