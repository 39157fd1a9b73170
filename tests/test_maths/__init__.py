__all__ = [
    "test_checks",
    "test_precision",
    "test_solve",
    "test_stats",
]

__copyright__ = "Copyright 2022-2026, The discrete_rates Project"
__license__ = "BSD-3"
__version__ = "2026.10.19"
__status__ = "Production"
