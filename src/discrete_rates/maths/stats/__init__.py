"""Provides the incomplete gamma and beta integrals and the gamma and beta
distributions built on them.
"""

__all__ = ["distribution", "special"]
