"""Discrete approximations to rate heterogeneity distributions."""

__all__ = ["categories"]
