"""Numerical routines: machine limits, root finding and special functions."""

__all__ = ["precision", "solve", "stats", "util"]
