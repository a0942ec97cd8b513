"""Diagnostics package.

- error_plot: table error against exact sin/atan2 (requires matplotlib)
- triangular_fit: goodness-of-fit of random_triangular samples (requires scipy)
"""

__all__ = ["error_plot", "triangular_fit"]
