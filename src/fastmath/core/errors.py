class FastMathError(Exception):
    """Base error."""

class TableConfigError(FastMathError, ValueError):
    """Raised when a lookup table is built with an unsupported size."""
