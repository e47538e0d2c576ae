"""Exception types raised by fuzzymetrics."""


class SimMetricsError(Exception):
    """Base exception for all fuzzymetrics errors."""


class ValidationError(SimMetricsError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class AlgorithmError(SimMetricsError):
    """Raised when an unknown or unsupported metric is specified."""


__all__ = ["SimMetricsError", "ValidationError", "AlgorithmError"]
