"""Exception hierarchy for fuzzystring."""


class FuzzyStringError(Exception):
    """Base exception for all fuzzystring errors."""


class ValidationError(FuzzyStringError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class AlgorithmError(FuzzyStringError, ValueError):
    """Raised when an unknown or unsupported algorithm is specified."""


__all__ = ["FuzzyStringError", "ValidationError", "AlgorithmError"]
