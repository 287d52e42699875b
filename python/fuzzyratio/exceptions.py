"""Exception hierarchy for fuzzyratio."""


class FuzzyRatioError(Exception):
    """Base exception for all fuzzyratio errors."""


class ValidationError(FuzzyRatioError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class ScorerError(FuzzyRatioError, ValueError):
    """Raised when an unknown or unsupported scorer is specified."""


__all__ = ["FuzzyRatioError", "ValidationError", "ScorerError"]
