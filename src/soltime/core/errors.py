class SoltimeError(Exception):
    """Base error."""

class UnknownCalculatorError(SoltimeError, KeyError):
    """Raised when a calculator name is not registered."""
