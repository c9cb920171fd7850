"""Domain errors."""


class ValidationError(ValueError):
    """Raised when user input is rejected before any state changes."""
