"""Domain errors."""


class ValidationError(ValueError):
    """Raised when an entity is constructed or mutated with invalid input."""
