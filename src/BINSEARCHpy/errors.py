class InvalidInputError(ValueError):
    """Raised when the sequence cannot be searched at all (fewer than 2 values, not 1-D)."""


class NotSortedError(ValueError):
    """Raised when an ordering check finds a decreasing step in the sequence."""
