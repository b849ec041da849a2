"""Domain errors for Renovator."""


class RenovatorError(RuntimeError):
    """Raised when the container run cannot continue safely."""
