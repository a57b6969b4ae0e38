"""Base exception classes for the spanclock domain layer."""


class SpanClockError(Exception):
    """Base exception for all spanclock errors.

    All package-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the layers.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
