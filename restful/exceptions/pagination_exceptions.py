"""Exceptions raised while guarding pageable endpoints."""


class ConfigurationError(Exception):
    """Endpoint wiring defect detected while handling a request (500).

    Raised when a pageable endpoint cannot be validated because of how it was
    declared, never because of what the client sent.
    """

    def __init__(self, message: str, handler: str | None = None):
        """Initialize configuration error.

        Args:
            message: Error message for operators
            handler: Qualified name of the misconfigured handler
        """
        self.handler = handler
        super().__init__(message)


class InvalidInputError(Exception):
    """Client supplied a paging value outside the allowed bounds (400)."""

    def __init__(self, field: str, message: str):
        """Initialize invalid input error.

        Args:
            field: Name of the offending query parameter
            message: Error message naming the violated constraint
        """
        self.field = field
        super().__init__(message)
