"""
DomainValidationError - Raised for missing required input, enum violations and
broken business rules (e.g. no distinct recipient in a thread).
Maps to: HTTP 400 Bad Request
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field
