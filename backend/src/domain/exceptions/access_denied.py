"""
AccessDeniedError - Raised when the actor is authenticated but not allowed to
act on the resource (non-participant, non-admin on an admin path).
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    """Raised when user lacks permission to access a resource"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
