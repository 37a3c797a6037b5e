"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by the
presentation layer, which maps them to HTTP status codes.

Delivery problems (live push, e-mail) are never raised: they are logged where
they happen.
"""

from src.domain.exceptions.entity_not_found import EntityNotFoundError
from src.domain.exceptions.access_denied import AccessDeniedError
from src.domain.exceptions.validation_error import DomainValidationError
from src.domain.exceptions.authentication_failed import AuthenticationError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "AuthenticationError",
]
