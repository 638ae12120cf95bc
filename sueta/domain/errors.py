"""
Domain errors raised by the services.

These form a small closed set; the HTTP layer decides how each one is
rendered and never needs to look at storage exceptions.
"""

from typing import Mapping, Optional


class DomainError(Exception):
    """Base class for all service-level errors."""

    message = "domain error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationErrors(dict):
    """Field name -> reason map rendered as ``a: x; b: y.``"""

    def __str__(self) -> str:
        if not self:
            return ""
        parts = [f"{field}: {self[field]}" for field in sorted(self)]
        return "; ".join(parts) + "."


class ValidationFailed(DomainError):
    def __init__(self, errors: Mapping[str, str]):
        self.errors = ValidationErrors(errors)
        super().__init__(str(self.errors))


class PasswordsMismatch(DomainError):
    message = "passwords don't match"


class EmailTaken(DomainError):
    message = "email already taken"


class WrongPassword(DomainError):
    message = "wrong email or password"


class InvalidId(DomainError):
    message = "invalid uuid"


class NotFound(DomainError):
    message = "requested resource is not found"


class Internal(DomainError):
    """Unexpected failure; the cause is chained and logged, never rendered."""

    message = "internal server error"
