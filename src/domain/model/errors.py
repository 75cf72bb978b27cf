"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Route handlers catch them and map to appropriate HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates a business validation rule."""


class MissingFieldsError(ValidationError):
    """One or more required fields were absent or empty."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Missing required fields: {', '.join(fields)}")


class CapacityReachedError(DomainError):
    """Event has no free places left."""


class AuthenticationError(DomainError):
    """Credentials did not identify an active user."""


class InvalidTokenError(DomainError):
    """Session token is malformed, tampered with, or signed with another key."""


class ExpiredTokenError(InvalidTokenError):
    """Session token was valid but its expiry has passed."""


class NotificationDeliveryError(DomainError):
    """Outbound e-mail could not be delivered."""


class StorageError(DomainError):
    """The backing store failed, so absence of a document cannot be decided."""
