class DomainError(Exception):
    """Base exception for HR record errors."""


class ValidationError(DomainError):
    """Raised when a required input is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when a record id is absent from its collection."""


class StorageError(DomainError):
    """Raised when a collection file cannot be written."""


class RemoteApiError(DomainError):
    """Raised when the external API fails and no local fallback is available."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
