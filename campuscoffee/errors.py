"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
DUPLICATE_RESOURCE = "DUPLICATE_RESOURCE"
VALIDATION_ERROR = "VALIDATION_ERROR"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class PosNotFoundError(NotFoundError):
    """Raised when no POS matches the identifying criterion of a lookup or update."""

    pass


class DuplicateResourceError(DomainError):
    """Raised when attempting to store a resource whose identifier is already taken."""

    pass


class DomainValidationError(DomainError):
    """Raised when input fails domain validation (e.g. missing required fields, unknown enum values).

    ``field_errors`` maps each offending field to a human-readable message.
    """

    def __init__(self, message: str, field_errors: dict[str, str] | None = None):
        super().__init__(message)
        self.field_errors = field_errors or {}
