class DomainError(Exception):
    """Base class for errors raised by repositories and services."""


class NotFoundError(DomainError):
    """A referenced entity does not exist."""


class ConflictError(DomainError):
    """A unique constraint would be violated (e.g. duplicate email)."""


class ValidationError(DomainError):
    """Input that is well-formed JSON but not acceptable to the store."""
