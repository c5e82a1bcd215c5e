"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or out of range (empty order, bad payment, ...)."""


class NotFoundError(DomainException):
    """A referenced product, order, status or user does not exist."""


class ConflictError(DomainException):
    """Reserved for concurrent-update detection; nothing raises it yet."""
