"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CheckoutInProgressError(DomainException):
    """A payment is already outstanding for this checkout."""


class AccessDeniedError(DomainException):
    """The admin passcode did not match."""


class AssistantUnavailableError(DomainException):
    """The hosted language model could not produce a usable answer."""
