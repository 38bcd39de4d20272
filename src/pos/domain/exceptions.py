"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
None of them leave a Cart in a modified state.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidAmount(ValidationError):
    """A numeric input was malformed, negative, or out of range."""


class EmptyCart(ValidationError):
    """Checkout was attempted on a cart with no lines."""


class InsufficientPayment(ValidationError):
    """The tendered amount is below the transaction total."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class LineNotFound(EntityNotFoundError):
    """An operation referenced a product that is not in the cart."""


class CommitFailed(DomainException):
    """The persistence collaborator rejected a transaction.

    ``reason`` carries the collaborator's own message.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Transaction commit failed: {reason}")
        self.reason = reason


class SettingsUnavailable(DomainException):
    """The settings collaborator could not supply a value."""
