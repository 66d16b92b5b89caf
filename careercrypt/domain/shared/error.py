"""Error hierarchy for CareerCrypt.

Error layers:
- CareerCryptError: Base class for all CareerCrypt errors
- DomainError: Business rule violations and missing records (4xx responses)
- InfrastructureError: Ledger/network failures and misconfiguration (503 responses)

These errors are mapped to HTTP responses by ``application/api/v1/errors.py``.
"""


class CareerCryptError(Exception):
    """Base class for all CareerCrypt errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(CareerCryptError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""


class InvalidTransitionError(InvalidStateError):
    """Status change attempted from a terminal state or to an undefined target."""


class AuthorizationError(DomainError):
    """Acting wallet not authorized for this operation."""


class DecodeError(DomainError):
    """A ledger blob is present but is not a valid encoding.

    Raised by the payload codec only. The storage services convert it to
    "absent" so a corrupt entry never reaches callers.
    """


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(CareerCryptError):
    """Base class for infrastructure/system errors."""


class LedgerUnavailableError(InfrastructureError):
    """A ledger read or write failed. Never retried automatically."""


class OrphanedRecordError(InfrastructureError):
    """A portfolio was written but could not be added to the index.

    The record exists on the ledger but is unreachable through listing until
    it is reconciled back into the index.
    """

    def __init__(self, message: str, portfolio_id: str) -> None:
        super().__init__(message, code="portfolio_orphaned")
        self.portfolio_id = portfolio_id


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
