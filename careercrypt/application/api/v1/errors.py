"""Centralized error transformation for API routes.

Maps CareerCrypt errors (domain and infrastructure) to HTTP responses.
"""

from typing import Any

from fastapi import HTTPException

from careercrypt.domain.shared.error import (
    AuthorizationError,
    CareerCryptError,
    DomainError,
    InfrastructureError,
    InvalidStateError,
    NotFoundError,
    OrphanedRecordError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    InvalidStateError: 409,
    AuthorizationError: 403,
}


def map_error(error: CareerCryptError) -> HTTPException:
    """Map a CareerCrypt error to an HTTPException."""
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        if isinstance(error, OrphanedRecordError):
            detail["portfolio_id"] = error.portfolio_id
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = next(
            (code for cls, code in DOMAIN_ERROR_STATUS_MAP.items() if isinstance(error, cls)),
            400,
        )
        # Distinguish 401 (no wallet) from 403 (wrong wallet)
        if isinstance(error, AuthorizationError) and error.code == "missing_wallet":
            return HTTPException(status_code=401, detail=detail)
        return HTTPException(status_code=status_code, detail=detail)

    return HTTPException(status_code=500, detail=detail)
