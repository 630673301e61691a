"""Interface layer errors and domain error mapping."""

import logfire
from fastapi import HTTPException, status

from forum.domain.error import (
    ConflictError,
    DomainError,
    NotFoundError,
    StorageError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class ReactionUnavailableError(InterfaceError):
    """Raised when a reaction could not be stored because the store failed.

    Rendered as ``{"success": false, ...}`` with status 503.
    """

    pass


_STATUS_CODES: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_exception(error: DomainError, operation: str) -> HTTPException:
    """Convert a domain error into the HTTPException to raise from a route.

    Args:
        error: Domain error raised by a use case
        operation: Route operation name, for logging

    Returns:
        HTTPException with the mapped status code
    """
    status_code = next(
        (code for cls, code in _STATUS_CODES.items() if isinstance(error, cls)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code >= 500:
        logfire.error(f"{operation} failed", error=str(error), status=status_code)
    else:
        logfire.warn(f"{operation} rejected", error=str(error), status=status_code)
    return HTTPException(status_code=status_code, detail=str(error))
