"""Translation of domain errors into HTTP errors."""

from typing import NoReturn

from fastapi import HTTPException, status

from teamboard.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotFoundError,
    ValidationError,
)


def raise_http_error(error: DomainError) -> NoReturn:
    """Re-raise a domain error as the matching HTTP error.

    Args:
        error: Domain error raised by a use case

    Raises:
        HTTPException: Always
    """
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, BusinessRuleViolationError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(error, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    raise HTTPException(status_code=code, detail=str(error)) from error
