"""Translation of validation errors into structured HTTP 400 responses."""

from fastapi import HTTPException, status

from catalog_api.domain.exceptions import DuplicateNameError, ValidationFailedError


def bad_request(exc: ValidationFailedError) -> HTTPException:
    """``{"message": ..., "errors": [...]}`` plus ``duplicates`` for name clashes."""
    detail: dict = {"message": exc.message, "errors": exc.errors}
    if isinstance(exc, DuplicateNameError):
        detail["duplicates"] = exc.duplicates
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
