"""Interface layer errors.

Maps domain errors onto HTTP responses.
"""

from fastapi import HTTPException, status

from forum.domain.error import (
    ConflictError,
    DomainError,
    MissingReferenceError,
    NotFoundError,
    UnknownCursorError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Build the HTTP error for a domain error.

    Not found, missing references and unknown cursors are 404, conflicts
    (including invalid parents) are 409, anything else is a 500.
    """
    if isinstance(error, (NotFoundError, MissingReferenceError, UnknownCursorError)):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ConflictError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(error))
