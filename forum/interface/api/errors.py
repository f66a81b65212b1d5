"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from forum.domain.error import (
    AuthRequiredError,
    DataIntegrityError,
    DomainError,
    DuplicateVoteError,
    NotFoundError,
    ValidationError,
)

GENERIC_FAILURE = "Something went wrong, please try again later"

# Starlette has renamed its 422 constant
UNPROCESSABLE = 422


def http_error(error: DomainError, action: str) -> HTTPException:
    """Map a domain error raised while performing action to an HTTPException.

    Client errors keep their message; integrity and unexpected failures are
    logged and reported with a generic message.
    """
    if isinstance(error, ValidationError):
        logfire.warn(
            f"{action} rejected", field=error.field, reason=error.message
        )
        return HTTPException(
            status_code=UNPROCESSABLE,
            detail={"field": error.field, "message": error.message},
        )
    if isinstance(error, AuthRequiredError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )
    if isinstance(error, NotFoundError):
        logfire.warn(f"{action} failed - not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, DuplicateVoteError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, DataIntegrityError):
        logfire.error(f"{action} failed - data integrity", error=str(error))
    else:
        logfire.error(f"Unexpected error during {action}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=GENERIC_FAILURE
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters like a ValidationError.

    Only the first problem is reported, keyed by the innermost field name.
    """
    errors = exc.errors()
    first = errors[0] if errors else {"loc": ("body",), "msg": "Invalid request"}
    loc = first.get("loc") or ("body",)
    field = str(loc[-1])
    message = str(first.get("msg", "Invalid request"))

    logfire.warn(
        "Request rejected",
        method=request.method,
        path=request.url.path,
        field=field,
        reason=message,
    )
    return JSONResponse(
        status_code=UNPROCESSABLE,
        content={"detail": {"field": field, "message": message}},
    )
