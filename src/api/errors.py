"""
Error mapping - Domain error kinds to HTTP responses.

The only place that knows which status code each ErrorKind gets.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.exceptions import (
    ErrorKind,
    InvalidRegistration,
    RegistrationError,
    UsernameOrEmailTaken,
)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.PERSISTENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(exc: RegistrationError) -> JSONResponse:
    """Build the {"errors": ...} response for a domain error."""
    if isinstance(exc, InvalidRegistration):
        body: object = exc.errors
    elif isinstance(exc, UsernameOrEmailTaken):
        body = exc.message
    else:
        # Store failures are reported generically; details stay in the logs
        body = INTERNAL_ERROR_MESSAGE
    return JSONResponse(status_code=STATUS_BY_KIND[exc.kind], content={"errors": body})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Report request parsing failures (e.g. malformed JSON) as 400.

    Keeps the error shape consistent with InvalidRegistration.
    """
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"])
        errors.setdefault(path, []).append(error["msg"])
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})
