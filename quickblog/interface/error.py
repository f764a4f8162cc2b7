"""HTTP error shapes.

Every error leaves the API as ``{"error": "<message>"}``, whether it was
raised by a route, by request validation, or by the framework itself
(unknown path, wrong method).
"""

from typing import Any, Mapping, Sequence

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quickblog.interface.api.cors import CORS_HEADERS


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error response in the API's error shape."""
    return JSONResponse(status_code=status_code, content={"error": message})


def first_error_message(errors: Sequence[Mapping[str, Any]]) -> str:
    """Reader-facing message for the first of a list of pydantic errors.

    Args:
        errors: Output of ``ValidationError.errors()`` (or the request
            validation equivalent)

    Returns:
        The error text without pydantic's "Value error, " prefix
    """
    if not errors:
        return "Invalid request"
    message = str(errors[0].get("msg") or "Invalid request")
    return message.removeprefix("Value error, ")


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = first_error_message(exc.errors())
    logfire.warn("Malformed request", path=request.url.path, error=message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Runs outside the HTTP middleware stack, so CORS headers are set here
    logfire.error("Unhandled error", path=request.url.path, error=str(exc))
    response = error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )
    response.headers.update(CORS_HEADERS)
    return response


def register_error_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on the app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
