"""
Exception handlers for the FastAPI application.

Every error leaves the API with the same body: {"error": "<message>"}.
- HTTPException (AppException included): its status and detail
- Request validation and malformed JSON: 400 with the first problem found
- Anything else: 500 "Internal server error", logged with traceback
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.config.constants import ErrorMessages
from shared.config.logging import rest_api_logger as logger

# Location prefixes FastAPI puts in front of field names
_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def error_body(message: str) -> dict[str, str]:
    return {"error": message}


def format_validation_error(exc: RequestValidationError) -> str:
    """Turn the first pydantic error into a one-line message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Invalid JSON body"

    message = str(first.get("msg", "Invalid value")).removeprefix("Value error, ")
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in _LOCATIONS)
    if not field or message.startswith(f"{field} "):
        return message
    return f"{field}: {message}"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_error(exc)
    logger.warning("Request validation failed", path=request.url.path, error=message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(ErrorMessages.INTERNAL_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
