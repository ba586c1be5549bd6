# catalog_api/errors.py
import logging
from typing import Any, Dict, List, Optional, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Something went wrong on the server"
REQUIRED_FIELDS_MESSAGE = "Name, price, and category are required"

# ---------------------------
# Error kinds
# ---------------------------
class AppError(Exception):
    """Operational error carrying the HTTP status it maps to."""

    status_code = 500
    default_message = "Application error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        self.is_operational = True
        super().__init__(self.message)


class NotFoundError(AppError):
    status_code = 404
    default_message = "Resource not found"


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid data provided"


class UnauthorizedError(AppError):
    status_code = 401
    default_message = "Unauthorized access"


# ---------------------------
# Request body validation messages
# ---------------------------
_FIELD_MESSAGES = {
    "name": "Name must be a non-empty string",
    "description": "Description must be a string",
    "price": "Price must be a positive number",
    "category": "Category must be a non-empty string",
    "inStock": "inStock must be a boolean",
}


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """Collapse pydantic errors into the single message clients see."""
    if not errors:
        return ValidationError.default_message

    body_errors = [e for e in errors if e.get("loc", ())[:1] == ("body",)]
    for err in body_errors:
        if err.get("type") == "missing" and len(err["loc"]) > 1:
            return REQUIRED_FIELDS_MESSAGE

    first = body_errors[0] if body_errors else errors[0]
    loc: List[Any] = list(first.get("loc", ()))
    if first.get("type") == "json_invalid":
        return "Malformed JSON body"
    if loc == ["body"]:
        if first.get("type") == "value_error":
            return str(first.get("msg", "")).replace("Value error, ", "", 1)
        return "Request body must be a JSON object"
    field = loc[-1] if loc else None
    if field in _FIELD_MESSAGES:
        return _FIELD_MESSAGES[field]
    return ValidationError.default_message


def _error_body(message: str) -> Dict[str, str]:
    return {"status": "error", "message": message}


# ---------------------------
# Handlers
# ---------------------------
async def app_error_handler(request: Request, exc: AppError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = describe_validation_errors(exc.errors())
    logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=ValidationError.status_code, content=_error_body(message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # unknown routes (404) and wrong methods (405) come through here
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=_error_body(SERVER_ERROR_MESSAGE))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
