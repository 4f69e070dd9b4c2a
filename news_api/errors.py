"""
Error pipeline — maps every failure to an HTTP status and a ``{"msg": ...}`` body.

Resolution order
----------------
1. Routing misses (unknown path, or known path with an unsupported method)
   are answered with 404 "Route not found" before any handler runs.
2. Request validation failures (non-integer ids, ``limit``/``p`` or
   ``inc_votes``) are malformed input: 400.
3. Database errors are classified by SQLSTATE (see ``_DATABASE_ERRORS``);
   unknown codes fall through to 500.
4. ``ApiError`` raised by the services carries its own status and message.
5. Anything else is a 500 with a generic message.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

BAD_REQUEST_MSG = "You have made a bad request"
VALUE_NOT_FOUND_MSG = "Value not found in the database"
ROUTE_NOT_FOUND_MSG = "Route not found"
INTERNAL_ERROR_MSG = "Something went wrong!"

# SQLSTATE codes
INVALID_TEXT_REPRESENTATION = "22P02"
NUMERIC_VALUE_OUT_OF_RANGE = "22003"
FOREIGN_KEY_VIOLATION = "23503"
UNDEFINED_COLUMN = "42703"

# Checked in order; the first matching entry wins.
_DATABASE_ERRORS: tuple[tuple[frozenset[str], int, str], ...] = (
    (frozenset({INVALID_TEXT_REPRESENTATION, NUMERIC_VALUE_OUT_OF_RANGE}), 400, BAD_REQUEST_MSG),
    (frozenset({FOREIGN_KEY_VIOLATION}), 404, VALUE_NOT_FOUND_MSG),
    (frozenset({UNDEFINED_COLUMN}), 400, BAD_REQUEST_MSG),
)

# SQLite reports constraint failures by message only.
_SQLITE_MESSAGES: dict[str, str] = {
    "FOREIGN KEY constraint failed": FOREIGN_KEY_VIOLATION,
    "no such column": UNDEFINED_COLUMN,
}


# ---------------------------------------------------------------------------
# Application errors
# ---------------------------------------------------------------------------

class ApiError(Exception):
    """An error whose HTTP status and client message are known at raise time."""

    status_code: int = 500

    def __init__(self, msg: str, status_code: int | None = None) -> None:
        super().__init__(msg)
        self.msg = msg
        if status_code is not None:
            self.status_code = status_code


class BadRequest(ApiError):
    status_code = 400

    def __init__(self, msg: str = BAD_REQUEST_MSG) -> None:
        super().__init__(msg)


class NotFound(ApiError):
    status_code = 404


# ---------------------------------------------------------------------------
# Database error classification
# ---------------------------------------------------------------------------

def database_error_code(exc: DBAPIError) -> str | None:
    """Return the SQLSTATE behind *exc*, or None when it cannot be determined."""
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return code
    message = str(orig)
    for fragment, mapped in _SQLITE_MESSAGES.items():
        if fragment in message:
            return mapped
    return None


def classify_database_error(exc: DBAPIError) -> tuple[int, str]:
    code = database_error_code(exc)
    for codes, status_code, msg in _DATABASE_ERRORS:
        if code in codes:
            return status_code, msg
    return 500, INTERNAL_ERROR_MSG


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def _error(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (404, 405):
        return _error(404, ROUTE_NOT_FOUND_MSG)
    return _error(exc.status_code, str(exc.detail))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return _error(400, BAD_REQUEST_MSG)


async def database_error_handler(request: Request, exc: DBAPIError) -> JSONResponse:
    status_code, msg = classify_database_error(exc)
    if status_code == 500:
        logger.error("Unclassified database error on %s %s", request.method, request.url.path, exc_info=exc)
    else:
        logger.debug("Database error on %s %s mapped to %d", request.method, request.url.path, status_code)
    return _error(status_code, msg)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _error(exc.status_code, exc.msg)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(500, INTERNAL_ERROR_MSG)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(DBAPIError, database_error_handler)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
