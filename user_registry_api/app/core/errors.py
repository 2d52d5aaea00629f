"""
Failure kinds and the terminal error formatter.

Service operations never raise to the transport layer.  Each step
returns either its result or a ``Failure`` describing what went wrong;
the API layer passes failures to :func:`failure_response`, which maps
the failure kind to an HTTP status code.  :func:`error_response` is
the only place where an error body is built and where failures are
logged.  Exception handlers registered by
:func:`register_exception_handlers` route framework errors and
uncaught exceptions through the same function so that every non‑2xx
response has the shape ``{"message": "..."}``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred."


class FailureKind(str, Enum):
    """Enumerates every way a handler can fail."""

    VALIDATION_ERROR = "ValidationError"
    CONFLICT_ERROR = "ConflictError"
    NOT_FOUND_ERROR = "NotFoundError"
    UNEXPECTED_ERROR = "UnexpectedError"


STATUS_CODES = {
    FailureKind.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    FailureKind.CONFLICT_ERROR: status.HTTP_409_CONFLICT,
    FailureKind.NOT_FOUND_ERROR: status.HTTP_404_NOT_FOUND,
    FailureKind.UNEXPECTED_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@dataclass(frozen=True)
class Failure:
    """A failed handler step: the failure kind and a caller‑facing message."""

    kind: FailureKind
    message: str = ""

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


def validation_error(message: str) -> Failure:
    return Failure(FailureKind.VALIDATION_ERROR, message)


def conflict_error(message: str) -> Failure:
    return Failure(FailureKind.CONFLICT_ERROR, message)


def not_found_error(message: str) -> Failure:
    return Failure(FailureKind.NOT_FOUND_ERROR, message)


def unexpected_error(message: str = "") -> Failure:
    return Failure(FailureKind.UNEXPECTED_ERROR, message)


def error_response(
    status_code: int,
    message: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Log a failure and render it as ``{"message": ...}``.

    Client errors are logged at ``WARNING`` and server errors at
    ``ERROR``.  An empty message is replaced by a generic notice.
    """
    message = message or DEFAULT_ERROR_MESSAGE
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    logger.log(level, "Request failed with %s: %s", status_code, message)
    return JSONResponse(
        status_code=status_code,
        content={"message": message},
        headers=dict(headers) if headers else None,
    )


def failure_response(failure: Failure) -> JSONResponse:
    """Convert a ``Failure`` into its HTTP response."""
    return error_response(failure.status_code, failure.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (unknown path, wrong method) in the common shape."""
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for anything a handler did not anticipate."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return failure_response(unexpected_error())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
