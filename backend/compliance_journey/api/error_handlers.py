"""Error Handlers — map exceptions to the API's `{"error": {...}}` envelope.

Invariants:
    - JourneyError → its own http_status and to_response() body (404 unknown tool/persona,
      500 for a catalog that failed validation)
    - RequestValidationError → 400 VALIDATION_ERROR, one detail per offending field
    - Anything else → 500 INTERNAL_ERROR with a fixed message; the traceback goes to logs only
    - Client errors (< 500) log at WARNING, server errors at ERROR

Design Decisions:
    - Handlers are plain module functions registered from one table, so tests can
      call them directly and the registration order is visible in one place
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from compliance_journey.core.errors import ErrorCategory, ErrorSeverity, JourneyError

logger = logging.getLogger(__name__)


async def journey_error_handler(request: Request, exc: JourneyError) -> JSONResponse:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{exc.code} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    logger.warning(
        f"Rejected request on {request.url.path}: {len(details)} invalid field(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return _error_response(
        status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR", "Invalid request data",
        ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}",
        exc_info=exc, extra={"path": request.url.path},
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR",
        "An unexpected error occurred",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
    )


def _error_response(
    status_code: int, code: str, message: str,
    category: ErrorCategory, severity: ErrorSeverity, **extra,
) -> JSONResponse:
    body = {
        "code": code, "message": message,
        "category": category.value, "severity": severity.value, **extra,
    }
    return JSONResponse(status_code=status_code, content={"error": body})


_HANDLERS = (
    (JourneyError, journey_error_handler),
    (RequestValidationError, validation_error_handler),
    (Exception, unhandled_error_handler),
)


def register_error_handlers(app: FastAPI) -> None:
    for exc_type, handler in _HANDLERS:
        app.add_exception_handler(exc_type, handler)
