"""Translation of classified domain errors into HTTP responses."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from solicitudes.domain.common.exceptions import DomainError, ErrorKind

logger = structlog.get_logger(__name__)

GENERIC_SERVER_ERROR = "An unexpected error occurred. Please try again later."

HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.BUSINESS_RULE_VIOLATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.REFERENCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.VERSION_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.CONFIGURATION_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.PERSISTENCE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def http_status_for(error: DomainError) -> int:
    return HTTP_STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def error_response(error: DomainError) -> JSONResponse:
    """
    Build the JSON body for a domain error.

    Server-side kinds get a generic message; their detail only goes to the log.
    """
    status_code = http_status_for(error)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "request_failed",
            kind=str(error.kind),
            error=error.message,
            details=error.details,
        )
        detail = GENERIC_SERVER_ERROR
    else:
        logger.info("request_rejected", kind=str(error.kind), error=error.message)
        detail = error.message
    return JSONResponse(status_code=status_code, content={"error": str(error.kind), "detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the DomainError handler on the application."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        return error_response(exc)
