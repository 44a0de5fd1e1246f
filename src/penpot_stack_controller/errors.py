"""
Exceptions and the handlers that render errors into the response envelope.
"""
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from .middleware.request_logging import REQUEST_ID_HEADER
from .models.response import MessageResponse

logger = logging.getLogger(__name__)


class StackControllerError(Exception):
    """Base class for errors raised by the stack service."""


class ServiceNotFoundError(StackControllerError):
    """No container matches the requested service name."""

    def __init__(self, service_name: str) -> None:
        super().__init__(f"Service {service_name} not found")
        self.service_name = service_name


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=MessageResponse(success=False, message=message).to_content(),
    )


async def http_error_handler(_req: Request, exc: HTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def validation_error_handler(
    _req: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(400, "Request validation failed")


async def unhandled_error_handler(req: Request, exc: Exception) -> JSONResponse:
    # Details stay in the server log.
    logger.error(f"Unhandled error on {req.method} {req.url.path}: {exc}", exc_info=exc)
    response = error_response(500, "Internal server error")
    # The access log middleware never sees this response.
    request_id = getattr(req.state, "request_id", None)
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    return response
