"""
Access log middleware: one JSON line per request.
"""
import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("penpot_stack_controller.access")

REQUEST_ID_HEADER = "X-Request-ID"


def format_access_record(
    request_id: str, method: str, uri: str, status: int, error: str = ""
) -> str:
    return json.dumps(
        {
            "time": datetime.now(timezone.utc).isoformat(),
            "id": request_id,
            "method": method,
            "uri": uri,
            "status": status,
            "error": error,
        }
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log time, request id, method, URI, status and error of every request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        uri = request.url.path
        if request.url.query:
            uri = f"{uri}?{request.url.query}"

        try:
            response = await call_next(request)
        except Exception as e:
            logger.info(format_access_record(request_id, request.method, uri, 500, str(e)))
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            format_access_record(request_id, request.method, uri, response.status_code)
        )
        return response
