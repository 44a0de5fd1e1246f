"""HTTP middleware for the Penpot Stack Controller."""

from .request_logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
