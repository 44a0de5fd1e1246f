"""Penpot Stack Controller package entry point."""
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

from .errors import (
    ServiceNotFoundError,
    StackControllerError,
    http_error_handler,
    unhandled_error_handler,
    validation_error_handler,
)
from .middleware import RequestLoggingMiddleware
from .routers.stack import StackRoutes
from .services.config import ConfigService
from .services.runtime import RuntimeClient
from .services.stack import StackService


def create_app(
    config: Optional[ConfigService] = None,
    runtime: Optional[RuntimeClient] = None,
    title: str = "Penpot Stack Controller",
    description: str = "Local API to control the lifecycle of the Penpot stack",
    version: str = "1.0.0",
) -> FastAPI:
    """
    Factory function to create a preconfigured FastAPI application.

    Args:
        config: Stack configuration. Read from the environment if omitted.
        runtime: Runtime adapter. Built on the config's Docker client if omitted.
        title: FastAPI application title.
        description: FastAPI application description.
        version: Application version string.

    Returns:
        FastAPI app ready to be served.
    """
    config = config or ConfigService.from_env()
    if runtime is None:
        runtime = RuntimeClient(config.get_docker_client())

    app = FastAPI(
        title=title,
        description=description,
        version=version,
    )

    app.add_exception_handler(HTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.add_middleware(RequestLoggingMiddleware)
    # The Unix socket is the access boundary, any origin may call.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    stack_routes = StackRoutes(StackService(config, runtime))
    app.include_router(stack_routes.router)

    return app


__all__ = [
    "ConfigService",
    "RuntimeClient",
    "StackService",
    "StackRoutes",
    "StackControllerError",
    "ServiceNotFoundError",
    "create_app",
]
