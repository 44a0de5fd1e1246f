"""
Stack control routes implemented with a class and dependency injection.
"""
import asyncio
import logging

from fastapi import APIRouter, HTTPException
from python_on_whales.exceptions import DockerException

from ..errors import ServiceNotFoundError
from ..models.response import MessageResponse
from ..services.stack import StackService

logger = logging.getLogger(__name__)


class StackRoutes:
    """
    Stack router built with dependency injection.

    Provides the lifecycle endpoints used by the extension UI:
    - GET /status - Aggregate stack status
    - POST /start - Deploy or start the stack
    - POST /stop - Stop the stack (except the controller itself)
    - POST /restart - Restart the stack (except the controller itself)
    - GET /logs/{service} - Last log lines of a service
    - GET /services - Static catalog of stack services

    Args:
        stack: Instance of `StackService` performing the runtime calls.

    Attributes:
        stack: Injected stack service.
        router: Instance of `APIRouter` with the endpoints above.
    """

    def __init__(self, stack: StackService) -> None:
        self.stack = stack
        self.router = self._build_router()

    @property
    def display_name(self) -> str:
        return self.stack.config.display_name

    def _build_router(self) -> APIRouter:
        """
        Build and configure the router with stack endpoints.

        Returns:
            APIRouter configured with GET and POST handlers.
        """
        router = APIRouter(tags=["Stack"])
        # GET /status - aggregate stack status
        router.add_api_route(
            "/status",
            self.get_status,
            methods=["GET"],
            response_model=MessageResponse,
            response_model_exclude_none=True,
        )
        # POST /start - deploy or start stack
        router.add_api_route(
            "/start",
            self.start_stack,
            methods=["POST"],
            response_model=MessageResponse,
            response_model_exclude_none=True,
        )
        # POST /stop - stop stack
        router.add_api_route(
            "/stop",
            self.stop_stack,
            methods=["POST"],
            response_model=MessageResponse,
            response_model_exclude_none=True,
        )
        # POST /restart - restart stack
        router.add_api_route(
            "/restart",
            self.restart_stack,
            methods=["POST"],
            response_model=MessageResponse,
            response_model_exclude_none=True,
        )
        # GET /logs/<service> - last log lines of a service
        router.add_api_route(
            "/logs/{service}",
            self.get_logs,
            methods=["GET"],
            response_model=MessageResponse,
            response_model_exclude_none=True,
        )
        # GET /services - known services catalog
        router.add_api_route(
            "/services",
            self.list_services,
            methods=["GET"],
            response_model=MessageResponse,
            response_model_exclude_none=True,
        )
        return router

    async def get_status(self) -> MessageResponse:
        """
        Get the aggregate status of the stack.

        Returns:
            MessageResponse whose data is the StackStatus.

        Raises:
            HTTPException: If the runtime cannot be queried.
        """
        try:
            logger.debug("Fetching stack status from Docker")
            status = await asyncio.to_thread(self.stack.get_status)
        except DockerException as e:
            logger.error(f"Failed to list containers: {e}")
            raise HTTPException(
                status_code=500, detail=f"Failed to get {self.display_name} status"
            )
        return MessageResponse(success=True, message=status.message, data=status.model_dump())

    async def start_stack(self) -> MessageResponse:
        """
        Deploy the stack on first use, otherwise start its stopped services.

        Returns:
            MessageResponse with the deployment message or the started count.

        Raises:
            HTTPException: If listing containers or the deployment fails.
        """
        logger.info(f"Starting {self.display_name}")
        try:
            result = await asyncio.to_thread(self.stack.start)
        except DockerException as e:
            logger.error(f"Failed to start {self.display_name}: {e}")
            raise HTTPException(
                status_code=500, detail=f"Failed to start {self.display_name}"
            )
        return MessageResponse(success=True, message=result.message)

    async def stop_stack(self) -> MessageResponse:
        """
        Stop every running service of the stack.

        Returns:
            MessageResponse with the stopped count.

        Raises:
            HTTPException: If the runtime cannot be queried.
        """
        logger.info(f"Stopping {self.display_name}")
        try:
            result = await asyncio.to_thread(self.stack.stop)
        except DockerException as e:
            logger.error(f"Failed to list containers: {e}")
            raise HTTPException(
                status_code=500, detail=f"Failed to stop {self.display_name}"
            )
        return MessageResponse(success=True, message=result.message)

    async def restart_stack(self) -> MessageResponse:
        """
        Restart every service of the stack.

        Returns:
            MessageResponse with the restarted count.

        Raises:
            HTTPException: If the runtime cannot be queried.
        """
        logger.info(f"Restarting {self.display_name}")
        try:
            result = await asyncio.to_thread(self.stack.restart)
        except DockerException as e:
            logger.error(f"Failed to list containers: {e}")
            raise HTTPException(
                status_code=500, detail=f"Failed to restart {self.display_name}"
            )
        return MessageResponse(success=True, message=result.message)

    async def get_logs(self, service: str) -> MessageResponse:
        """
        Get the most recent log lines of a service.

        Args:
            service: Service (container) name.

        Returns:
            MessageResponse whose data is the log text.

        Raises:
            HTTPException: 404 if the service is unknown, 500 on runtime errors.
        """
        try:
            logs = await asyncio.to_thread(self.stack.get_logs, service)
        except ServiceNotFoundError as e:
            logger.warning(str(e))
            raise HTTPException(status_code=404, detail=str(e))
        except DockerException as e:
            logger.error(f"Failed to get logs for {service}: {e}")
            raise HTTPException(status_code=500, detail="Failed to get logs")
        return MessageResponse(success=True, data=logs)

    async def list_services(self) -> MessageResponse:
        """Return the static catalog of stack services."""
        services = [s.model_dump(exclude_none=True) for s in self.stack.known_services()]
        return MessageResponse(success=True, data=services)
