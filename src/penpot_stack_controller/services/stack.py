"""
Stack lifecycle operations: discovery, status, start, stop, restart and logs.

Every call re-reads the container set from the runtime; nothing is cached
between requests. Blocking methods are meant to run in a worker thread.
"""
import logging
from typing import Callable

from python_on_whales.exceptions import DockerException

from ..errors import ServiceNotFoundError
from ..models.stack import (
    ContainerRecord,
    OperationResult,
    ServiceDescriptor,
    ServiceStatus,
    StackStatus,
)
from .config import ConfigService
from .runtime import RuntimeClient
from .stack_filter import exclude_self, is_running, partition_running

logger = logging.getLogger(__name__)

HEALTH_NOT_AVAILABLE = "N/A"


class StackService:
    """
    Stack operations composed from runtime calls and stack filters.

    Args:
        config: Stack configuration (prefix, self container, timeouts).
        runtime: Runtime adapter used for every container call.
    """

    def __init__(self, config: ConfigService, runtime: RuntimeClient) -> None:
        self.config = config
        self.runtime = runtime

    def discover(self) -> list[ContainerRecord]:
        """
        Return every stack container except this controller's own.

        An empty list means the stack is not deployed.
        """
        containers = self.runtime.list_containers(self.config.name_prefix)
        return exclude_self(containers, self.config.self_container_name)

    def get_status(self) -> StackStatus:
        """
        Build the aggregate stack status.

        Returns:
            StackStatus with one ServiceStatus per container in discovery order.

        Raises:
            DockerException: If the container list cannot be read.
        """
        containers = self.discover()
        if not containers:
            return StackStatus(
                running=False,
                services=[],
                message=f"{self.config.display_name} is not deployed. Click Start to deploy.",
            )

        services: list[ServiceStatus] = []
        running_count = 0
        for container in containers:
            health = HEALTH_NOT_AVAILABLE
            if is_running(container):
                running_count += 1
                health = container.health or HEALTH_NOT_AVAILABLE
            services.append(
                ServiceStatus(
                    name=container.name,
                    status=container.status,
                    state=container.state,
                    health=health,
                    ports=container.ports,
                )
            )

        return StackStatus(
            running=running_count > 0,
            services=services,
            message=f"{running_count} of {len(containers)} services running",
        )

    def start(self) -> OperationResult:
        """
        Deploy the stack or start its stopped containers.

        With no stack containers present the compose bring-up creates and
        starts every service. Otherwise each container not running is started;
        individual failures are logged and left out of the count.

        Raises:
            DockerException: If listing containers or the bring-up fails.
        """
        name = self.config.display_name
        containers = self.discover()
        if not containers:
            logger.info(f"No {name} containers found, deploying with docker compose...")
            self.runtime.compose_up()
            logger.info(f"{name} deployed successfully")
            return OperationResult(
                count=0,
                message=f"{name} deployed successfully. Services are starting...",
            )

        _, stopped = partition_running(containers)
        started = self._apply(stopped, "start", self.runtime.start)
        return OperationResult(count=started, message=f"Started {started} {name} service(s)")

    def stop(self) -> OperationResult:
        """Stop every running stack container with the configured grace period."""
        running, _ = partition_running(self.discover())
        stopped = self._apply(
            running,
            "stop",
            lambda container_id: self.runtime.stop(container_id, self.config.stop_timeout),
        )
        return OperationResult(
            count=stopped, message=f"Stopped {stopped} {self.config.display_name} service(s)"
        )

    def restart(self) -> OperationResult:
        """Restart every stack container, running or not, with the grace period."""
        restarted = self._apply(
            self.discover(),
            "restart",
            lambda container_id: self.runtime.restart(
                container_id, self.config.stop_timeout
            ),
        )
        return OperationResult(
            count=restarted,
            message=f"Restarted {restarted} {self.config.display_name} service(s)",
        )

    def _apply(
        self,
        containers: list[ContainerRecord],
        action: str,
        call: Callable[[str], None],
    ) -> int:
        """Run `call` on each container and return how many succeeded."""
        succeeded = 0
        for container in containers:
            try:
                call(container.id)
            except DockerException as e:
                logger.error(f"Failed to {action} container {container.name}: {e}")
                continue
            logger.info(f"Container {container.name} {action} done")
            succeeded += 1
        return succeeded

    def get_logs(self, service_name: str) -> str:
        """
        Return the most recent log lines of a service.

        Args:
            service_name: Name (or name fragment) of the service container.

        Raises:
            ServiceNotFoundError: If no container name matches.
            DockerException: If the runtime cannot be queried.
        """
        containers = self.runtime.list_containers(service_name)
        if not containers:
            raise ServiceNotFoundError(service_name)
        container = containers[0]
        logger.debug(f"Fetching last {self.config.log_tail} log lines of {container.name}")
        return self.runtime.logs(container.id, self.config.log_tail)

    def known_services(self) -> list[ServiceDescriptor]:
        return list(self.config.known_services)
