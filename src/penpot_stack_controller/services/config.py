"""
Stack configuration and the shared Docker client handle.
"""
import logging
import os
from typing import Optional

from python_on_whales import DockerClient

from ..models.stack import ServiceDescriptor

logger = logging.getLogger(__name__)

DEFAULT_SOCKET_PATH = "/run/guest-services/backend.sock"

# Static topology of the managed stack, served by GET /services.
KNOWN_SERVICES: tuple[ServiceDescriptor, ...] = (
    ServiceDescriptor(
        name="penpot-frontend",
        description="Frontend web interface",
        url="http://localhost:9001",
    ),
    ServiceDescriptor(name="penpot-backend", description="Backend API server"),
    ServiceDescriptor(name="penpot-exporter", description="Export service for rendering"),
    ServiceDescriptor(name="penpot-postgres", description="PostgreSQL database"),
    ServiceDescriptor(name="penpot-valkey", description="Valkey cache service"),
    ServiceDescriptor(
        name="penpot-mailcatch",
        description="Mail catcher for development",
        url="http://localhost:1080",
    ),
)


class ConfigService:
    """
    Holds the stack configuration and owns the Docker client.

    Args:
        compose_file: Path to the compose file used for the first deployment.
        project_name: Compose project name of the stack.
        name_prefix: Container name prefix identifying stack members.
        self_container_name: Name of this backend's own container.
        display_name: Stack name used in response messages.
        stop_timeout: Grace period in seconds for stop and restart.
        log_tail: Number of log lines returned by the logs endpoint.
        known_services: Catalog served by the services endpoint.
    """

    def __init__(
        self,
        compose_file: str = "/penpot-compose.yaml",
        project_name: str = "penpot",
        name_prefix: str = "penpot-",
        self_container_name: str = "penpot-extension-backend",
        display_name: str = "Penpot",
        stop_timeout: int = 10,
        log_tail: int = 100,
        known_services: tuple[ServiceDescriptor, ...] = KNOWN_SERVICES,
    ) -> None:
        self.compose_file = compose_file
        self.project_name = project_name
        self.name_prefix = name_prefix
        self.self_container_name = self_container_name
        self.display_name = display_name
        self.stop_timeout = stop_timeout
        self.log_tail = log_tail
        self.known_services = known_services
        self._docker_client: Optional[DockerClient] = None

    @classmethod
    def from_env(cls) -> "ConfigService":
        """Build a configuration from environment variables."""
        return cls(
            compose_file=os.getenv("COMPOSE_FILE", "/penpot-compose.yaml"),
            project_name=os.getenv("COMPOSE_PROJECT_NAME", "penpot"),
            name_prefix=os.getenv("STACK_NAME_PREFIX", "penpot-"),
            self_container_name=os.getenv(
                "SELF_CONTAINER_NAME", "penpot-extension-backend"
            ),
            display_name=os.getenv("STACK_DISPLAY_NAME", "Penpot"),
            stop_timeout=int(os.getenv("STOP_TIMEOUT", "10")),
            log_tail=int(os.getenv("LOG_TAIL", "100")),
        )

    def get_docker_client(self) -> DockerClient:
        """
        Return the Docker client, creating it on first use.

        The client is configured with the compose file and project name so
        the same handle serves both container calls and the compose bring-up.
        """
        if self._docker_client is None:
            logger.debug(
                f"Creating Docker client for project '{self.project_name}' "
                f"with compose file {self.compose_file}"
            )
            self._docker_client = DockerClient(
                compose_files=[self.compose_file],
                compose_project_name=self.project_name,
            )
        return self._docker_client
