"""
Thin adapter over the python-on-whales Docker client.

Only builds call parameters and maps runtime objects to `ContainerRecord`;
errors raised by the client (`DockerException`) propagate to the caller.
"""
import logging

from python_on_whales import Container, DockerClient
from python_on_whales.exceptions import NoSuchContainer

from ..models.stack import ContainerRecord

logger = logging.getLogger(__name__)


def format_ports(container: Container) -> str:
    """
    Summarize published ports as "public:private" pairs.

    Ports without a host binding are internal and left out. The same mapping
    bound on several host addresses (IPv4 and IPv6) is listed once.
    """
    port_map = container.network_settings.ports or {}
    mappings: list[str] = []
    for container_port, bindings in port_map.items():
        if not bindings:
            continue
        private_port = container_port.split("/")[0]
        for binding in bindings:
            if not binding.host_port or binding.host_port == "0":
                continue
            mapping = f"{binding.host_port}:{private_port}"
            if mapping not in mappings:
                mappings.append(mapping)
    return ", ".join(mappings)


def describe_status(container: Container) -> str:
    """Build a human readable status line similar to `docker ps`."""
    state = container.state
    if state.status == "running":
        if state.started_at is not None:
            return f"Up since {state.started_at:%Y-%m-%d %H:%M:%S}"
        return "Up"
    if state.status == "exited":
        return f"Exited ({state.exit_code})"
    return (state.status or "unknown").capitalize()


def to_record(container: Container) -> ContainerRecord:
    """Map a python-on-whales container to a `ContainerRecord`."""
    health = container.state.health
    return ContainerRecord(
        id=container.id,
        name=container.name.lstrip("/"),
        state=container.state.status or "unknown",
        status=describe_status(container),
        health=health.status if health is not None else None,
        ports=format_ports(container),
    )


class RuntimeClient:
    """
    Container runtime calls used by the stack service.

    Args:
        docker: python-on-whales client configured with the stack compose file.
    """

    def __init__(self, docker: DockerClient) -> None:
        self.docker = docker

    def list_containers(self, name_filter: str) -> list[ContainerRecord]:
        """
        List all containers, running or not, whose name contains `name_filter`.

        The daemon's `name` filter does the matching. A container removed
        between the listing and its inspection is skipped.
        """
        containers = self.docker.container.list(
            all=True, filters=[("name", name_filter)]
        )
        records: list[ContainerRecord] = []
        for container in containers:
            try:
                record = to_record(container)
            except NoSuchContainer:
                logger.debug(f"Container {container.id} disappeared while listing")
                continue
            if name_filter in record.name:
                records.append(record)
        logger.debug(f"Found {len(records)} containers matching '{name_filter}'")
        return records

    def start(self, container_id: str) -> None:
        self.docker.container.start(container_id)

    def stop(self, container_id: str, timeout: int) -> None:
        self.docker.container.stop(container_id, time=timeout)

    def restart(self, container_id: str, timeout: int) -> None:
        self.docker.container.restart(container_id, time=timeout)

    def logs(self, container_id: str, tail: int) -> str:
        """Return the last `tail` lines of combined stdout and stderr."""
        return self.docker.container.logs(container_id, tail=tail)

    def compose_up(self) -> None:
        """Create and start every service of the compose file in detached mode."""
        self.docker.compose.up(detach=True)
