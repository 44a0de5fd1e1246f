"""
Test helper utilities.
"""
from typing import Optional

from python_on_whales.exceptions import DockerException

from penpot_stack_controller.models.stack import ContainerRecord


def docker_error(message: str = "daemon error") -> DockerException:
    """Build a DockerException like the client raises on a failed command."""
    return DockerException(["docker", "container"], 1, b"", message.encode())


def make_record(
    name: str,
    state: str = "running",
    ports: str = "",
    container_id: Optional[str] = None,
    health: Optional[str] = None,
) -> ContainerRecord:
    status = "Up since 2026-01-01 10:00:00" if state == "running" else "Exited (0)"
    return ContainerRecord(
        id=container_id or f"id-{name}",
        name=name,
        state=state,
        status=status,
        health=health,
        ports=ports,
    )


class FakeRuntime:
    """
    In-memory stand-in for `RuntimeClient`.

    Records every call in `calls` as (action, container_id) tuples and
    mutates container state the way the daemon would.
    """

    def __init__(self, containers: Optional[list[ContainerRecord]] = None) -> None:
        self.containers = list(containers or [])
        self.log_text: dict[str, str] = {}
        self.failing: set[str] = set()
        self.fail_list = False
        self.list_error: Optional[Exception] = None
        self.fail_compose = False
        self.calls: list[tuple] = []

    def list_containers(self, name_filter: str) -> list[ContainerRecord]:
        self.calls.append(("list", name_filter))
        if self.list_error is not None:
            raise self.list_error
        if self.fail_list:
            raise docker_error("cannot connect to the Docker daemon")
        return [c for c in self.containers if name_filter in c.name]

    def _act(self, action: str, container_id: str, new_state: str) -> None:
        self.calls.append((action, container_id))
        if container_id in self.failing:
            raise docker_error(f"{action} failed")
        for i, c in enumerate(self.containers):
            if c.id == container_id:
                self.containers[i] = c.model_copy(update={"state": new_state})

    def start(self, container_id: str) -> None:
        self._act("start", container_id, "running")

    def stop(self, container_id: str, timeout: int) -> None:
        self.calls.append(("stop_timeout", timeout))
        self._act("stop", container_id, "exited")

    def restart(self, container_id: str, timeout: int) -> None:
        self.calls.append(("restart_timeout", timeout))
        self._act("restart", container_id, "running")

    def logs(self, container_id: str, tail: int) -> str:
        self.calls.append(("logs", container_id, tail))
        if container_id in self.failing:
            raise docker_error("logs failed")
        return self.log_text.get(container_id, "")

    def compose_up(self) -> None:
        self.calls.append(("compose_up",))
        if self.fail_compose:
            raise docker_error("compose up failed")

    def actions(self, action: str) -> list[str]:
        """Container ids the given action was issued for."""
        return [call[1] for call in self.calls if call[0] == action]

    @property
    def mutations(self) -> list[tuple]:
        return [
            call for call in self.calls
            if call[0] in ("start", "stop", "restart", "compose_up")
        ]
