"""Predicates over discovered stack containers."""
from typing import Iterable

from ..models.stack import ContainerRecord

RUNNING = "running"


def exclude_self(
    containers: Iterable[ContainerRecord], self_name: str
) -> list[ContainerRecord]:
    """Drop the controller's own container (exact name match)."""
    return [c for c in containers if c.name != self_name]


def is_running(container: ContainerRecord) -> bool:
    return container.state == RUNNING


def partition_running(
    containers: Iterable[ContainerRecord],
) -> tuple[list[ContainerRecord], list[ContainerRecord]]:
    """Split containers into (running, not running), keeping their order."""
    running: list[ContainerRecord] = []
    stopped: list[ContainerRecord] = []
    for container in containers:
        (running if is_running(container) else stopped).append(container)
    return running, stopped
