"""Pydantic models for the Penpot Stack Controller."""

from .response import MessageResponse
from .stack import (
    ContainerRecord,
    ServiceStatus,
    StackStatus,
    ServiceDescriptor,
    OperationResult,
)

__all__ = [
    "MessageResponse",
    "ContainerRecord",
    "ServiceStatus",
    "StackStatus",
    "ServiceDescriptor",
    "OperationResult",
]
