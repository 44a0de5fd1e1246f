"""Stack and service models."""
from typing import Optional

from pydantic import BaseModel, Field


class ContainerRecord(BaseModel):
    """Container fields read from the runtime for one stack member."""

    id: str = Field(..., description="Container id")
    name: str = Field(..., description="Container name without leading slash")
    state: str = Field(..., description="Coarse runtime state (running, exited, ...)")
    status: str = Field(..., description="Human readable status")
    health: Optional[str] = Field(
        None, description="Health check status, None when no check is configured"
    )
    ports: str = Field("", description="Published port mappings (public:private)")


class ServiceStatus(BaseModel):
    """Status of a single stack service."""

    name: str = Field(..., description="Container name")
    status: str = Field(..., description="Human readable status")
    state: str = Field(..., description="Coarse runtime state")
    health: str = Field("N/A", description="Health check status or N/A")
    ports: str = Field("", description="Published port mappings (public:private)")


class StackStatus(BaseModel):
    """Aggregate status of the whole stack."""

    running: bool = Field(..., description="True if at least one service is running")
    services: list[ServiceStatus] = Field(
        default_factory=list, description="Per service status"
    )
    message: str = Field(..., description="Summary message")


class ServiceDescriptor(BaseModel):
    """Entry of the known-services catalog."""

    name: str = Field(..., description="Service container name")
    description: str = Field(..., description="What the service does")
    url: Optional[str] = Field(None, description="Address opened by the UI, if any")


class OperationResult(BaseModel):
    """Outcome of a stack wide lifecycle operation."""

    count: int = Field(0, description="Containers acted on successfully")
    message: str = Field(..., description="Status message")
