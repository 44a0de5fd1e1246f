"""Response envelope shared by every endpoint."""
from typing import Any, Optional

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Uniform `{success, message, data?}` body."""

    success: bool = Field(..., description="Request success status")
    message: str = Field("", description="Status message")
    data: Optional[Any] = Field(None, description="Endpoint specific payload")

    def to_content(self) -> dict[str, Any]:
        """Serialize for a JSONResponse, omitting an absent payload."""
        return self.model_dump(mode="json", exclude_none=True)
