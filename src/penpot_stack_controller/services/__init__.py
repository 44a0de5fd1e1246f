"""Services for the Penpot Stack Controller."""

from .config import ConfigService, KNOWN_SERVICES
from .runtime import RuntimeClient
from .stack import StackService

__all__ = ["ConfigService", "KNOWN_SERVICES", "RuntimeClient", "StackService"]
