"""FastAPI routers for the Penpot Stack Controller."""

from .stack import StackRoutes

__all__ = ["StackRoutes"]
