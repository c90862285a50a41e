"""API route modules."""

from .events import router as events_router
from .health import router as health_router
from .users import router as users_router

__all__ = ["health_router", "events_router", "users_router"]
