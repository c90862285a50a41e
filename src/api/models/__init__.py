"""API Pydantic models."""

from .responses import (
    ErrorCodes,
    ErrorResponse,
    EventResponse,
    EventsResponse,
    HealthResponse,
    UserDatesResponse,
    UserDatesUpdate,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "ErrorCodes",
    "EventResponse",
    "EventsResponse",
    "UserDatesUpdate",
    "UserDatesResponse",
]
