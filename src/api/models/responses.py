"""Pydantic request and response models for API endpoints."""

from datetime import date

from pydantic import BaseModel

from models.people import ProjectedEvent


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    database_available: bool
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class EventResponse(BaseModel):
    """A single upcoming celebration."""

    kind: str  # "birthday" or "anniversary"
    user_id: str
    display_label: str
    occurs_on: date
    days_until: int
    display_text: str

    @classmethod
    def from_event(cls, event: ProjectedEvent) -> "EventResponse":
        return cls(
            kind=event.kind.value,
            user_id=event.subject.identifier,
            display_label=event.subject.display_label,
            occurs_on=event.occurs_on,
            days_until=event.days_until,
            display_text=event.display_text,
        )


class EventsResponse(BaseModel):
    """Upcoming celebrations for a company."""

    company_id: str
    as_of: date
    events: list[EventResponse]
    skipped: list[str] = []  # directory rows with malformed dates


class UserDatesUpdate(BaseModel):
    """Birthday/anniversary update. Omitted fields are left alone, "" clears."""

    birthday: str | None = None
    anniversary: str | None = None


class UserDatesResponse(BaseModel):
    """User dates after an update."""

    user_id: str
    birthday: str | None
    anniversary: str | None


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
