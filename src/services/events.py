"""
Upcoming birthday and work anniversary events.
"""

from datetime import date, datetime

from core.config import EVENT_KIND_LABELS
from core.dates import as_date, diff_in_days, next_event_date
from models.people import EventKind, PersonRecord, ProjectedEvent


def format_date_display(d: date) -> str:
    """Format date as M/D/YYYY (platform-safe, no zero-padding)."""
    return f"{d.month}/{d.day}/{d.year}"


def _project(kind: EventKind, person: PersonRecord, ymd: str, today: date) -> ProjectedEvent:
    occurs_on = next_event_date(ymd, today)
    return ProjectedEvent(
        kind=kind,
        subject=person,
        occurs_on=occurs_on,
        days_until=diff_in_days(today, occurs_on),
        display_text=format_date_display(occurs_on),
    )


def collect_upcoming_events(
    people: list[PersonRecord], today: date | datetime | None = None
) -> list[ProjectedEvent]:
    """
    Project every birthday and anniversary onto its next occurrence.

    Returns one event per present date field, soonest first. Ties keep
    input order. No range filtering is applied here.
    """
    today = as_date(today) if today is not None else date.today()
    events = []

    for person in people:
        if person.birthday:
            events.append(_project(EventKind.BIRTHDAY, person, person.birthday, today))
        if person.anniversary:
            events.append(_project(EventKind.ANNIVERSARY, person, person.anniversary, today))

    # sorted() is stable
    return sorted(events, key=lambda event: event.days_until)


def events_within(events: list[ProjectedEvent], days: int) -> list[ProjectedEvent]:
    """Keep events happening between today and `days` days from now."""
    return [event for event in events if 0 <= event.days_until <= days]


def todays_events(events: list[ProjectedEvent]) -> list[ProjectedEvent]:
    """Keep events happening today."""
    return [event for event in events if event.days_until == 0]


def describe_event(event: ProjectedEvent) -> str:
    """One-line description, e.g. 'Ada has a birthday in 3 days'."""
    action = EVENT_KIND_LABELS[event.kind.value]
    if event.days_until == 0:
        when = "today!"
    elif event.days_until == 1:
        when = "in 1 day"
    else:
        when = f"in {event.days_until} days"
    return f"{event.subject.display_label} {action} {when}"


def format_celebration_message(events: list[ProjectedEvent]) -> str:
    """Chat-ready digest of events, one per line."""
    if not events:
        return "No upcoming birthdays or anniversaries."

    lines = ["🎉 Celebrations at Cakeday:"]
    for event in events:
        lines.append(f"• {describe_event(event)} ({event.display_text})")
    return "\n".join(lines)
