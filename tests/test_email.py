"""Tests for celebration email formatting."""

from datetime import date

from models.people import PersonRecord
from services.email import format_celebration_email, format_date_for_subject
from services.events import collect_upcoming_events


def test_format_date_for_subject():
    assert format_date_for_subject(date(2025, 11, 7)) == "Nov 7th 2025"
    assert format_date_for_subject(date(2025, 11, 1)) == "Nov 1st 2025"
    assert format_date_for_subject(date(2025, 11, 12)) == "Nov 12th 2025"
    assert format_date_for_subject(date(2025, 11, 23)) == "Nov 23rd 2025"


def test_format_celebration_email(today):
    people = [
        PersonRecord("a", "Ada", birthday="1990-06-20"),
        PersonRecord("b", "Bob", anniversary="2020-06-20"),
    ]
    events = collect_upcoming_events(people, today)

    body = format_celebration_email(events, "Acme Corp", today)

    assert body.splitlines() == [
        "Celebrations for Acme Corp - Jun 20th 2025",
        "",
        "  - Ada has a birthday today! (6/20/2025)",
        "  - Bob celebrates a work anniversary today! (6/20/2025)",
    ]


def test_format_celebration_email_empty(today):
    body = format_celebration_email([], "Acme Corp", today)
    assert body.endswith("No upcoming birthdays or anniversaries.")
