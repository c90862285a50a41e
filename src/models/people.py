"""
Data models for directory people and projected celebration events.

Records are validated once when loaded from the directory (see
core.validation) and are immutable afterwards.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class EventKind(str, Enum):
    """Kind of recurring celebration."""

    BIRTHDAY = "birthday"
    ANNIVERSARY = "anniversary"


@dataclass(frozen=True)
class PersonRecord:
    """A person from the company directory."""

    identifier: str
    display_label: str
    birthday: str | None = None  # "YYYY-MM-DD", year ignored
    anniversary: str | None = None  # "YYYY-MM-DD", year ignored
    email: str | None = None


@dataclass(frozen=True)
class ProjectedEvent:
    """Next occurrence of a person's birthday or work anniversary."""

    kind: EventKind
    subject: PersonRecord
    occurs_on: date
    days_until: int
    display_text: str
