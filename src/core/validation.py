"""
Directory row validation.

Rows come from the users table (or any loosely shaped source) and are turned
into PersonRecord values here, so everything downstream can trust them.
"""

from core.dates import InvalidDateFormat, parse_month_day
from models.people import PersonRecord


def _clean(value) -> str | None:
    """Normalize optional string fields: blank means absent."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def get_display_label(row: dict) -> str:
    """Full name, falling back to email, then to the user id."""
    return _clean(row.get("full_name")) or _clean(row.get("email")) or str(row["id"])


def person_from_row(row: dict) -> PersonRecord:
    """
    Build a PersonRecord from a directory row.

    Raises:
        InvalidDateFormat: if birthday or anniversary is present but malformed
        KeyError: if the row has no id
    """
    birthday = _clean(row.get("birthday"))
    anniversary = _clean(row.get("anniversary"))

    if birthday is not None:
        parse_month_day(birthday)
    if anniversary is not None:
        parse_month_day(anniversary)

    return PersonRecord(
        identifier=str(row["id"]),
        display_label=get_display_label(row),
        birthday=birthday,
        anniversary=anniversary,
        email=_clean(row.get("email")),
    )


def load_people(rows: list[dict]) -> tuple[list[PersonRecord], list[str]]:
    """
    Validate directory rows, skipping bad ones.

    Returns:
        Tuple of (valid people in input order, error messages for skipped rows)
    """
    people = []
    errors = []

    for row in rows:
        try:
            people.append(person_from_row(row))
        except InvalidDateFormat as e:
            errors.append(f"User '{row.get('id')}': {e}")
        except KeyError:
            errors.append(f"Row without id skipped: {row!r}")

    return people, errors
