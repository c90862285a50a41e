"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.database import create_tables, get_connection, insert_company, insert_user
from models.people import PersonRecord

TODAY = date(2025, 6, 20)


@pytest.fixture
def today():
    """Fixed reference date for projections."""
    return TODAY


@pytest.fixture
def sample_people():
    """People with a mix of present and missing dates."""
    return [
        PersonRecord("u1", "Ada Lovelace", birthday="1990-06-25", anniversary="2019-07-10"),
        PersonRecord("u2", "grace@acme.example.com", birthday="1985-06-20"),
        PersonRecord("u3", "Linus", anniversary="2021-01-01"),
        PersonRecord("u4", "No Dates"),
    ]


@pytest.fixture
def sample_rows():
    """Directory rows for company 'acme', including one malformed date."""
    return [
        {
            "id": "u1",
            "company_id": "acme",
            "email": "ada@acme.example.com",
            "full_name": "Ada Lovelace",
            "birthday": "1990-06-25",
            "anniversary": "2019-07-10",
        },
        {
            "id": "u2",
            "company_id": "acme",
            "email": "grace@acme.example.com",
            "full_name": "",
            "birthday": "1985-06-20",
            "anniversary": None,
        },
        {
            "id": "u3",
            "company_id": "acme",
            "email": "bad@acme.example.com",
            "full_name": "Bad Date",
            "birthday": "1990-13-01",
            "anniversary": None,
        },
    ]


@pytest.fixture
def db(sample_rows):
    """In-memory directory seeded with company 'acme'."""
    conn = get_connection(":memory:")
    create_tables(conn)
    insert_company(
        conn,
        {
            "id": "acme",
            "name": "Acme Corp",
            "slack_webhook_url": "https://hooks.slack.test/acme",
            "teams_webhook_url": None,
            "notify_email": "people@acme.example.com",
        },
    )
    for row in sample_rows:
        insert_user(conn, row)
    yield conn
    conn.close()
