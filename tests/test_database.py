"""Tests for the SQLite directory store."""

from core.database import (
    fetch_company,
    fetch_company_users,
    fetch_user,
    insert_company,
    insert_user,
    update_user_dates,
)


def test_fetch_company(db):
    company = fetch_company(db, "acme")
    assert company["name"] == "Acme Corp"
    assert company["slack_webhook_url"] == "https://hooks.slack.test/acme"
    assert fetch_company(db, "missing") is None


def test_fetch_company_users_scoped_to_company(db):
    insert_company(db, {"id": "other", "name": "Other Inc"})
    insert_user(db, {"id": "o1", "company_id": "other", "email": "o1@other.example.com"})

    users = fetch_company_users(db, "acme")

    assert [u["id"] for u in users] == ["u1", "u2", "u3"]
    assert all(u["company_id"] == "acme" for u in users)


def test_offboarded_users_excluded_by_default(db):
    insert_user(db, {"id": "u9", "company_id": "acme", "status": "offboarded"})

    assert "u9" not in [u["id"] for u in fetch_company_users(db, "acme")]
    assert "u9" in [u["id"] for u in fetch_company_users(db, "acme", include_offboarded=True)]


def test_insert_user_defaults_to_active(db):
    insert_user(db, {"id": "u5", "company_id": "acme"})
    assert fetch_user(db, "u5")["status"] == "active"


def test_update_user_dates(db):
    assert update_user_dates(db, "u2", anniversary="2022-03-01")

    user = fetch_user(db, "u2")
    assert user["birthday"] == "1985-06-20"
    assert user["anniversary"] == "2022-03-01"


def test_update_user_dates_clears_with_empty_string(db):
    update_user_dates(db, "u1", birthday="")
    assert fetch_user(db, "u1")["birthday"] is None


def test_update_unknown_user(db):
    assert update_user_dates(db, "nope", birthday="1990-01-01") is False
