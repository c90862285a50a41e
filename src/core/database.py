"""
SQLite directory store for companies and their users.
"""

import sqlite3
from pathlib import Path

from core.config import DB_PATH

USER_COLUMNS = ("id", "company_id", "email", "full_name", "birthday", "anniversary", "status")
COMPANY_COLUMNS = ("id", "name", "slack_webhook_url", "teams_webhook_url", "notify_email")


def get_connection(db_path: Path | str = DB_PATH) -> sqlite3.Connection:
    """Get a database connection with dict-like rows."""
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def create_tables(conn: sqlite3.Connection):
    """Create directory and API logging tables if they don't exist."""
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS companies (
            id TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            slack_webhook_url TEXT,
            teams_webhook_url TEXT,
            notify_email TEXT,
            create_date TEXT DEFAULT CURRENT_TIMESTAMP
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            company_id TEXT NOT NULL,
            email TEXT,
            full_name TEXT,
            birthday TEXT,
            anniversary TEXT,
            status TEXT NOT NULL DEFAULT 'active'
                CHECK(status IN ('active', 'invited', 'offboarded')),
            FOREIGN KEY (company_id) REFERENCES companies(id)
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS api_requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            request_id TEXT UNIQUE NOT NULL,
            timestamp TEXT NOT NULL,
            endpoint TEXT NOT NULL,
            method TEXT NOT NULL,
            client_ip TEXT,
            company_id TEXT,
            status_code INTEGER NOT NULL,
            error_code TEXT,
            error_message TEXT,
            processing_time_ms INTEGER NOT NULL,
            events_returned INTEGER
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS api_request_details (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            request_id TEXT NOT NULL,
            detail_type TEXT NOT NULL CHECK(detail_type IN ('validation_error', 'skipped_record', 'warning')),
            message TEXT NOT NULL,
            FOREIGN KEY (request_id) REFERENCES api_requests(request_id)
        )
    """)

    cursor.execute("CREATE INDEX IF NOT EXISTS idx_users_company ON users(company_id)")
    cursor.execute(
        "CREATE INDEX IF NOT EXISTS idx_api_requests_timestamp ON api_requests(timestamp)"
    )
    cursor.execute(
        "CREATE INDEX IF NOT EXISTS idx_api_request_details_request ON api_request_details(request_id)"
    )

    conn.commit()


def insert_company(conn: sqlite3.Connection, company: dict):
    """Insert or replace a company record."""
    values = [company.get(column) for column in COMPANY_COLUMNS]
    conn.execute(
        f"INSERT OR REPLACE INTO companies ({', '.join(COMPANY_COLUMNS)}) VALUES (?, ?, ?, ?, ?)",
        values,
    )
    conn.commit()


def fetch_company(conn: sqlite3.Connection, company_id: str) -> dict | None:
    """Fetch a single company, or None if it doesn't exist."""
    cursor = conn.execute(
        f"SELECT {', '.join(COMPANY_COLUMNS)} FROM companies WHERE id = ?",
        (company_id,),
    )
    row = cursor.fetchone()
    return dict(row) if row else None


def insert_user(conn: sqlite3.Connection, user: dict):
    """Insert or replace a user record. Status defaults to 'active'."""
    values = [user.get(column) for column in USER_COLUMNS]
    values[-1] = values[-1] or "active"
    conn.execute(
        f"INSERT OR REPLACE INTO users ({', '.join(USER_COLUMNS)}) VALUES (?, ?, ?, ?, ?, ?, ?)",
        values,
    )
    conn.commit()


def fetch_company_users(
    conn: sqlite3.Connection, company_id: str, include_offboarded: bool = False
) -> list[dict]:
    """Fetch all users of a company, ordered by id."""
    query = f"SELECT {', '.join(USER_COLUMNS)} FROM users WHERE company_id = ?"
    if not include_offboarded:
        query += " AND status != 'offboarded'"
    query += " ORDER BY id"

    cursor = conn.execute(query, (company_id,))
    return [dict(row) for row in cursor.fetchall()]


def fetch_user(conn: sqlite3.Connection, user_id: str) -> dict | None:
    """Fetch a single user's profile, or None if it doesn't exist."""
    cursor = conn.execute(
        f"SELECT {', '.join(USER_COLUMNS)} FROM users WHERE id = ?",
        (user_id,),
    )
    row = cursor.fetchone()
    return dict(row) if row else None


def update_user_dates(
    conn: sqlite3.Connection,
    user_id: str,
    birthday: str | None = None,
    anniversary: str | None = None,
) -> bool:
    """
    Update a user's birthday and/or anniversary.

    Only fields passed as non-None are written; an empty string clears a date.

    Returns:
        True if the user exists
    """
    updates = {}
    if birthday is not None:
        updates["birthday"] = birthday or None
    if anniversary is not None:
        updates["anniversary"] = anniversary or None

    if fetch_user(conn, user_id) is None:
        return False

    if updates:
        assignments = ", ".join(f"{column} = ?" for column in updates)
        conn.execute(
            f"UPDATE users SET {assignments} WHERE id = ?",
            (*updates.values(), user_id),
        )
        conn.commit()
    return True
