#!/usr/bin/env python3
"""
Generate a demo company directory with birthdays and work anniversaries.

Seeds the Cakeday database with fake users so the API and scripts have
something to show.

Usage:
    uv run python tests/fixtures/generate_people.py --company acme --count 40
"""

import argparse
import random
import sys
from datetime import date, timedelta
from pathlib import Path

from faker import Faker

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from core.config import DB_PATH
from core.database import create_tables, get_connection, insert_company, insert_user

fake = Faker()

# Share of users with each date filled in (profiles are often incomplete)
BIRTHDAY_RATE = 0.8
ANNIVERSARY_RATE = 0.7
INVITED_RATE = 0.1


def generate_user(company_id: str, index: int) -> dict:
    """Generate one fake directory user."""
    name = fake.name()
    email = f"{name.lower().replace(' ', '.')}@{company_id}.example.com"

    birthday = None
    if random.random() < BIRTHDAY_RATE:
        birthday = fake.date_of_birth(minimum_age=20, maximum_age=65).isoformat()

    anniversary = None
    if random.random() < ANNIVERSARY_RATE:
        anniversary = fake.date_between(start_date="-15y", end_date="-30d").isoformat()

    return {
        "id": f"{company_id}-{index:04d}",
        "company_id": company_id,
        "email": email,
        "full_name": name,
        "birthday": birthday,
        "anniversary": anniversary,
        "status": "invited" if random.random() < INVITED_RATE else "active",
    }


def generate_people(company_id: str, count: int) -> list[dict]:
    """Generate users, making sure somebody celebrates today and this week."""
    users = [generate_user(company_id, i) for i in range(count)]

    today = date.today()
    if users:
        users[0]["birthday"] = f"{today.year - 30}-{today.month:02d}-{today.day:02d}"
    if len(users) > 1:
        soon = today + timedelta(days=3)
        users[1]["anniversary"] = f"{soon.year - 5}-{soon.month:02d}-{soon.day:02d}"

    return users


def print_summary(users: list[dict]):
    """Print summary statistics."""
    print(f"\nTotal users generated: {len(users)}")
    print(f"  With birthday: {sum(1 for u in users if u['birthday'])}")
    print(f"  With anniversary: {sum(1 for u in users if u['anniversary'])}")
    print(f"  Invited: {sum(1 for u in users if u['status'] == 'invited')}")


def main(company_id: str, count: int):
    print("Creating database and generating directory...")

    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(DB_PATH)
    create_tables(conn)

    insert_company(conn, {"id": company_id, "name": fake.company()})
    users = generate_people(company_id, count)
    for user in users:
        insert_user(conn, user)

    print_summary(users)

    conn.close()
    print(f"\nDatabase saved to: {DB_PATH}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed a demo company directory")
    parser.add_argument("--company", default="acme", help="Company ID")
    parser.add_argument("--count", type=int, default=40, help="Number of users")
    args = parser.parse_args()

    main(args.company, args.count)
