#!/usr/bin/env python3
"""
List upcoming birthdays and anniversaries for a company.

Usage:
    uv run python src/scripts/list_upcoming_events.py --company acme --days 30
"""

import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import DB_PATH, UPCOMING_WINDOW_DAYS
from core.database import fetch_company_users, get_connection
from core.validation import load_people
from services.events import collect_upcoming_events, describe_event, events_within


def main(company_id: str, days: int):
    """List events within the window."""
    conn = get_connection(DB_PATH)
    try:
        rows = fetch_company_users(conn, company_id)
    finally:
        conn.close()

    people, skipped = load_people(rows)
    events = events_within(collect_upcoming_events(people), days)

    print(f"Upcoming celebrations for '{company_id}' (next {days} days)\n")
    print("=" * 80)
    for event in events:
        print(f"  {event.display_text:>10}  {describe_event(event)}")
    if not events:
        print("  None")
    print("=" * 80)

    if skipped:
        print(f"\nSkipped {len(skipped)} record(s):")
        for message in skipped:
            print(f"  - {message}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="List upcoming celebrations")
    parser.add_argument("--company", required=True, help="Company ID")
    parser.add_argument(
        "--days", type=int, default=UPCOMING_WINDOW_DAYS, help="Look-ahead window in days"
    )
    args = parser.parse_args()

    main(args.company, args.days)
