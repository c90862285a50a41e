#!/usr/bin/env python3
"""
Post today's birthdays and work anniversaries to a company's channels.

Loads the company directory, projects every birthday/anniversary, and
sends the ones falling on the given date to the company's Slack and Teams
webhooks and notification email.

Usage:
    uv run python src/scripts/send_daily_celebrations.py --company acme --date 2025-11-07
"""

import argparse
import asyncio
import sys
import traceback
from datetime import date, datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import DB_PATH
from core.database import fetch_company, fetch_company_users, get_connection
from core.graph_client import graph_configured
from core.validation import load_people
from services.email import send_celebration_email, send_error_email
from services.events import collect_upcoming_events, format_celebration_message, todays_events
from services.webhooks import notify_company_channels


def parse_as_of(as_of_date_str: str | None) -> date:
    """Parse optional YYYY-MM-DD string, defaulting to today."""
    if as_of_date_str:
        return datetime.strptime(as_of_date_str, "%Y-%m-%d").date()
    return date.today()


async def main(company_id: str, as_of_date_str: str | None = None, dry_run: bool = False):
    """Main entry point."""
    try:
        as_of = parse_as_of(as_of_date_str)
        print(f"Checking celebrations for '{company_id}' on {as_of}")

        # 1. Load company and directory
        conn = get_connection(DB_PATH)
        try:
            company = fetch_company(conn, company_id)
            if company is None:
                raise ValueError(f"Company '{company_id}' not found")
            rows = fetch_company_users(conn, company_id)
        finally:
            conn.close()

        # 2. Validate directory rows
        people, skipped = load_people(rows)
        print(f"Loaded {len(people)} user(s)")
        for message in skipped:
            print(f"  Skipped: {message}")

        # 3. Project events and keep today's
        events = todays_events(collect_upcoming_events(people, as_of))
        if not events:
            print("No celebrations today.")
            return

        text = format_celebration_message(events)
        print(f"\n{text}\n")

        if dry_run:
            print("Dry run, nothing sent.")
            return

        # 4. Chat webhooks
        results = await notify_company_channels(company, text)
        for channel, delivered in results.items():
            print(f"  {channel}: {'sent' if delivered else 'FAILED'}")

        # 5. Email digest
        if company.get("notify_email") and graph_configured():
            await send_celebration_email(events, company["notify_email"], company["name"], as_of)

        print("\nDone!")

    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        if graph_configured():
            await send_error_email(e)
        raise


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Send today's celebrations for a company")
    parser.add_argument("--company", required=True, help="Company ID")
    parser.add_argument(
        "--date",
        help="Date to celebrate (YYYY-MM-DD). Defaults to today.",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Print the message without sending it"
    )
    args = parser.parse_args()

    asyncio.run(main(args.company, args.date, args.dry_run))
