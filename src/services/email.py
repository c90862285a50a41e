"""
Email sending for celebration digests and script errors.
"""

import traceback
from datetime import date

from msgraph.generated.models.body_type import BodyType
from msgraph.generated.models.email_address import EmailAddress
from msgraph.generated.models.item_body import ItemBody
from msgraph.generated.models.message import Message
from msgraph.generated.models.recipient import Recipient
from msgraph.generated.users.item.send_mail.send_mail_post_request_body import (
    SendMailPostRequestBody,
)

from core.config import ERROR_EMAIL, FROM_EMAIL
from core.graph_client import get_graph_client
from models.people import ProjectedEvent
from services.events import describe_event


def format_date_for_subject(d: date) -> str:
    """Format date for email subject, e.g. 'Nov 7th 2025'."""
    day = d.day
    suffix = "th" if 11 <= day <= 13 else {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return d.strftime(f"%b {day}{suffix} %Y")


def format_celebration_email(events: list[ProjectedEvent], company_name: str, as_of: date) -> str:
    """Format celebration events into a plain-text email body."""
    lines = [f"Celebrations for {company_name} - {format_date_for_subject(as_of)}", ""]

    if not events:
        lines.append("No upcoming birthdays or anniversaries.")
        return "\n".join(lines)

    for event in events:
        lines.append(f"  - {describe_event(event)} ({event.display_text})")

    return "\n".join(lines)


async def send_celebration_email(
    events: list[ProjectedEvent], to_address: str, company_name: str, as_of: date
):
    """Send the celebration digest to a company's notification address."""
    graph = get_graph_client()
    subject = f"Cakeday celebrations {format_date_for_subject(as_of)}"

    message = Message(
        subject=subject,
        body=ItemBody(
            content_type=BodyType.Text,
            content=format_celebration_email(events, company_name, as_of),
        ),
        to_recipients=[Recipient(email_address=EmailAddress(address=to_address))],
    )

    request_body = SendMailPostRequestBody(message=message, save_to_sent_items=True)

    await graph.users.by_user_id(FROM_EMAIL).send_mail.post(request_body)
    print(f"Sent celebration email to {to_address}")


async def send_error_email(error: Exception):
    """Send error notification email."""
    if not ERROR_EMAIL:
        print("No error email configured, skipping notification")
        return

    graph = get_graph_client()
    subject = "Cakeday Celebrations - Script Error"
    body_text = f"An error occurred while sending celebrations:\n\n{traceback.format_exc()}"

    message = Message(
        subject=subject,
        body=ItemBody(content_type=BodyType.Text, content=body_text),
        to_recipients=[Recipient(email_address=EmailAddress(address=ERROR_EMAIL))],
    )

    request_body = SendMailPostRequestBody(message=message, save_to_sent_items=True)

    try:
        await graph.users.by_user_id(FROM_EMAIL).send_mail.post(request_body)
        print(f"Sent error email to {ERROR_EMAIL}")
    except Exception as e:
        print(f"Failed to send error email: {e}")
