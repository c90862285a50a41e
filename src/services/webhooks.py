"""
Slack and Microsoft Teams incoming-webhook notifications.

Both services accept a JSON body with a "text" property. Failures are
reported and return False so one broken channel doesn't stop the others.
"""

import httpx

from core.config import WEBHOOK_TIMEOUT_SECONDS


async def _post_text(
    channel: str, webhook_url: str, text: str, client: httpx.AsyncClient | None = None
) -> bool:
    """POST {"text": text} to a webhook URL."""
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=WEBHOOK_TIMEOUT_SECONDS) as own_client:
                response = await own_client.post(webhook_url, json={"text": text})
        else:
            response = await client.post(webhook_url, json={"text": text})
    except httpx.HTTPError as e:
        print(f"[{channel}] Error sending message: {e}")
        return False

    if response.is_success:
        return True

    print(f"[{channel}] Failed to send message: {response.status_code} {response.text}")
    return False


async def send_slack_message(
    webhook_url: str, text: str, client: httpx.AsyncClient | None = None
) -> bool:
    """Send a message to a Slack channel using an Incoming Webhook URL."""
    return await _post_text("Slack", webhook_url, text, client)


async def send_teams_message(
    webhook_url: str, text: str, client: httpx.AsyncClient | None = None
) -> bool:
    """Send a message to a Microsoft Teams channel using an Incoming Webhook URL."""
    return await _post_text("Teams", webhook_url, text, client)


async def notify_company_channels(
    company: dict, text: str, client: httpx.AsyncClient | None = None
) -> dict[str, bool]:
    """
    Post text to every webhook configured for a company.

    Returns:
        Mapping of channel name -> delivered, for configured channels only
    """
    results = {}
    if company.get("slack_webhook_url"):
        results["slack"] = await send_slack_message(company["slack_webhook_url"], text, client)
    if company.get("teams_webhook_url"):
        results["teams"] = await send_teams_message(company["teams_webhook_url"], text, client)
    return results
