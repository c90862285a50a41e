"""Tests for Slack/Teams webhook delivery."""

import asyncio
import json

import httpx

from services.webhooks import notify_company_channels, send_slack_message, send_teams_message


def make_client(status_code: int = 200, sent: list | None = None) -> httpx.AsyncClient:
    """AsyncClient answering every request with status_code, recording requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        if sent is not None:
            sent.append(request)
        return httpx.Response(status_code, text="ok" if status_code < 400 else "invalid_token")

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_slack_posts_text_payload():
    sent = []
    client = make_client(200, sent)

    delivered = asyncio.run(send_slack_message("https://hooks.slack.test/x", "hi", client))

    assert delivered is True
    assert str(sent[0].url) == "https://hooks.slack.test/x"
    assert sent[0].headers["content-type"] == "application/json"
    assert json.loads(sent[0].content) == {"text": "hi"}


def test_teams_failure_returns_false(capsys):
    client = make_client(400)

    delivered = asyncio.run(send_teams_message("https://teams.test/hook", "hi", client))

    assert delivered is False
    assert "[Teams] Failed to send message: 400" in capsys.readouterr().out


def test_transport_error_returns_false(capsys):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))

    delivered = asyncio.run(send_slack_message("https://hooks.slack.test/x", "hi", client))

    assert delivered is False
    assert "[Slack] Error sending message" in capsys.readouterr().out


def test_notify_company_channels_only_configured():
    sent = []
    client = make_client(200, sent)
    company = {"slack_webhook_url": "https://hooks.slack.test/acme", "teams_webhook_url": None}

    results = asyncio.run(notify_company_channels(company, "hi", client))

    assert results == {"slack": True}
    assert len(sent) == 1


def test_notify_company_channels_both():
    client = make_client(200)
    company = {
        "slack_webhook_url": "https://hooks.slack.test/acme",
        "teams_webhook_url": "https://teams.test/acme",
    }

    results = asyncio.run(notify_company_channels(company, "hi", client))

    assert results == {"slack": True, "teams": True}
