"""Unit tests for the HTTP email client."""

import json

import httpx
import pytest

from tavern.adapter.email import HttpEmailClient
from tavern.adapter.error import EmailDeliveryError
from tavern.config import EmailSettings
from tavern.domain.service import EmailMessage, EmailRecipient, TemplateVariable


def _message() -> EmailMessage:
    return EmailMessage(
        template="invite-friend",
        to=[EmailRecipient(email="friend@example.com", name="Friend")],
        variables=[
            TemplateVariable(name="LINK", content="http://localhost:3000/x"),
            TemplateVariable(name="INVITER", content="alice"),
        ],
    )


class TestHttpEmailClient:
    """Tests for HttpEmailClient."""

    @pytest.mark.asyncio
    async def test_posts_template_message(self):
        """Should POST the template payload with the bearer API key."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"status": "queued"})

        settings = EmailSettings(
            api_url="https://mail.test/send", api_key="secret", from_address="T <t@t>"
        )
        client = HttpEmailClient(settings, transport=httpx.MockTransport(handler))

        await client.send(_message())

        assert len(requests) == 1
        request = requests[0]
        assert str(request.url) == "https://mail.test/send"
        assert request.headers["Authorization"] == "Bearer secret"
        assert json.loads(request.content) == {
            "from": "T <t@t>",
            "template": "invite-friend",
            "to": [{"email": "friend@example.com", "name": "Friend"}],
            "variables": [
                {"name": "LINK", "content": "http://localhost:3000/x"},
                {"name": "INVITER", "content": "alice"},
            ],
        }

    @pytest.mark.asyncio
    async def test_provider_error_raises(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(500))
        client = HttpEmailClient(EmailSettings(api_key="secret"), transport=transport)

        with pytest.raises(EmailDeliveryError):
            await client.send(_message())

    @pytest.mark.asyncio
    async def test_unreachable_provider_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = HttpEmailClient(
            EmailSettings(api_key="secret"), transport=httpx.MockTransport(handler)
        )

        with pytest.raises(EmailDeliveryError):
            await client.send(_message())

    @pytest.mark.asyncio
    async def test_without_api_key_nothing_is_sent(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("provider should not be called")

        client = HttpEmailClient(
            EmailSettings(api_key=None), transport=httpx.MockTransport(handler)
        )

        await client.send(_message())
