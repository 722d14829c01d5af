"""Transactional email client.

Sends template emails through an HTTP email provider. The provider
receives the template name plus the variables to substitute, so no HTML
is rendered here.
"""

import httpx
import logfire

from tavern.adapter.error import EmailDeliveryError
from tavern.config import EmailSettings
from tavern.domain.service.notification_service import EmailClient, EmailMessage


class HttpEmailClient(EmailClient):
    """Email client posting template messages to the provider's HTTP API."""

    def __init__(
        self,
        settings: EmailSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize email client.

        Args:
            settings: Email settings (endpoint, API key, sender)
            transport: Optional httpx transport, used to stub the provider
        """
        self.settings = settings
        self.transport = transport

    def _payload(self, message: EmailMessage) -> dict:
        return {
            "from": self.settings.from_address,
            "template": message.template,
            "to": [r.model_dump(exclude_none=True) for r in message.to],
            "variables": [v.model_dump() for v in message.variables],
        }

    async def send(self, message: EmailMessage) -> None:
        """Send a template email.

        Without an API key the message is logged and skipped.

        Raises:
            EmailDeliveryError: If the provider returns an error or is unreachable
        """
        if not self.settings.api_key:
            logfire.warn(
                "Email send skipped (no API key configured)",
                template=message.template,
                recipients=len(message.to),
            )
            return

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.settings.api_url,
                    json=self._payload(message),
                    headers={"Authorization": f"Bearer {self.settings.api_key}"},
                    timeout=self.settings.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.error("Email provider HTTP error", error=str(e))
            raise EmailDeliveryError(f"HTTP error sending email: {e}")

        if response.status_code >= 400:
            logfire.error(
                "Email provider rejected message",
                status_code=response.status_code,
                error=response.text,
                template=message.template,
            )
            raise EmailDeliveryError(
                f"Email provider returned {response.status_code}"
            )

        logfire.info(
            "Email sent",
            template=message.template,
            recipients=len(message.to),
        )


class MockEmailClient(EmailClient):
    """Email client that keeps messages in memory instead of sending them."""

    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        self.sent.append(message)
