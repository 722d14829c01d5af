"""Email infrastructure providers."""

from dishka import Scope, provide

from tavern.adapter.email import HttpEmailClient
from tavern.config import EmailSettings
from tavern.domain.service import EmailClient
from tavern.util.di.base import ProviderBase
from tavern.util.observability import instrument_httpx


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_client(self, settings: EmailSettings) -> EmailClient:
        """Provide the HTTP transactional email client."""
        instrument_httpx()
        return HttpEmailClient(settings=settings)
