"""Configuration providers."""

from dishka import Scope, provide

from tavern.config import AuthSettings, EmailSettings, Settings
from tavern.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the sections services depend on directly.

    Settings are read once per container, so tests that change the
    environment get fresh values with a fresh container.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        return settings.email
