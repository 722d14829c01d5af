"""Domain layer DI providers."""

from dishka import Scope, provide

from tavern.config import AuthSettings, Settings
from tavern.domain.repository import GroupRepository, UserRepository
from tavern.domain.service import (
    EmailClient,
    GroupService,
    InvitationService,
    JWTService,
    NotificationService,
    UserService,
)
from tavern.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_group_service(
        self,
        group_repository: GroupRepository,
        user_repository: UserRepository,
        user_service: UserService,
    ) -> GroupService:
        """Provide group domain service."""
        return GroupService(
            group_repository=group_repository,
            user_repository=user_repository,
            user_service=user_service,
        )

    @provide
    def get_invitation_service(
        self, user_repository: UserRepository
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(user_repository=user_repository)

    @provide
    def get_notification_service(
        self, email_client: EmailClient, jwt_service: JWTService, settings: Settings
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            email_client=email_client, jwt_service=jwt_service, settings=settings
        )
