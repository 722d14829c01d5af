"""Application layer DI providers."""

from dishka import Scope, provide

from tavern.application.usecase.auth import RegisterUserUseCase
from tavern.application.usecase.group import (
    CreateGroupUseCase,
    GetGroupUseCase,
    InviteToGroupUseCase,
    JoinGroupUseCase,
)
from tavern.application.usecase.user import GetCurrentUserUseCase
from tavern.config import Settings
from tavern.domain.service import (
    GroupService,
    InvitationService,
    JWTService,
    NotificationService,
    UserService,
)
from tavern.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self,
        user_service: UserService,
        group_service: GroupService,
        invitation_service: InvitationService,
        jwt_service: JWTService,
        settings: Settings,
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(
            user_service=user_service,
            group_service=group_service,
            invitation_service=invitation_service,
            jwt_service=jwt_service,
            settings=settings,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    # Group use cases
    @provide(scope=Scope.REQUEST)
    def get_create_group_use_case(
        self,
        group_service: GroupService,
        user_service: UserService,
        settings: Settings,
    ) -> CreateGroupUseCase:
        """Provide create group use case."""
        return CreateGroupUseCase(
            group_service=group_service, user_service=user_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_group_use_case(
        self, group_service: GroupService, user_service: UserService
    ) -> GetGroupUseCase:
        """Provide get group use case."""
        return GetGroupUseCase(group_service=group_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_join_group_use_case(
        self, group_service: GroupService, user_service: UserService
    ) -> JoinGroupUseCase:
        """Provide join group use case."""
        return JoinGroupUseCase(group_service=group_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_invite_to_group_use_case(
        self,
        user_service: UserService,
        group_service: GroupService,
        invitation_service: InvitationService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> InviteToGroupUseCase:
        """Provide invite to group use case."""
        return InviteToGroupUseCase(
            user_service=user_service,
            group_service=group_service,
            invitation_service=invitation_service,
            notification_service=notification_service,
            settings=settings,
        )
