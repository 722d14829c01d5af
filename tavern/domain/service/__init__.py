"""Domain services."""

from .base import Service
from .group_service import GroupService
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .notification_service import (
    EmailClient,
    EmailMessage,
    EmailRecipient,
    NotificationService,
    TemplateVariable,
)
from .user_service import UserService

__all__ = [
    "EmailClient",
    "EmailMessage",
    "EmailRecipient",
    "GroupService",
    "InvitationService",
    "JWTService",
    "NotificationService",
    "Service",
    "TemplateVariable",
    "UserService",
]
