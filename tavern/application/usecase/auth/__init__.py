"""Auth use cases."""

from tavern.application.usecase.auth.register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)

__all__ = [
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
]
