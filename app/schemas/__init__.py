"""This file contains the schemas for the application."""

from app.schemas.user import (
    ChangePasswordRequest,
    CreatedUser,
    CreateUserRequest,
    MessageResponse,
    UpdateUserRequest,
    UserIdResponse,
    UserSummary,
)

__all__ = [
    "ChangePasswordRequest",
    "CreatedUser",
    "CreateUserRequest",
    "MessageResponse",
    "UpdateUserRequest",
    "UserIdResponse",
    "UserSummary",
]
