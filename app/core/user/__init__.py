"""User module."""

from app.core.user.user_model import User
from app.core.user.user_repository import UserRepository
from app.core.user.user_service import UserService

__all__ = ["User", "UserRepository", "UserService"]
