"""User repository for managing user database operations."""

from typing import List, Optional

from sqlmodel import Session, select

from app.core.common.logging import logger
from app.core.user.user_model import User


class UserRepository:
    """Repository class for user database operations.

    This class handles all database operations related to Users. Write methods
    commit immediately; callers roll back through ``rollback`` on failure.
    Session calls are synchronous and run on the event loop thread.
    """

    def __init__(self, session: Session):
        """Initialize user repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    async def get_users(self) -> List[User]:
        """Get all users ordered by ID.

        Returns:
            List[User]: All stored users
        """
        statement = select(User).order_by(User.id)
        return list(self.session.exec(statement).all())

    async def get_user(self, user_id: int) -> Optional[User]:
        """Get a user by ID.

        Args:
            user_id: The ID of the user to retrieve

        Returns:
            Optional[User]: The user if found, None otherwise
        """
        user = self.session.get(User, user_id)
        return user

    async def create_user(self, name: str, email: str, hashed_password: str) -> User:
        """Create a new user.

        Args:
            name: Display name
            email: User's email address
            hashed_password: Hashed password

        Returns:
            User: The created user
        """
        user = User(name=name, email=email, hashed_password=hashed_password)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        logger.info("user_created", user_id=user.id)
        return user

    async def update_user(self, user_id: int, name: str, email: str) -> Optional[User]:
        """Update a user's name and email.

        Args:
            user_id: The ID of the user to update
            name: New display name
            email: New email address

        Returns:
            Optional[User]: The updated user, None if it does not exist
        """
        user = self.session.get(User, user_id)
        if not user:
            return None

        user.name = name
        user.email = email
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        logger.info("user_updated", user_id=user_id)
        return user

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user by ID.

        Args:
            user_id: The ID of the user to delete

        Returns:
            bool: True if deletion was successful, False if user not found
        """
        user = self.session.get(User, user_id)
        if not user:
            return False

        self.session.delete(user)
        self.session.commit()
        logger.info("user_deleted", user_id=user_id)
        return True

    async def check_user_by_email(self, email: str) -> bool:
        """Check whether a user with the given email exists.

        Args:
            email: The email to look up

        Returns:
            bool: True if a user already uses the email
        """
        statement = select(User.id).where(User.email == email)
        return self.session.exec(statement).first() is not None

    async def update_password(self, user_id: int, hashed_password: str) -> bool:
        """Replace a user's password hash.

        Args:
            user_id: The ID of the user
            hashed_password: The new hashed password

        Returns:
            bool: True if updated, False if user not found
        """
        user = self.session.get(User, user_id)
        if not user:
            return False

        user.hashed_password = hashed_password
        self.session.add(user)
        self.session.commit()
        logger.info("user_password_updated", user_id=user_id)
        return True

    def rollback(self) -> None:
        """Roll back the current transaction after a failed write."""
        self.session.rollback()
