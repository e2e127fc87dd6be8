"""User service: business rules on top of the user repository."""

from typing import List

from sqlalchemy.exc import SQLAlchemyError

from app.core.common.errors import ErrorType, PasswordHashingError
from app.core.common.logging import logger
from app.core.common.password import hash_password, verify_password
from app.core.common.result import NotFound, Ok, Result, RuleViolation
from app.core.user.user_repository import UserRepository
from app.schemas.user import CreatedUser, UserSummary


class UserService:
    """Service class for user operations.

    Repository failures are logged and turned into ``NotFound`` results; only
    password hashing failures are raised.
    """

    def __init__(self, repository: UserRepository):
        """Initialize the service.

        Args:
            repository: Storage for user records
        """
        self.repository = repository

    async def get_users(self) -> List[UserSummary]:
        """Get all users without their password hashes.

        Returns:
            List[UserSummary]: Users in repository order
        """
        users = await self.repository.get_users()
        return [UserSummary.model_validate(user) for user in users]

    async def get_user(self, user_id: int) -> Result:
        """Get user detail.

        Args:
            user_id: User ID

        Returns:
            Result: ``Ok(UserSummary)`` or ``NotFound``
        """
        user = await self.repository.get_user(user_id)
        if not user:
            return NotFound(reason="user_not_found")

        return Ok(value=UserSummary.model_validate(user))

    async def create_user(self, name: str, email: str, password: str) -> Result:
        """Hash the password and store a new user.

        Email uniqueness is not checked here; see ``check_email_exist``.

        Args:
            name: Display name
            email: Email address
            password: Plaintext password

        Returns:
            Result: ``Ok(CreatedUser)`` or ``NotFound`` when the insert failed

        Raises:
            PasswordHashingError: If the password could not be hashed
        """
        hashed_password = await self.hash_user_password(password)

        try:
            await self.repository.create_user(name, email, hashed_password)
        except SQLAlchemyError as e:
            self.repository.rollback()
            logger.error("user_create_failed", error=str(e))
            return NotFound(reason="create_failed")

        return Ok(value=CreatedUser(name=name, email=email))

    async def update_user(self, user_id: int, name: str, email: str) -> Result:
        """Update a user's name and email.

        Args:
            user_id: User ID
            name: Display name
            email: Email address

        Returns:
            Result: ``Ok(user_id)`` or ``NotFound``
        """
        user = await self.repository.get_user(user_id)
        if not user:
            return NotFound(reason="user_not_found")

        try:
            await self.repository.update_user(user_id, name, email)
        except SQLAlchemyError as e:
            self.repository.rollback()
            logger.error("user_update_failed", user_id=user_id, error=str(e))
            return NotFound(reason="update_failed")

        return Ok(value=user_id)

    async def delete_user(self, user_id: int) -> Result:
        """Delete a user.

        Args:
            user_id: User ID

        Returns:
            Result: ``Ok(user_id)`` or ``NotFound``
        """
        user = await self.repository.get_user(user_id)
        if not user:
            return NotFound(reason="user_not_found")

        try:
            await self.repository.delete_user(user_id)
        except SQLAlchemyError as e:
            self.repository.rollback()
            logger.error("user_delete_failed", user_id=user_id, error=str(e))
            return NotFound(reason="delete_failed")

        return Ok(value=user_id)

    async def check_email_exist(self, email: str) -> bool:
        """Check whether the email is already used.

        A failed lookup is logged and reported as not taken.

        Args:
            email: Email address

        Returns:
            bool: True if a user with this email exists
        """
        try:
            return await self.repository.check_user_by_email(email)
        except SQLAlchemyError as e:
            self.repository.rollback()
            logger.error("email_lookup_failed", error=str(e))
            return False

    async def hash_user_password(self, password: str) -> str:
        """Hash a plaintext password.

        Raises:
            PasswordHashingError: If bcrypt rejects the input
        """
        try:
            return await hash_password(password)
        except (ValueError, TypeError) as e:
            logger.error("password_hashing_failed", error=str(e))
            raise PasswordHashingError("Password hashing error") from e

    async def change_password(self, user_id: int, old_password: str, new_password: str) -> Result:
        """Change a user's password after verifying the current one.

        Args:
            user_id: User ID
            old_password: Current plaintext password
            new_password: New plaintext password

        Returns:
            Result: ``Ok(user_id)``, ``NotFound`` when the user is missing or the
            update failed, ``RuleViolation`` when the old password is wrong
        """
        user = await self.repository.get_user(user_id)
        if not user:
            return NotFound(reason="user_not_found")

        if not await verify_password(old_password, user.hashed_password):
            logger.info("password_change_rejected", user_id=user_id)
            return RuleViolation(kind=ErrorType.INVALID_PASSWORD, message="old_password_mismatch")

        hashed_new_password = await self.hash_user_password(new_password)

        try:
            await self.repository.update_password(user_id, hashed_new_password)
        except SQLAlchemyError as e:
            self.repository.rollback()
            logger.error("password_update_failed", user_id=user_id, error=str(e))
            return NotFound(reason="update_failed")

        return Ok(value=user_id)
