"""Users API endpoints.

Request bodies are validated by the schemas in ``app.schemas.user`` before a
handler runs. Handlers raise ``AppError`` for the central exception handler.
"""

from typing import List

from fastapi import APIRouter, Depends

from app.api.dependencies import get_user_service
from app.core.common.errors import ErrorType, error_responder
from app.core.common.logging import logger
from app.core.common.result import Ok
from app.core.user import UserService
from app.schemas.user import (
    ChangePasswordRequest,
    CreatedUser,
    CreateUserRequest,
    MessageResponse,
    UpdateUserRequest,
    UserIdResponse,
    UserSummary,
)

router = APIRouter()


@router.get("", response_model=List[UserSummary])
async def get_users(service: UserService = Depends(get_user_service)):
    """Get list of users.

    Returns:
        List[UserSummary]: All users
    """
    return await service.get_users()


@router.get("/{user_id}", response_model=UserSummary)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Get user detail.

    Raises:
        AppError: UNPROCESSABLE_ENTITY if the user does not exist
    """
    result = await service.get_user(user_id)
    if not isinstance(result, Ok):
        raise error_responder(ErrorType.UNPROCESSABLE_ENTITY, "Unknown user")

    return result.value


@router.post("", response_model=CreatedUser)
async def create_user(body: CreateUserRequest, service: UserService = Depends(get_user_service)):
    """Create a user.

    The password confirmation is checked first, then the email uniqueness.

    Raises:
        AppError: INVALID_PASSWORD, EMAIL_ALREADY_TAKEN or UNPROCESSABLE_ENTITY
    """
    if body.password != body.password_confirm:
        raise error_responder(ErrorType.INVALID_PASSWORD, "Password not matching")

    if await service.check_email_exist(body.email):
        raise error_responder(ErrorType.EMAIL_ALREADY_TAKEN, "Email already taken")

    result = await service.create_user(body.name, body.email, body.password)
    if not isinstance(result, Ok):
        raise error_responder(ErrorType.UNPROCESSABLE_ENTITY, "Unprocessable entity")

    return result.value


@router.put("/{user_id}", response_model=UserIdResponse)
async def update_user(user_id: int, body: UpdateUserRequest, service: UserService = Depends(get_user_service)):
    """Update a user's name and email.

    Raises:
        AppError: UNPROCESSABLE_ENTITY if the user is missing or the update failed
    """
    result = await service.update_user(user_id, body.name, body.email)
    if not isinstance(result, Ok):
        raise error_responder(ErrorType.UNPROCESSABLE_ENTITY, "Failed to update user")

    return UserIdResponse(id=user_id)


@router.delete("/{user_id}", response_model=UserIdResponse)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Delete a user.

    Raises:
        AppError: UNPROCESSABLE_ENTITY if the user is missing or the delete failed
    """
    result = await service.delete_user(user_id)
    if not isinstance(result, Ok):
        raise error_responder(ErrorType.UNPROCESSABLE_ENTITY, "Failed to delete user")

    return UserIdResponse(id=user_id)


@router.patch("/{user_id}/password", response_model=MessageResponse)
async def update_password(
    user_id: int,
    body: ChangePasswordRequest,
    service: UserService = Depends(get_user_service),
):
    """Change a user's password.

    Raises:
        AppError: INVALID_PASSWORD if the confirmation differs or the old password is wrong
    """
    if body.new_password != body.confirm_new_password:
        raise error_responder(ErrorType.INVALID_PASSWORD, "Password confirm do not match")

    result = await service.change_password(user_id, body.old_password, body.new_password)
    if not isinstance(result, Ok):
        logger.info("password_change_failed", user_id=user_id, outcome=type(result).__name__)
        raise error_responder(
            ErrorType.INVALID_PASSWORD,
            "Change password failed, make sure your old password is correct",
        )

    return MessageResponse(message="Password changed successfully")
