"""Request and response models for the users API."""

from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
)
from pydantic.networks import validate_email


def check_email(value: str) -> str:
    """Reject malformed addresses but keep the value exactly as sent."""
    validate_email(value)
    return value


Email = Annotated[str, AfterValidator(check_email)]


class CreateUserRequest(BaseModel):
    """Body of a create user request.

    Attributes:
        name: Display name
        email: Email address
        password: Plaintext password
        password_confirm: Repeated password, sent as ``_passwordconfirm``
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100, title="Name")
    email: Email = Field(..., title="Email")
    password: str = Field(..., min_length=6, max_length=32, title="Password")
    password_confirm: str = Field(
        ..., alias="_passwordconfirm", min_length=6, max_length=32, title="_Passwordconfirm"
    )


class UpdateUserRequest(BaseModel):
    """Body of an update user request."""

    name: str = Field(..., min_length=1, max_length=100, title="Name")
    email: Email = Field(..., title="Email")


class ChangePasswordRequest(BaseModel):
    """Body of a change password request."""

    model_config = ConfigDict(populate_by_name=True)

    old_password: str = Field(..., alias="oldPassword", title="oldPassword")
    new_password: str = Field(..., alias="newPassword", min_length=6, max_length=32, title="newPassword")
    confirm_new_password: str = Field(
        ..., alias="confirmNewPassword", min_length=6, max_length=32, title="confirmNewPassword"
    )


class UserSummary(BaseModel):
    """Public view of a user. The password hash is never part of it."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class CreatedUser(BaseModel):
    name: str
    email: str


class UserIdResponse(BaseModel):
    id: int


class MessageResponse(BaseModel):
    message: str
