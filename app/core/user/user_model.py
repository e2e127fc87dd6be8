"""User table model."""

from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """User record.

    Attributes:
        id: Primary key, assigned on insert
        name: Display name
        email: Email address, indexed for the uniqueness lookup
        hashed_password: bcrypt hash of the password
        created_at: Creation timestamp (UTC)
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(index=True, max_length=255)
    hashed_password: str
    created_at: datetime = Field(default_factory=utc_now)
