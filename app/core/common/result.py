"""Result variants returned by service operations.

``Ok`` is a success carrying a value, ``NotFound`` means the record is missing
or the write did not go through, and ``RuleViolation`` is an explicit business
rule rejection.
"""

from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel

from app.core.common.errors import ErrorType

T = TypeVar("T")


class Ok(BaseModel, Generic[T]):
    value: T


class NotFound(BaseModel):
    reason: str = ""


class RuleViolation(BaseModel):
    kind: ErrorType
    message: str = ""


Result = Union[Ok[Any], NotFound, RuleViolation]
