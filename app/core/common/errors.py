"""Domain error kinds and the error type raised by API handlers."""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorType(Enum):
    """Error kinds with their HTTP status, code and default description."""

    SERVER = (500, "SERVER_ERROR", "Internal server error")
    NOT_FOUND = (404, "NOT_FOUND_ERROR", "Route not found")
    VALIDATION = (400, "VALIDATION_ERROR", "Invalid request")
    INVALID_PASSWORD = (422, "INVALID_PASSWORD_ERROR", "Invalid password")
    EMAIL_ALREADY_TAKEN = (422, "EMAIL_ALREADY_TAKEN_ERROR", "Email is already taken")
    UNPROCESSABLE_ENTITY = (422, "UNPROCESSABLE_ENTITY_ERROR", "Unprocessable entity")

    def __init__(self, status: int, code: str, description: str):
        self.status = status
        self.code = code
        self.description = description


class AppError(Exception):
    """Error carrying an ``ErrorType`` and a caller facing message.

    Raised from request handlers and rendered by the central exception handler.
    """

    def __init__(
        self,
        error_type: ErrorType,
        message: Optional[str] = None,
        validation_errors: Optional[List[Dict[str, Any]]] = None,
    ):
        self.error_type = error_type
        self.message = message or error_type.description
        self.validation_errors = validation_errors
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        """Build the JSON body sent to the client."""
        body: Dict[str, Any] = {
            "statusCode": self.error_type.status,
            "error": self.error_type.code,
            "description": self.error_type.description,
            "message": self.message,
        }
        if self.validation_errors is not None:
            body["validationErrors"] = self.validation_errors
        return body


def error_responder(error_type: ErrorType, message: Optional[str] = None, **kwargs: Any) -> AppError:
    """Create an ``AppError`` for the given kind."""
    return AppError(error_type, message, **kwargs)


class PasswordHashingError(Exception):
    """Raised when a password could not be hashed."""
