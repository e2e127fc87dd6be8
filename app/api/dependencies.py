"""FastAPI dependencies shared by the API routers."""

from typing import AsyncGenerator

from fastapi import Request

from app.core.user import UserService
from app.services.database import DatabaseService


def get_database(request: Request) -> DatabaseService:
    """Return the database service attached to the running application."""
    return request.app.state.database


async def get_user_service(request: Request) -> AsyncGenerator[UserService, None]:
    """Yield a user service backed by a per-request session.

    The session is closed once the response has been produced.
    """
    database = get_database(request)
    session = database.new_session()
    try:
        yield UserService(database.get_user_repository(session))
    finally:
        session.close()
