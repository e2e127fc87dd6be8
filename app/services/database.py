"""This file contains the database service for the application."""

from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool, StaticPool
from sqlmodel import (
    Session,
    SQLModel,
    create_engine,
    select,
)

from app.core.common.config import (
    Environment,
    settings,
)
from app.core.common.logging import logger
from app.core.user import UserRepository


class DatabaseService:
    """Service class for database operations.

    Owns the SQLAlchemy engine and hands out repositories bound to new sessions.
    The engine is created by ``open`` and disposed by ``close``; both are called
    from the application lifespan.
    """

    def __init__(self, url: Optional[str] = None):
        """Initialize database service.

        Args:
            url: Database URL, defaults to ``settings.database_url``
        """
        self.url = url or settings.database_url
        self._engine: Optional[Engine] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database service is not open")
        return self._engine

    def open(self) -> None:
        """Create the engine and the tables if they don't exist."""
        if self._engine is not None:
            return

        try:
            if self.url.startswith("sqlite"):
                # In-memory SQLite must share one connection across threads
                self._engine = create_engine(
                    self.url,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                )
            else:
                self._engine = create_engine(
                    self.url,
                    pool_pre_ping=True,
                    poolclass=QueuePool,
                    pool_size=settings.POSTGRES_POOL_SIZE,
                    max_overflow=settings.POSTGRES_MAX_OVERFLOW,
                    pool_timeout=30,  # Connection timeout (seconds)
                    pool_recycle=1800,  # Recycle connections after 30 minutes
                )

            SQLModel.metadata.create_all(self._engine)

            logger.info(
                "database_initialized",
                environment=settings.ENVIRONMENT.value,
                dialect=self._engine.dialect.name,
            )
        except SQLAlchemyError as e:
            logger.error("database_initialization_error", error=str(e), environment=settings.ENVIRONMENT.value)
            # In production, don't raise - allow app to start even with DB issues
            if settings.ENVIRONMENT != Environment.PRODUCTION:
                raise

    def close(self) -> None:
        """Dispose of the engine and its connection pool."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        logger.info("database_closed")

    def get_user_repository(self, session: Session) -> UserRepository:
        """Get a user repository bound to the given session.

        Returns:
            UserRepository: A user repository instance
        """
        return UserRepository(session)

    def new_session(self) -> Session:
        """Create a new database session.

        Returns:
            Session: A SQLModel session bound to the engine
        """
        return Session(self.engine)

    async def health_check(self) -> bool:
        """Check database connection health.

        Returns:
            bool: True if database is healthy, False otherwise
        """
        try:
            with Session(self.engine) as session:
                # Execute a simple query to check connection
                session.exec(select(1)).first()
                return True
        except (SQLAlchemyError, RuntimeError) as e:
            logger.error("database_health_check_failed", error=str(e))
            return False


# Default instance used by the application
database_service = DatabaseService()
