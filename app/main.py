"""Application entry point."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.errors import setup_error_handlers
from app.api.logging_context import LoggingContextMiddleware
from app.api.v1 import api_router
from app.core.common.config import settings
from app.core.common.logging import logger
from app.services.database import DatabaseService, database_service


def create_app(database: Optional[DatabaseService] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        database: Database service to use, defaults to the module level instance

    Returns:
        FastAPI: The configured application
    """
    database = database or database_service

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "application_startup",
            project_name=settings.PROJECT_NAME,
            version=settings.VERSION,
            environment=settings.ENVIRONMENT.value,
        )
        database.open()
        yield
        database.close()
        logger.info("application_shutdown")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        lifespan=lifespan,
    )
    app.state.database = database

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_error_handlers(app)
    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.get("/health")
    async def health_check(request: Request):
        """Report service and database health."""
        healthy = await request.app.state.database.health_check()
        return JSONResponse(
            status_code=200 if healthy else 503,
            content={
                "status": "healthy" if healthy else "degraded",
                "version": settings.VERSION,
                "environment": settings.ENVIRONMENT.value,
            },
        )

    return app


app = create_app()
