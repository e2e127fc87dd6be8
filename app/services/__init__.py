"""This file contains the services for the application."""

from app.services.database import DatabaseService, database_service

__all__ = ["DatabaseService", "database_service"]
