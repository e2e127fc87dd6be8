"""Tests for error kinds, the error body and the config helpers."""

from fastapi.testclient import TestClient

from app.core.common.config import Environment, Settings
from app.core.common.errors import AppError, ErrorType, error_responder
from app.main import create_app


def test_error_body():
    error = error_responder(ErrorType.EMAIL_ALREADY_TAKEN, "Email already taken")

    assert isinstance(error, AppError)
    assert error.to_body() == {
        "statusCode": 422,
        "error": "EMAIL_ALREADY_TAKEN_ERROR",
        "description": "Email is already taken",
        "message": "Email already taken",
    }


def test_error_default_message():
    error = AppError(ErrorType.UNPROCESSABLE_ENTITY)

    assert error.message == "Unprocessable entity"
    assert "validationErrors" not in error.to_body()


def test_unhandled_error_is_rendered_as_server_error(database):
    app = create_app(database)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["error"] == "SERVER_ERROR"


def test_health_reports_closed_database(database):
    app = create_app(database)

    with TestClient(app) as client:
        database.close()
        response = client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "degraded"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./users.db")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.example, http://b.example")
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    settings = Settings()

    assert settings.ENVIRONMENT is Environment.PRODUCTION
    assert settings.database_url == "sqlite:///./users.db"
    assert settings.ALLOWED_ORIGINS == ["http://a.example", "http://b.example"]
    assert settings.LOG_FORMAT == "json"


def test_settings_compose_postgres_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")
    monkeypatch.setenv("POSTGRES_HOST", "db")
    monkeypatch.setenv("POSTGRES_DB", "accounts")

    settings = Settings()

    assert settings.database_url.startswith("postgresql+psycopg://")
    assert settings.database_url.endswith("@db:5432/accounts")
