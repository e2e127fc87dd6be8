"""Application configuration.

Settings are read from environment variables. Environment specific ``.env``
files are loaded first so that values exported in the shell still win.
"""

import os
from enum import Enum
from pathlib import Path
from typing import List

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Environment(str, Enum):
    """Deployment environments the service knows about."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


def get_environment() -> Environment:
    """Resolve the current environment from ``APP_ENV``.

    Returns:
        Environment: The configured environment, development when unset or unknown.
    """
    value = os.getenv("APP_ENV", Environment.DEVELOPMENT.value).lower()
    try:
        return Environment(value)
    except ValueError:
        return Environment.DEVELOPMENT


def load_env_file(environment: Environment) -> None:
    """Load ``.env.<environment>`` and ``.env`` from the project root if present."""
    for name in (f".env.{environment.value}", ".env"):
        env_file = PROJECT_ROOT / name
        if env_file.is_file():
            load_dotenv(env_file, override=False)


def parse_list(value: str) -> List[str]:
    """Split a comma separated setting into a list of non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Typed view over the environment.

    Values are resolved at construction time, so a fresh instance picks up
    changes made to the environment.
    """

    def __init__(self):
        self.ENVIRONMENT = get_environment()
        load_env_file(self.ENVIRONMENT)

        self.PROJECT_NAME = os.getenv("PROJECT_NAME", "User Management API")
        self.VERSION = os.getenv("VERSION", "1.0.0")
        self.API_V1_STR = os.getenv("API_V1_STR", "/api/v1")
        self.DEBUG = parse_bool(os.getenv("DEBUG", "false"))
        self.ALLOWED_ORIGINS = parse_list(os.getenv("ALLOWED_ORIGINS", "*"))

        # Database
        self.POSTGRES_HOST = os.getenv("POSTGRES_HOST", "localhost")
        self.POSTGRES_PORT = int(os.getenv("POSTGRES_PORT", "5432"))
        self.POSTGRES_DB = os.getenv("POSTGRES_DB", "users")
        self.POSTGRES_USER = os.getenv("POSTGRES_USER", "postgres")
        self.POSTGRES_PASSWORD = os.getenv("POSTGRES_PASSWORD", "postgres")
        self.POSTGRES_POOL_SIZE = int(os.getenv("POSTGRES_POOL_SIZE", "20"))
        self.POSTGRES_MAX_OVERFLOW = int(os.getenv("POSTGRES_MAX_OVERFLOW", "10"))
        self.DATABASE_URL = os.getenv("DATABASE_URL", "")

        # Password hashing
        self.BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

        # Logging
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if self.DEBUG else "INFO").upper()
        default_format = "json" if self.ENVIRONMENT == Environment.PRODUCTION else "console"
        self.LOG_FORMAT = os.getenv("LOG_FORMAT", default_format).lower()

    @property
    def database_url(self) -> str:
        """Connection URL, ``DATABASE_URL`` taking precedence over the POSTGRES_* parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


settings = Settings()
