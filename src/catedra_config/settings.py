"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. CATEDRA_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

logger = logging.getLogger(__name__)

# Local development fallbacks. Never used outside ENVIRONMENT=development.
DEV_JWT_SECRET = "clave_secreta_examen"  # NOQA: S105
DEV_DB_PASSWORD = "12345678"  # NOQA: S105


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. CATEDRA_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("CATEDRA_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values

    ``jwt_secret`` and ``db_password`` only fall back to fixed values when
    ``environment`` is ``development``; anywhere else they must be set.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Catedra"
    environment: Literal["development", "production"] = "development"

    # Security
    jwt_secret: SecretStr | None = None  # Secret for signing JWT tokens
    jwt_access_token_expire_hours: int = 1
    password_hash_rounds: int = Field(default=10, ge=4, le=31)
    auth_unified_login_errors: bool = False

    # Database (DB_ prefix)
    db_driver: str = "postgresql+asyncpg"
    db_host: str = "127.0.0.1"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: SecretStr | None = None
    db_name: str = "examen1"
    db_connection_limit: int = Field(default=5, ge=1)
    database_url_override: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url_override"),
    )

    # API
    api_host: str = "0.0.0.0"  # NOQA: S104
    port: int = 5000
    api_debug: bool = False
    api_cors_origins: str = "*"

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Ensure cors_origins is stored as comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    @model_validator(mode="after")
    def _apply_secret_fallbacks(self) -> Settings:
        """Fill development secrets or refuse to start without them."""
        fallbacks = {
            "jwt_secret": DEV_JWT_SECRET,
            "db_password": DEV_DB_PASSWORD,
        }
        for name, dev_value in fallbacks.items():
            current = getattr(self, name)
            if current is not None and current.get_secret_value():
                continue
            if self.environment != "development":
                msg = f"{name.upper()} must be set when ENVIRONMENT={self.environment}"
                raise ValueError(msg)
            logger.warning(
                "%s is not set; using the local development default",
                name.upper(),
            )
            setattr(self, name, SecretStr(dev_value))
        return self

    @property
    def database_url(self) -> str:
        """Construct the database URL from components."""
        if self.database_url_override:
            return self.database_url_override
        url = URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password.get_secret_value() if self.db_password else None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    @property
    def database_backend(self) -> str:
        """Database backend name (e.g. ``postgresql`` or ``sqlite``)."""
        return make_url(self.database_url).get_backend_name()

    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @property
    def jwt_secret_value(self) -> str:
        """Plain JWT signing secret."""
        if self.jwt_secret is None:
            msg = "JWT_SECRET is not configured"
            raise ValueError(msg)
        return self.jwt_secret.get_secret_value()


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
