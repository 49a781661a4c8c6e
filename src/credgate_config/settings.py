"""credgate settings.

Values come from OS environment variables first, then from the first .env
file found among: $CREDGATE_ENV_FILE, config/.env.dev, config/.env.
"""

from __future__ import annotations

import os
from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from credgate_auth.schemas import (
    SIGNING_EXPIRE_MINUTES_CONFIG_KEY,
    SIGNING_ISSUER_CONFIG_KEY,
    SIGNING_KEY_CONFIG_KEY,
    SigningContext,
)


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

    return Path.cwd()


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. CREDGATE_ENV_FILE env var
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("CREDGATE_ENV_FILE")
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
    """Process configuration for the API, the CLI and token signing.

    The signing key and issuer have no defaults and must be provided.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Security (MUST be set - app fails without these)
    jwt_secret_key: SecretStr  # Secret for signing JWT tokens
    jwt_issuer: str  # Issuer and audience of issued tokens

    # Application
    app_name: str = "credgate"

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/credgate.db"
    credential_lookup_timeout_seconds: float | None = 5.0

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False

    # JWT
    jwt_token_expire_minutes: int = 30

    # Password hashing
    password_hash_rounds: int = 12

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @field_validator("jwt_issuer")
    @classmethod
    def _validate_issuer(cls, v: str) -> str:
        if not v.strip():
            msg = "jwt_issuer cannot be blank"
            raise ValueError(msg)
        return v

    @field_validator("jwt_token_expire_minutes")
    @classmethod
    def _validate_expiry(cls, v: int) -> int:
        if v <= 0:
            msg = "jwt_token_expire_minutes must be positive"
            raise ValueError(msg)
        return v

    @field_validator("password_hash_rounds")
    @classmethod
    def _validate_rounds(cls, v: int) -> int:
        # bcrypt accepts work factors 4..31
        if not 4 <= v <= 31:
            msg = "password_hash_rounds must be between 4 and 31"
            raise ValueError(msg)
        return v

    def get_value(self, key: str) -> str | None:
        """Look up a signing value by its configuration key."""
        values = {
            SIGNING_KEY_CONFIG_KEY: self.jwt_secret_key.get_secret_value(),
            SIGNING_ISSUER_CONFIG_KEY: self.jwt_issuer,
            SIGNING_EXPIRE_MINUTES_CONFIG_KEY: str(self.jwt_token_expire_minutes),
        }
        return values.get(key)

    def signing_context(self) -> SigningContext:
        """Build and validate the token signing context.

        Raises
        ------
        SigningConfigurationError
            If the secret key is too short
        """
        return SigningContext(
            secret_key=self.jwt_secret_key.get_secret_value(),
            issuer=self.jwt_issuer,
            token_lifetime=timedelta(minutes=self.jwt_token_expire_minutes),
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    Required fields (jwt_secret_key, jwt_issuer) must be provided via
    environment variables or .env file.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
