from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Local dev: load from .env automatically.
    # In production: you typically inject real env vars instead.
    model_config = SettingsConfigDict(
        env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8", populate_by_name=True
    )

    # Env vars:
    # - OPENAPI_PETSTORE_BASE_PATH (optional, default /v3)
    # - AUTH_SECRET (signs/verifies bearer tokens for the pet scope gate)
    # - SESSION_TTL_SECONDS (optional, login session lifetime)
    # - SEED_USERS (optional, set to false to start with an empty store)
    # - LOG_LEVEL (optional)
    base_path: str = Field(default="/v3", validation_alias="OPENAPI_PETSTORE_BASE_PATH")
    auth_secret: str = Field(default="dev-insecure-secret-change-me", validation_alias="AUTH_SECRET")
    session_ttl_seconds: int = Field(default=60 * 60, validation_alias="SESSION_TTL_SECONDS")
    seed_users: bool = Field(default=True, validation_alias="SEED_USERS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    def model_post_init(self, __context):  # type: ignore[override]
        # "/v3/" and "v3" both mean "/v3"; "" or "/" mounts at the root.
        path = (self.base_path or "").strip().strip("/")
        self.base_path = f"/{path}" if path else ""


def get_settings() -> Settings:
    """Load settings from environment.

    Keep this as the single canonical constructor for Settings(). FastAPI
    dependencies and tests can override/monkeypatch this function.
    """
    return Settings()
