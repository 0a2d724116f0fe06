"""Configuration management for the application."""

import json
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Data root: the default SQLite DB lives here when DATABASE_URL is unset
    data_root: str = Field(default="~/Documents/jobly")

    # Database: auto-derived from data_root if not explicitly set
    database_url: str | None = Field(default=None)
    db_pool_size: int = Field(default=10)
    db_max_overflow: int = Field(default=20)

    # Auth
    secret_key: str = Field(default="secret-dev")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60 * 24)

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000)
    cors_origins: list[str] | str = Field(default=["http://localhost:3000"])

    # Logging
    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=True)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value: list[str] | str) -> list[str]:
        """Accept a JSON list or a comma-separated string."""
        if isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @model_validator(mode="after")
    def derive_paths(self) -> "Settings":
        """Expand data_root and derive database_url if not explicitly set."""
        self.data_root = str(Path(self.data_root).expanduser().resolve())
        if self.database_url is None:
            self.database_url = f"sqlite:///{self.data_root}/jobly.db"
        return self


# Global settings instance
settings = Settings()
