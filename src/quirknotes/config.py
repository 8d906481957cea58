"""
App configuration - using pydantic settings for env vars
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings - loads from .env file"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # basic app stuff
    app_name: str = Field(default="QuirkNotes API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)  # set to True for dev

    # server config
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000)
    reload: bool = Field(default=False)

    # DB settings
    database_url: str = Field(default="sqlite+aiosqlite:///./quirknotes.db")
    database_echo: bool = Field(default=False)  # useful for debugging

    # JWT
    secret_key: str = Field(
        default="your-secret-key-change-in-production", description="JWT secret key"
    )
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    access_token_expire_minutes: int = Field(
        default=60, description="Access token expiration in minutes"
    )

    # Password hashing
    password_hash_rounds: int = Field(
        default=10, ge=4, le=31, description="bcrypt cost factor for password hashes"
    )

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"], description="CORS allowed origins"
    )
    cors_allow_credentials: bool = Field(default=True, description="CORS allow credentials")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default="logs", description="Directory for rotating log files")
    log_to_file: bool = Field(default=True, description="Write logs to rotating files")

    # Environment
    environment: str = Field(default="development", description="Environment name")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings
