"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Identifiers forwarded to the application entry point
    app_id: str | None = Field(default=None, description="Application identifier (APP_ID)")
    identity_pool_id: str | None = Field(
        default=None, description="Identity pool identifier (IDENTITY_POOL_ID)"
    )
    aws_region: str | None = Field(default=None, description="Cloud region (AWS_REGION)")
    project_id: str | None = Field(default=None, description="Project identifier (PROJECT_ID)")

    # Seed material
    seed_size: int = Field(
        default=5,
        description="Number of random 32-bit integers drawn for the application seed",
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("seed_size")
    @classmethod
    def validate_seed_size(cls, v: int) -> int:
        """Validate that at least one seed value is drawn."""
        if v < 1:
            raise ValueError("seed_size must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()
