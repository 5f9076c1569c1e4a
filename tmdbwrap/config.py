"""Configuration management using pydantic-settings.

Values are read from environment variables (or a local .env file) and can be
overridden by explicit arguments to the client. The API key is a SecretStr so
it never leaks into logs or reprs.
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    Nothing is required at import time: a missing API key only fails when a
    client is constructed without one.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # TMDb API
    tmdb_api_key: SecretStr | None = Field(
        default=None,
        description="The Movie Database v3 API key",
    )

    tmdb_language: str = Field(
        default="en",
        description="Default language sent with every request",
    )

    tmdb_region: str = Field(
        default="us",
        description="Default region sent with every request",
    )

    tmdb_base_url: str = Field(
        default="https://api.themoviedb.org",
        description="API base URL (without version)",
    )

    tmdb_api_version: int = Field(
        default=3,
        description="API version used to build request URLs",
        ge=1,
    )

    request_timeout: float = Field(
        default=15.0,
        description="HTTP request timeout in seconds",
        gt=0,
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    environment: str = Field(
        default="production",
        description="Environment name (development, production)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v_upper

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is development or production."""
        allowed = {"development", "production"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v_lower

    @field_validator("tmdb_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    @property
    def has_api_key(self) -> bool:
        """Check if a TMDb API key is configured."""
        return self.tmdb_api_key is not None and bool(self.tmdb_api_key.get_secret_value())

    def get_safe_dict(self) -> dict[str, str | int | float | None]:
        """Get configuration as dict with sensitive values masked.

        Returns:
            Dictionary with SecretStr values shown as '***'
        """
        result = {}
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)

            if isinstance(value, SecretStr):
                result[field_name] = "***"
            else:
                result[field_name] = value

        return result


# Global settings instance
settings = Settings()
