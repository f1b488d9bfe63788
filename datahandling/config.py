"""Application configuration management via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = "Data Handling API"
    app_version: str = "0.1.0"
    debug: bool = False

    # API settings
    api_v1_prefix: str = "/api/v1"
    max_input_chars: int = 1_000_000

    # Sanitizer defaults
    explode_characters: str = ";>|/\\<"
    implode_separator: str = " > "


# Global settings instance
settings = Settings()
