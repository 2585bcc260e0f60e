"""Application configuration."""

from functools import lru_cache
from typing import Optional
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str = "public"

    # OpenAI
    openai_api_key: SecretStr
    chat_model: str = "gpt-4o"
    chat_max_tokens: int = 500
    chat_temperature: float = 0.7

    # URLhaus
    urlhaus_api_url: str = "https://urlhaus-api.abuse.ch/v1/url/"
    urlhaus_user_agent: str = "Professor Hackmenomore URL Checker"
    urlhaus_auth_key: Optional[SecretStr] = None
    urlhaus_timeout: float = 10.0

    # CORS
    cors_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
