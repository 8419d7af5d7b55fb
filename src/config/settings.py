from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    redis_uri: str = "redis://localhost:6379/0"
    log_level: str = "INFO"
    environment: str = "dev"
    # Cloudinary
    cloudinary_bucket: str
    cloudinary_folder: str
    cloudinary_key: str
    cloudinary_secret: SecretStr
    cloudinary_api_base_url: str = "https://api.cloudinary.com/v1_1"
    # Shared secret for protected routes (see scripts/generate_bearer_token.py)
    bearer_token: SecretStr
    # Deletion queue
    deletion_queue_name: str = "cloudinary-remove-queue"
    deletion_delay_seconds: float = 3.0
    deletion_rate_limit_max: int = 2
    deletion_rate_limit_window_seconds: float = 3.0
    # CORS
    cors_allow_origins: str = "*"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("cloudinary_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("deletion_rate_limit_max")
    @classmethod
    def ensure_positive_limit(cls, value: int) -> int:
        if value < 1:
            raise ValueError("deletion_rate_limit_max must be at least 1")
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
