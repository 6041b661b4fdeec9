from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PLAYER_BASE_URL = "https://playerscdn.xyz"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        populate_by_name=True,
    )

    player_base_url: str = Field(
        default=DEFAULT_PLAYER_BASE_URL,
        validation_alias="PLAYER_BASE_URL",
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        validation_alias="FETCH_MAX_ATTEMPTS",
        description="Outbound attempts per lookup, first one included",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        validation_alias="FETCH_TIMEOUT",
        description="Timeout in seconds for the player request",
    )
    user_agent: Optional[str] = Field(
        default=None,
        validation_alias="PLAYER_USER_AGENT",
    )

    @field_validator("player_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("user_agent")
    @classmethod
    def _blank_user_agent(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
