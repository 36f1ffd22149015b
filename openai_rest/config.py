import sys
from functools import lru_cache
from pathlib import Path
from typing import Optional

from loguru import logger as log
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__version__ = "0.1.0"


class Settings(BaseSettings):
    # Credentials
    openai_api_key: str = Field(
        "",
        validation_alias=AliasChoices("openai_api_key", "openai_key", "openai_secret_key"),
    )
    openai_organization_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("openai_organization_id", "openai_organization", "organization"),
    )

    # Service
    openai_base_url: str = "https://api.openai.com/v1/"
    user_agent: str = f"openai-rest-client/{__version__}"

    # HTTP
    http_timeout: float = Field(25.0, gt=0)
    http_connect_timeout: float = Field(15.0, gt=0)

    # Logging
    log_lvl: str = "INFO"
    log_path: Optional[Path] = None

    # pydantic-settings configuration
    model_config = SettingsConfigDict(
        env_file=(".env", ".openai"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("openai_organization_id")
    @classmethod
    def organization_prefix(cls, v: Optional[str]) -> Optional[str]:
        if v and not v.startswith("org-"):
            raise ValueError(f"{v} must start with 'org-'")
        return v or None

    @field_validator("openai_base_url")
    @classmethod
    def trailing_slash(cls, v: str) -> str:
        # httpx joins relative routes onto the last path segment only with a trailing slash
        return v if v.endswith("/") else v + "/"


# Library modules log through this; sinks belong to the application.
logger = log.bind(library="openai_rest")


@lru_cache()
def get_logger(log_path: Optional[Path], level: str):
    """Install the stderr and rotating file sinks. Call from an application entry point."""
    log.remove()
    log.add(sys.stderr, format="{time} | {level} | {message}", level=level)
    if log_path is None:
        return log
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass
    log.add(
        log_path,
        format="{time} | {level} | {message}",
        level="DEBUG",
        rotation="1 days",
        retention="30 days",
        catch=True,
    )
    return log


@lru_cache()
def get_settings() -> Settings:
    return Settings()
