"""Application configuration via environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Form definitions: extra directory of *.json files, loaded after the built-ins
    FORMS_DIR: Optional[str] = None

    # Joins the messages of composite validators
    MESSAGE_SEPARATOR: str = "; "

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
