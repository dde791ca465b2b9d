"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - core/ never reads settings; the shell passes values in

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box for collaborators
"""

import json
from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from luach.core.stored_dates import DEFAULT_GREGORIAN_FORMATS


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Stored dates: strptime formats tried in order for Gregorian columns
    stored_gregorian_formats: Annotated[list[str], NoDecode] = list(DEFAULT_GREGORIAN_FORMATS)

    @field_validator("stored_gregorian_formats", mode="before")
    @classmethod
    def split_formats(cls, v: object) -> object:
        """Accept a JSON list or a comma-separated env value."""
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
