from __future__ import annotations as _annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVEL = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

MatchMode = Literal["exact", "regex"]


class Settings(BaseSettings):
    """openapi-filter settings.

    All settings can be configured via environment variables with the prefix
    OPENAPI_FILTER_. For example, OPENAPI_FILTER_INDENT=4 will set indent=4.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENAPI_FILTER_",
        env_file=".env",
        extra="ignore",
    )

    test_mode: bool = False
    log_level: LOG_LEVEL = "INFO"

    # output settings
    indent: int = Field(
        default=2,
        ge=0,
        description="Indentation used when writing JSON output documents.",
    )

    # report settings
    max_listed_paths: int = Field(
        default=10,
        ge=0,
        description="""
        Maximum number of kept paths listed individually in the console
        report. Remaining paths are summarized as a count.""",
    )


settings = Settings()
