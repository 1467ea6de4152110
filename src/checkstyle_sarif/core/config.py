# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHECKSTYLE_SARIF_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Output
    indent: int = 2
    tool_version: str = ""  # empty: use the version declared in the report

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"  # "text" or "json"

    @field_validator("indent")
    @classmethod
    def _check_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError("indent must be >= 0")
        return v

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return v


def get_settings() -> Settings:
    return Settings()
