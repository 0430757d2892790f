"""
Runtime configuration for the catalogue service.

Values are read from environment variables prefixed with ``BOOKCLUB_``
(or from a local ``.env`` file) through pydantic-settings. Lists such as
``forbidden_words`` are given as JSON, e.g.
``BOOKCLUB_FORBIDDEN_WORDS='["spam", "casino"]'``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BOOKCLUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Comment content policy. Order matters: the first matching word is
    # the one reported back to the caller.
    forbidden_words: List[str] = Field(default_factory=lambda: ["spam", "viagra", "casino"])
    max_comment_length: int = Field(default=1000, gt=0)

    # Comments may only be deleted this many hours after creation.
    moderation_window_hours: int = Field(default=24, gt=0)

    default_page_size: int = Field(default=20, gt=0)
    max_page_size: int = Field(default=100, gt=0, le=100)

    log_level: str = "INFO"
    seed_sample_data: bool = True
    admin_email: str = "admin@example.com"


@lru_cache
def get_settings() -> Settings:
    return Settings()
