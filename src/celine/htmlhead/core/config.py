# celine/htmlhead/core/config.py
"""
Central configuration for head snippet rendering.

Environment variables (prefixed ``HTMLHEAD_``) override defaults. Explicit
arguments passed to the emitters always win over anything configured here.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from celine.htmlhead.contracts.sink import Doctype


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(
        env_prefix="HTMLHEAD_", env_file=".env", extra="ignore"
    )

    log_level: str = "INFO"

    ga_tracking_id: str | None = Field(
        default=None,
        description="Analytics tracking id (empty or unset disables tracking)",
    )
    default_content_type: str = Field(
        default="text/html; charset=UTF-8",
        description="Content type declared by http-equiv meta on legacy doctypes",
    )
    default_doctype: Doctype = Doctype.HTML5
    charset: str = "UTF-8"


settings = Settings()
