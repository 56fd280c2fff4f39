"""Client configuration loaded from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.justcms.co/public"


class Settings(BaseSettings):
    """JustCMS client settings.

    Missing credentials are not an error here; ``JustCmsClient`` refuses to
    start without them.
    """

    model_config = SettingsConfigDict(
        env_prefix="JUST_CMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Credentials
    token: str = ""
    project: str = ""

    # Endpoint
    base_url: str = DEFAULT_BASE_URL

    # Transport
    timeout: float = Field(default=15.0, gt=0)
