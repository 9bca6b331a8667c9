# ABOUTME: Scheduling configuration for the expired refresh token reaper
# ABOUTME: Controls whether the reaper runs and at which time of day

from datetime import time

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReaperSettings(BaseSettings):
    """Configuration for the daily expired refresh token cleanup.

    Attributes:
        REAPER_ENABLED: Whether the application starts the reaper with its lifecycle.
        REAPER_RUN_AT: Time of day of each run, interpreted in the configured TIMEZONE.
    """

    REAPER_ENABLED: bool = Field(default=True, description="Start the expiry reaper with the application.")
    REAPER_RUN_AT: time = Field(default=time(0, 0), description="Time of day at which the reaper runs.")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
