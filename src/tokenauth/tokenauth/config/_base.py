# ABOUTME: Base configuration classes for the token authentication library
# ABOUTME: Provides fundamental configuration settings and validation logic

from typing import Literal
import zoneinfo

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseCoreSettings(BaseSettings):
    """Defines the foundational configuration for the authentication service.

    This class holds the essential, non-domain-specific parameters. It leverages
    `pydantic-settings` to load configurations from environment variables or
    `.env` files.

    The settings here are universal and are inherited by the more specific
    configuration classes (JWT, reaper), forming a composable configuration
    system.

    Attributes:
        APP_NAME: The name of the application, used for identification in logs.
        ENV: The runtime environment, which controls environment-specific behaviors.
        DEBUG: A flag to enable or disable debug mode.
        LOG_LEVEL: The minimum level for log messages to be processed.
        LOG_FORMAT: The format for log output, structured (JSON) or human-readable (txt).
        TIMEZONE: The canonical timezone, used to interpret scheduled times of day.
        model_config: Pydantic's configuration dictionary, specifying how settings are loaded.
    """

    # Application Identity
    APP_NAME: str = Field(
        default="TokenAuth",
        description="The name of the application, used for identification in logs and monitoring.",
    )

    # Environment Configuration
    ENV: Literal["development", "staging", "production"] = Field(
        default="development",
        description="The application's runtime environment. Controls features like debugging and logging verbosity.",
    )
    DEBUG: bool = Field(
        default=False,
        description="Flag to enable or disable debug mode. Should be False in production.",
    )

    # Logging Configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="The minimum level for log messages to be processed.",
    )
    LOG_FORMAT: Literal["json", "txt"] = Field(
        default="txt",
        description="The output format for logs. Use 'json' for production environments.",
    )

    # Globalization
    TIMEZONE: str = Field(
        default="UTC",
        description="The canonical timezone. Scheduled times of day are interpreted in this timezone.",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ENV", mode="before")
    @classmethod
    def validate_env_case_insensitive(cls, v: str) -> str:
        """Validate ENV field with case-insensitive mapping.

        Accepts common environment aliases and normalizes them:
        - dev, develop -> development
        - prod -> production
        - stage -> staging
        """
        if isinstance(v, str):
            v_lower = v.lower().strip()
            env_mapping = {
                "dev": "development",
                "develop": "development",
                "development": "development",
                "stage": "staging",
                "staging": "staging",
                "prod": "production",
                "production": "production",
            }
            return env_mapping.get(v_lower, v_lower)
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level_case_insensitive(cls, v: str) -> str:
        """Validate LOG_LEVEL field with case-insensitive normalization."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("LOG_FORMAT", mode="before")
    @classmethod
    def validate_log_format_case_insensitive(cls, v: str) -> str:
        """Validate LOG_FORMAT field with case-insensitive normalization."""
        if isinstance(v, str):
            v_lower = v.lower().strip()
            format_mapping = {
                "json": "json",
                "structured": "json",
                "txt": "txt",
                "text": "txt",
            }
            return format_mapping.get(v_lower, v_lower)
        return v

    @field_validator("TIMEZONE", mode="before")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate TIMEZONE field to ensure it's a valid IANA timezone identifier.

        Lower-cased region names are repaired (``europe/madrid`` -> ``Europe/Madrid``).

        Raises:
            ValueError: If the timezone is not a valid IANA timezone identifier.
        """
        if not isinstance(v, str):
            return v

        v_stripped = v.strip()
        if not v_stripped:
            raise ValueError(
                "Invalid timezone ''. Must be a valid IANA timezone identifier (e.g., 'UTC', 'Europe/Madrid')."
            )

        try:
            zoneinfo.ZoneInfo(v_stripped)
            return v_stripped
        except (zoneinfo.ZoneInfoNotFoundError, ValueError):
            if "/" in v_stripped:
                parts = v_stripped.split("/")
                parts[0] = parts[0].capitalize()
                for i in range(1, len(parts)):
                    parts[i] = parts[i].replace("_", " ").title().replace(" ", "_")
                proper_case_tz = "/".join(parts)

                try:
                    zoneinfo.ZoneInfo(proper_case_tz)
                    return proper_case_tz
                except (zoneinfo.ZoneInfoNotFoundError, ValueError):
                    pass

            raise ValueError(
                f"Invalid timezone '{v_stripped}'. Must be a valid IANA timezone identifier "
                f"(e.g., 'UTC', 'Europe/Madrid')."
            )
