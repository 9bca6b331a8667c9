# ABOUTME: Configuration package initialization
# ABOUTME: Exports configuration classes and utilities for the authentication library

from tokenauth.config._base import BaseCoreSettings
from tokenauth.config.jwt import JwtSettings
from tokenauth.config.reaper import ReaperSettings
from tokenauth.config.settings import AuthSettings, get_settings
from tokenauth.config.logging import (
    LoggerConfig,
    LoggingSettings,
    logger_config_from_settings,
    setup_logging,
    get_logger,
    configure_for_testing,
    configure_for_production,
    configure_for_development,
)

__all__ = [
    "BaseCoreSettings",
    "JwtSettings",
    "ReaperSettings",
    "AuthSettings",
    "get_settings",
    "LoggerConfig",
    "LoggingSettings",
    "logger_config_from_settings",
    "setup_logging",
    "get_logger",
    "configure_for_testing",
    "configure_for_production",
    "configure_for_development",
]
