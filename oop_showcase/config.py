"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

from .currency import Currency


class ShowcaseConfig(BaseSettings):
    """OOP showcase configuration"""

    model_config = SettingsConfigDict(
        env_prefix="SHOWCASE_",
        env_file=".env",
        case_sensitive=False
    )

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "text"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr

    # Event log configuration
    event_log_echo: bool = True  # Mirror event log lines to stdout

    # Business rules configuration
    default_currency: str = "USD"

    @property
    def currency(self) -> Currency:
        """Resolve the configured default currency code"""
        return Currency[self.default_currency.upper()]


# Global configuration instance
config = ShowcaseConfig()


def get_config() -> ShowcaseConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> ShowcaseConfig:
    """Reload configuration from environment"""
    global config
    config = ShowcaseConfig()
    return config
