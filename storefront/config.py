"""
Configuration management for the storefront
"""


import threading

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.infrastructure.utilities.constants import BusinessSettings, FileSettings


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default=FileSettings.LOGS_DIRECTORY, description="Directory for log files")
    environment: str = Field(
        default="development", description="Application environment"
    )

    # Startup data
    data_source: str = Field(
        default=FileSettings.DATA_DIRECTORY,
        description="Base URL or local directory holding company/products/site JSON",
    )

    # Pricing display
    currency: str = Field(default=BusinessSettings.DEFAULT_CURRENCY, description="Currency code")
    currency_suffix: str = Field(
        default=BusinessSettings.DEFAULT_CURRENCY_SUFFIX, description="Suffix shown after prices"
    )

    # Location-state rehydration
    rehydrate_delay_seconds: float = Field(
        default=BusinessSettings.DEFAULT_REHYDRATE_DELAY_SECONDS,
        ge=0,
        description="Delay before the initial query state is replayed into the basket",
    )

    # Web server
    host: str = Field(default="0.0.0.0", description="API bind address")
    port: int = Field(default=8000, gt=0, description="API port")


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Drop the cached settings so the next get_config() re-reads the environment."""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
