"""
Configuration management for the Autopartes storefront core
"""


import threading
from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # External services
    api_base_url: str = Field(
        default="http://localhost:5000/api/", description="Base URL of the storefront API"
    )
    request_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Timeout applied to every outgoing request"
    )

    # Client state persistence
    client_state_database_url: str = Field(
        default="sqlite:///data/client_state.db",
        description="Database URL backing the persisted client state",
    )

    # Application settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default="logs", description="Directory for rotating log files")
    environment: str = Field(default="development", description="Application environment")
    default_language: str = Field(default="es", description="Default UI language")

    # Pricing
    currency: str = Field(default="USD", min_length=3, max_length=3, description="Currency code")
    free_shipping_threshold: Decimal = Field(
        default=Decimal("500"), ge=0, description="Subtotal from which shipping is free"
    )
    flat_shipping_fee: Decimal = Field(
        default=Decimal("50"), ge=0, description="Shipping fee below the free threshold"
    )

    # Rewards
    points_per_visit: int = Field(default=10, ge=0, description="Points for the daily visit")
    points_per_cart_add: int = Field(default=5, ge=0, description="Points for adding to cart")
    point_value: Decimal = Field(
        default=Decimal("0.01"), ge=0, description="Money value of a single point"
    )


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
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
