"""
Tests for configuration management
"""

import os
from decimal import Decimal
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.infrastructure.configuration.config import Settings, get_config, reset_config


class TestSettings:
    """Test Settings model"""

    def test_settings_default_values(self):
        """Test settings with default values"""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.api_base_url == "http://localhost:5000/api/"
            assert settings.request_timeout_seconds == 10.0
            assert settings.currency == "USD"
            assert settings.default_language == "es"
            assert settings.free_shipping_threshold == Decimal("500")
            assert settings.flat_shipping_fee == Decimal("50")
            assert settings.points_per_visit == 10
            assert settings.points_per_cart_add == 5
            assert settings.point_value == Decimal("0.01")

    def test_settings_from_environment(self, mock_env):
        """Test settings read from the environment"""
        settings = Settings(_env_file=None)
        assert settings.api_base_url == mock_env["API_BASE_URL"]
        assert settings.client_state_database_url == "sqlite:///:memory:"
        assert settings.environment == "test"
        assert settings.log_level == "DEBUG"

    def test_settings_custom_values(self):
        """Test settings with custom values"""
        with patch.dict(os.environ, {
            'FREE_SHIPPING_THRESHOLD': '300',
            'FLAT_SHIPPING_FEE': '25.50',
            'REQUEST_TIMEOUT_SECONDS': '3',
            'ENVIRONMENT': 'production',
        }):
            settings = Settings(_env_file=None)
            assert settings.free_shipping_threshold == Decimal("300")
            assert settings.flat_shipping_fee == Decimal("25.50")
            assert settings.request_timeout_seconds == 3.0
            assert settings.environment == 'production'

    def test_settings_validation_error(self):
        """Invalid values are rejected"""
        with patch.dict(os.environ, {'REQUEST_TIMEOUT_SECONDS': '0'}):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)
        with patch.dict(os.environ, {'CURRENCY': 'DOLLARS'}):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestGetConfig:
    """Test the cached settings accessor"""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reset_config_rereads_environment(self):
        first = get_config()
        with patch.dict(os.environ, {'POINTS_PER_VISIT': '20'}):
            reset_config()
            second = get_config()
        assert second is not first
        assert second.points_per_visit == 20
