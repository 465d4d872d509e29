"""Tests for application configuration."""

from decimal import Decimal

from sales_analytics.core.config import Settings, get_settings


def test_settings_has_defaults():
    """Settings should have sensible defaults."""
    settings = Settings()

    assert settings.app_name == "SalesAnalytics"
    assert settings.app_env == "development"
    assert settings.debug is False
    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.api_port == 8123
    assert settings.sales_report_top_products_limit == 10


def test_bonus_defaults_match_reference_policy():
    """Default bonus rates are 15/10/5/0 percent with no floor."""
    settings = Settings()

    assert settings.bonus_top_rate == Decimal("0.15")
    assert settings.bonus_podium_rate == Decimal("0.10")
    assert settings.bonus_default_rate == Decimal("0.05")
    assert settings.bonus_last_rate == Decimal("0")
    assert settings.bonus_floor_at_zero is False


def test_settings_is_development_property():
    """is_development should return True for development env."""
    settings = Settings(app_env="development")
    assert settings.is_development is True
    assert settings.is_production is False


def test_settings_is_production_property():
    """is_production should return True for production env."""
    settings = Settings(app_env="production")
    assert settings.is_development is False
    assert settings.is_production is True


def test_settings_is_testing_property():
    """is_testing should return True for testing env."""
    assert Settings(app_env="testing").is_testing is True


def test_get_settings_returns_singleton():
    """get_settings should return cached singleton."""
    assert get_settings() is get_settings()


def test_settings_from_environment(monkeypatch):
    """Settings should load from environment variables."""
    monkeypatch.setenv("APP_NAME", "TestApp")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("BONUS_FLOOR_AT_ZERO", "true")
    monkeypatch.setenv("BONUS_DEFAULT_RATE", "0.07")

    settings = Settings()

    assert settings.app_name == "TestApp"
    assert settings.log_level == "DEBUG"
    assert settings.bonus_floor_at_zero is True
    assert settings.bonus_default_rate == Decimal("0.07")
