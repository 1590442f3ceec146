"""Configuration object tests."""

import pytest

from conversion.config import ConversionSettings
from conversion.exceptions import ConfigurationError


def test_blank_api_keys_are_treated_as_missing():
    settings = ConversionSettings(
        primary_endpoint="https://a.test",
        fallback_endpoint="https://b.test",
        primary_api_key="",
        fallback_api_key="   ",
    )

    assert settings.primary_api_key is None
    assert settings.fallback_api_key is None


def test_validate_endpoints_names_missing_entries():
    settings = ConversionSettings()

    with pytest.raises(ConfigurationError) as exc_info:
        settings.validate_endpoints()

    assert "primary_endpoint" in str(exc_info.value)
    assert "fallback_endpoint" in str(exc_info.value)


def test_providers_share_timeout_and_keep_order():
    settings = ConversionSettings(
        primary_endpoint="https://a.test",
        fallback_endpoint="https://b.test",
        fallback_api_key="secret",
        timeout=2.5,
    )

    primary, fallback = settings.providers()

    assert (primary.name, primary.api_url, primary.api_key) == (
        "exchangeratehost",
        "https://a.test",
        None,
    )
    assert (fallback.name, fallback.api_url, fallback.api_key) == (
        "alphavantage",
        "https://b.test",
        "secret",
    )
    assert primary.timeout == fallback.timeout == 2.5


def test_from_django_settings(settings):
    settings.CURRENCY_CONVERSION = {
        "primary_endpoint": "https://primary.test",
        "fallback_endpoint": "https://fallback.test",
        "fallback_api_key": "abc",
    }

    conversion_settings = ConversionSettings.from_django_settings()

    assert conversion_settings.primary_endpoint == "https://primary.test"
    assert conversion_settings.fallback_api_key == "abc"
    assert conversion_settings.timeout is None


def test_unset_endpoint_is_reported_as_missing(settings):
    settings.CURRENCY_CONVERSION = {
        "primary_endpoint": "https://primary.test",
        "fallback_endpoint": None,
    }

    conversion_settings = ConversionSettings.from_django_settings()

    with pytest.raises(ConfigurationError) as exc_info:
        conversion_settings.validate_endpoints()

    assert "fallback_endpoint" in str(exc_info.value)
    assert "primary_endpoint" not in str(exc_info.value)


def test_from_django_settings_rejects_wrong_types(settings):
    settings.CURRENCY_CONVERSION = {
        "primary_endpoint": "https://primary.test",
        "fallback_endpoint": "https://fallback.test",
        "timeout": "abc",
    }

    with pytest.raises(ConfigurationError) as exc_info:
        ConversionSettings.from_django_settings()

    assert "timeout" in str(exc_info.value)
