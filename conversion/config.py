from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError


class ProviderSettings(BaseModel):
    """Connection settings for a single exchange-rate provider."""

    model_config = ConfigDict(frozen=True)

    name: str
    api_url: str
    api_key: str | None = None
    timeout: float | None = None


class ConversionSettings(BaseModel):
    """
    Explicit configuration for the conversion service.

    Built once (usually from Django settings) and injected into the
    service. Endpoints are mandatory; the fallback API key is only
    required when the fallback provider is actually consulted.
    """

    model_config = ConfigDict(frozen=True)

    primary_endpoint: str = ""
    primary_api_key: str | None = None
    fallback_endpoint: str = ""
    fallback_api_key: str | None = None
    timeout: float | None = None
    primary_provider: str = "exchangeratehost"
    fallback_provider: str = "alphavantage"

    @field_validator("primary_endpoint", "fallback_endpoint", mode="before")
    @classmethod
    def _unset_endpoint_is_empty(cls, value):
        return "" if value is None else value

    @field_validator("primary_api_key", "fallback_api_key", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_django_settings(cls) -> "ConversionSettings":
        """
        Read the ``CURRENCY_CONVERSION`` dict from Django settings.

        Raises:
            ConfigurationError: If the dict holds values of the wrong type
        """
        from django.conf import settings

        try:
            return cls.model_validate(getattr(settings, "CURRENCY_CONVERSION", {}))
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid CURRENCY_CONVERSION settings: {e}"
            ) from e

    def validate_endpoints(self) -> None:
        """
        Raises:
            ConfigurationError: If an endpoint is empty
        """
        missing = [
            name
            for name in ("primary_endpoint", "fallback_endpoint")
            if not getattr(self, name).strip()
        ]
        if missing:
            raise ConfigurationError(
                f"Currency conversion is not configured. Missing: {', '.join(missing)}"
            )

    def providers(self) -> list[ProviderSettings]:
        """Providers in the order they are tried."""
        return [
            ProviderSettings(
                name=self.primary_provider,
                api_url=self.primary_endpoint,
                api_key=self.primary_api_key,
                timeout=self.timeout,
            ),
            ProviderSettings(
                name=self.fallback_provider,
                api_url=self.fallback_endpoint,
                api_key=self.fallback_api_key,
                timeout=self.timeout,
            ),
        ]
