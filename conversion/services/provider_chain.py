import logging
from decimal import Decimal

import requests

from conversion.config import ConversionSettings
from conversion.exceptions import ConfigurationError, ConversionError
from external.api_clients import (
    APIClientError,
    APIConfigurationError,
    APIRateLimitError,
)
from external.api_clients.adapters import (
    CurrencyAdapter,
    ProviderQuote,
    get_adapter_for_provider,
)

logger = logging.getLogger(__name__)


class ProviderChain:
    """
    Ordered list of providers tried one after the other.

    Features:
    - First successful quote wins
    - One attempt per provider, no retries
    - Failure causes collected per provider for the final error
    """

    def __init__(self, adapters: list[CurrencyAdapter]):
        self._adapters = list(adapters)

    @property
    def adapters(self) -> tuple[CurrencyAdapter, ...]:
        return tuple(self._adapters)

    def get_quote(
        self,
        source_currency: str,
        exchanged_currency: str,
        amount: Decimal,
    ) -> ProviderQuote:
        """
        Get a conversion quote, falling through providers on failure.

        Args:
            source_currency: Source currency code (e.g., 'USD')
            exchanged_currency: Target currency code (e.g., 'EUR')
            amount: Amount to convert

        Returns:
            ProviderQuote from the first provider that answered

        Raises:
            ConfigurationError: If there are no providers, or the provider
                about to be tried is missing a credential
            ConversionError: If every provider failed
        """
        if not self._adapters:
            raise ConfigurationError("No conversion providers configured")

        errors: dict[str, str] = {}
        last_error: Exception | None = None

        for adapter in self._adapters:
            name = adapter.provider_name
            try:
                logger.debug(f"Trying provider: {name}")
                quote = adapter.get_quote(
                    source_currency=source_currency,
                    exchanged_currency=exchanged_currency,
                    amount=amount,
                )
                logger.info(
                    f"Converted {amount} {source_currency}→{exchanged_currency} "
                    f"via {name}: {quote.converted_amount}"
                )
                return quote

            except APIConfigurationError as e:
                logger.error(f"Provider {name} is not configured: {e}")
                raise ConfigurationError(str(e)) from e

            except APIClientError as e:
                errors[name] = str(e)
                last_error = e
                logger.warning(f"Provider {name} failed: {e}")
                continue

            except Exception as e:
                errors[name] = f"Unexpected error: {e}"
                last_error = e
                logger.exception(f"Provider {name} failed unexpectedly")
                continue

        logger.error(
            f"All {len(self._adapters)} providers failed to convert "
            f"{source_currency}→{exchanged_currency}: {errors}"
        )
        raise ConversionError(
            f"Currency conversion failed: {last_error}",
            errors=errors,
            rate_limited=isinstance(last_error, APIRateLimitError),
        )

    def close(self) -> None:
        for adapter in self._adapters:
            adapter.close()


def build_provider_chain(
    settings: ConversionSettings,
    session: requests.Session | None = None,
) -> ProviderChain:
    """
    Build the chain described by ``settings``.

    Raises:
        ConfigurationError: If an endpoint is missing or a provider is unknown
    """
    settings.validate_endpoints()
    try:
        adapters = [
            get_adapter_for_provider(provider, session=session)
            for provider in settings.providers()
        ]
    except APIConfigurationError as e:
        raise ConfigurationError(str(e)) from e
    return ProviderChain(adapters)
