from typing import TYPE_CHECKING

import requests

from external.api_clients.exceptions import APIConfigurationError

from .alphavantage import AlphaVantageAdapter
from .base import CurrencyAdapter
from .exchangeratehost import ExchangeRateHostAdapter

if TYPE_CHECKING:
    from conversion.config import ProviderSettings

# Registry of available adapters (maps provider name to adapter class)
ADAPTERS: dict[str, type[CurrencyAdapter]] = {
    "exchangeratehost": ExchangeRateHostAdapter,
    "alphavantage": AlphaVantageAdapter,
}


def get_adapter_for_provider(
    provider: "ProviderSettings",
    session: requests.Session | None = None,
) -> CurrencyAdapter:
    """
    Get an adapter instance configured from a provider settings entry.

    Args:
        provider: Provider settings (name, URL, API key, timeout)
        session: Optional shared ``requests.Session``

    Returns:
        An instance of the appropriate CurrencyAdapter

    Raises:
        APIConfigurationError: If the provider name is not registered
    """
    adapter_class = ADAPTERS.get(provider.name.lower())
    if adapter_class is None:
        available = ", ".join(ADAPTERS.keys())
        raise APIConfigurationError(
            f"Unknown provider: '{provider.name}'. Available providers: {available}"
        )

    return adapter_class(
        base_url=provider.api_url,
        api_key=provider.api_key,
        timeout=provider.timeout,
        session=session,
    )


def register_adapter(name: str, adapter_class: type[CurrencyAdapter]) -> None:
    """
    Register a new adapter in the registry.

    Args:
        name: The provider name (will be lowercased)
        adapter_class: The adapter class (must inherit from CurrencyAdapter)
    """
    if not issubclass(adapter_class, CurrencyAdapter):
        raise TypeError(
            f"adapter_class must be a subclass of CurrencyAdapter, "
            f"got {type(adapter_class)}"
        )
    ADAPTERS[name.lower()] = adapter_class
