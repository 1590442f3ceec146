from .adapters import CurrencyAdapter, ProviderQuote, get_adapter_for_provider
from .client import APIClient
from .exceptions import (
    APIAuthenticationError,
    APIClientError,
    APIConfigurationError,
    APIConnectionError,
    APINotFoundError,
    APIRateLimitError,
    APIResponseError,
    APITimeoutError,
)

__all__ = [
    # Adapter interface
    "get_adapter_for_provider",
    "CurrencyAdapter",
    "ProviderQuote",
    # Base client
    "APIClient",
    # Exceptions
    "APIClientError",
    "APIConfigurationError",
    "APIConnectionError",
    "APITimeoutError",
    "APIResponseError",
    "APIAuthenticationError",
    "APIRateLimitError",
    "APINotFoundError",
]
