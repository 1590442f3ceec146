from .base import CurrencyAdapter, ProviderQuote
from .factory import ADAPTERS, get_adapter_for_provider, register_adapter

__all__ = [
    "get_adapter_for_provider",
    "register_adapter",
    "ADAPTERS",
    "CurrencyAdapter",
    "ProviderQuote",
]
