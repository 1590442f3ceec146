from .converter import CurrencyConversionService, convert_currency
from .provider_chain import ProviderChain, build_provider_chain

__all__ = [
    "CurrencyConversionService",
    "convert_currency",
    "ProviderChain",
    "build_provider_chain",
]
