from .client import AlphaVantageClient
from .schemas import CurrencyExchangeRateResponse, RealtimeExchangeRate
from .services import RATE_LIMIT_MESSAGE, ForexService

__all__ = [
    "AlphaVantageClient",
    "ForexService",
    "CurrencyExchangeRateResponse",
    "RealtimeExchangeRate",
    "RATE_LIMIT_MESSAGE",
]
