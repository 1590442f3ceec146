from .client import ExchangeRateHostClient
from .schemas import ErrorInfo, LatestRatesResponse
from .services import RatesService

__all__ = [
    "ExchangeRateHostClient",
    "RatesService",
    "ErrorInfo",
    "LatestRatesResponse",
]
