from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Annotated

import requests
from pydantic import BaseModel, BeforeValidator, Field

CurrencyCode = Annotated[
    str,
    BeforeValidator(lambda v: v.upper() if isinstance(v, str) else v),
    Field(min_length=3, max_length=3),
]


class ProviderQuote(BaseModel):
    """
    Standardized conversion figure returned by all adapters.

    Attributes:
        source_currency: The base currency code (e.g., 'USD')
        exchanged_currency: The target currency code (e.g., 'EUR')
        amount: The amount that was converted
        rate: The per-unit exchange rate
        converted_amount: ``amount`` expressed in ``exchanged_currency``
        provider_name: The name of the provider that supplied the data
    """

    model_config = {"frozen": True}

    source_currency: CurrencyCode
    exchanged_currency: CurrencyCode
    amount: Decimal = Field(..., gt=0)
    rate: Decimal | None = Field(None, gt=0)
    converted_amount: Decimal
    provider_name: str


class CurrencyAdapter(ABC):
    """
    Abstract base class for currency conversion adapters.

    Each adapter makes at most one request per ``get_quote`` call and
    raises an ``APIClientError`` subclass when the provider cannot answer.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self._base_url = base_url
        self._api_key = api_key
        self._timeout = timeout
        self._session = session

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @abstractmethod
    def get_quote(
        self,
        source_currency: str,
        exchanged_currency: str,
        amount: Decimal,
    ) -> ProviderQuote:
        pass

    def close(self) -> None:
        pass
