from decimal import Decimal

import requests

from external.api_clients.exceptions import APIResponseError
from external.api_clients.exchangeratehost import ExchangeRateHostClient

from .base import CurrencyAdapter, ProviderQuote


class ExchangeRateHostAdapter(CurrencyAdapter):
    """
    Adapter for the exchangerate.host API.

    The amount is sent with the request, so the figure under ``rates``
    is already the converted amount. The unit rate is derived from it.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        super().__init__(
            base_url=base_url, api_key=api_key, timeout=timeout, session=session
        )
        self._client = ExchangeRateHostClient(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            session=session,
        )

    @property
    def provider_name(self) -> str:
        return "exchangeratehost"

    @property
    def client(self) -> ExchangeRateHostClient:
        return self._client

    def get_quote(
        self,
        source_currency: str,
        exchanged_currency: str,
        amount: Decimal,
    ) -> ProviderQuote:
        """
        Convert ``amount`` through the ``/latest`` endpoint.

        Raises:
            APIResponseError: If the target currency is missing from ``rates``
            APIClientError: If there's an error fetching the data
        """
        response = self.client.rates.get_latest(
            base=source_currency,
            symbols=[exchanged_currency],
            amount=amount,
        )

        converted = (response.rates or {}).get(exchanged_currency)
        if not converted or converted <= 0:
            raise APIResponseError(
                f"No exchange rate data available for the pair "
                f"{source_currency}-{exchanged_currency}.",
                provider=self.provider_name,
            )

        converted_amount = Decimal(str(converted))
        return ProviderQuote(
            source_currency=source_currency,
            exchanged_currency=exchanged_currency,
            amount=amount,
            rate=converted_amount / amount,
            converted_amount=converted_amount,
            provider_name=self.provider_name,
        )

    def close(self) -> None:
        self._client.close()
