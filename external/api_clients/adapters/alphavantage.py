from decimal import Decimal

import requests

from external.api_clients.alphavantage import AlphaVantageClient
from external.api_clients.exceptions import APIConfigurationError, APIResponseError

from .base import CurrencyAdapter, ProviderQuote


class AlphaVantageAdapter(CurrencyAdapter):
    """
    Adapter for the Alpha Vantage real-time FX endpoint.

    The provider quotes a unit rate; the converted amount is computed here.
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
        self._client = AlphaVantageClient(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            session=session,
        )

    @property
    def provider_name(self) -> str:
        return "alphavantage"

    @property
    def client(self) -> AlphaVantageClient:
        return self._client

    def get_quote(
        self,
        source_currency: str,
        exchanged_currency: str,
        amount: Decimal,
    ) -> ProviderQuote:
        """
        Fetch the real-time rate for the pair and apply it to ``amount``.

        Raises:
            APIConfigurationError: If no API key is configured (no request is made)
            APIRateLimitError: If the provider reports an exhausted quota
            APIClientError: If there's an error fetching the data
        """
        if not self._api_key:
            raise APIConfigurationError(
                "Currency conversion service is not configured. Missing API key.",
                provider=self.provider_name,
            )

        fx_data = self.client.forex.get_realtime_rate(
            from_currency=source_currency,
            to_currency=exchanged_currency,
        )

        rate = fx_data.exchange_rate
        if rate <= 0:
            raise APIResponseError(
                f"Invalid exchange rate {rate} for pair "
                f"{source_currency}-{exchanged_currency}.",
                provider=self.provider_name,
            )

        return ProviderQuote(
            source_currency=source_currency,
            exchanged_currency=exchanged_currency,
            amount=amount,
            rate=rate,
            converted_amount=amount * rate,
            provider_name=self.provider_name,
        )

    def close(self) -> None:
        self._client.close()
