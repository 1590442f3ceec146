from external.api_clients.exceptions import APIRateLimitError, APIResponseError
from external.api_clients.services import BaseService

from .schemas import CurrencyExchangeRateResponse, RealtimeExchangeRate

RATE_LIMIT_MESSAGE = "API rate limit reached for currency conversion."


class ForexService(BaseService):
    """Foreign exchange endpoints of the ``/query`` API."""

    def get_realtime_rate(
        self,
        from_currency: str,
        to_currency: str,
    ) -> RealtimeExchangeRate:
        """
        Get the real-time exchange rate for a currency pair.

        Args:
            from_currency: Source currency code (e.g., 'USD')
            to_currency: Target currency code (e.g., 'EUR')

        Returns:
            RealtimeExchangeRate with a populated ``exchange_rate``

        Raises:
            APIRateLimitError: If the response carries a quota note
            APIResponseError: If the rate block or the rate is missing
        """
        params = {
            "function": "CURRENCY_EXCHANGE_RATE",
            "from_currency": from_currency,
            "to_currency": to_currency,
        }

        response = self._client.get("/query", params=params)
        parsed = self._parse_response(response, CurrencyExchangeRateResponse)

        fx_data = parsed.realtime
        if fx_data is None or fx_data.exchange_rate is None:
            if parsed.is_rate_limited:
                raise APIRateLimitError(
                    RATE_LIMIT_MESSAGE,
                    status_code=None,
                    provider=self._client.provider_name,
                )
            raise APIResponseError(
                parsed.error_message
                or f"No FX data available for pair {from_currency}-{to_currency}.",
                provider=self._client.provider_name,
            )
        return fx_data
