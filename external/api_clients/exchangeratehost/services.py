from decimal import Decimal

from external.api_clients.exceptions import APIResponseError
from external.api_clients.services import BaseService

from .schemas import LatestRatesResponse


class RatesService(BaseService):
    """Exchange rate lookups against the ``/latest`` endpoint."""

    def get_latest(
        self,
        base: str,
        symbols: list[str] | None = None,
        amount: Decimal | None = None,
    ) -> LatestRatesResponse:
        """
        Get the latest exchange rates for ``base``.

        Args:
            base: Base currency code (e.g., 'USD')
            symbols: Optional list of target currency codes to filter
            amount: Optional amount; when given the provider returns
                    converted amounts instead of unit rates

        Returns:
            LatestRatesResponse with the ``rates`` mapping

        Raises:
            APIResponseError: If the provider flags the call as unsuccessful
        """
        params: dict[str, str] = {"base": base}
        if symbols:
            params["symbols"] = ",".join(symbols)
        if amount is not None:
            params["amount"] = format(amount, "f")

        response = self._client.get("/latest", params=params)
        parsed = self._parse_response(response, LatestRatesResponse)

        if parsed.success is False:
            raise APIResponseError(
                parsed.error_message()
                or "Could not retrieve rates from API response.",
                provider=self._client.provider_name,
            )
        return parsed
