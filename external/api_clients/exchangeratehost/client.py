from typing import Any

import requests

from external.api_clients.client import APIClient

from .services import RatesService


class ExchangeRateHostClient(APIClient):
    """Client for the exchangerate.host API (no key needed for ``/latest``)."""

    provider_name = "exchangeratehost"

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            session=session,
        )
        self._rates = RatesService(self)

    @property
    def rates(self) -> RatesService:
        """
        Access the rates service.

        Provides methods for:
            - get_latest(): Get current rates, optionally scaled by an amount

        Returns:
            RatesService instance
        """
        return self._rates

    def _get_default_params(self) -> dict[str, Any]:
        params = super()._get_default_params()
        if self.api_key:
            params["access_key"] = self.api_key
        return params
