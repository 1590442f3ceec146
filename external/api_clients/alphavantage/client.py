from typing import Any

import requests

from external.api_clients.client import APIClient

from .services import ForexService


class AlphaVantageClient(APIClient):
    """Client for the Alpha Vantage ``/query`` API; the key goes in the query string."""

    provider_name = "alphavantage"

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
        self._forex = ForexService(self)

    @property
    def forex(self) -> ForexService:
        return self._forex

    def _get_default_params(self) -> dict[str, Any]:
        params = super()._get_default_params()
        if self.api_key:
            params["apikey"] = self.api_key
        return params
