import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

import requests

from .exceptions import (
    APIAuthenticationError,
    APIClientError,
    APIConnectionError,
    APINotFoundError,
    APIRateLimitError,
    APIResponseError,
    APITimeoutError,
)

logger = logging.getLogger(__name__)


class APIClient:
    """
    Base API client that provides HTTP access and error mapping.

    Every request is a single attempt: there is no caching and no retry.
    The timeout is whatever the caller configured, ``None`` meaning the
    ``requests`` default (wait indefinitely).
    """

    provider_name: str = "api"

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self._session = session or requests.Session()

    def _get_default_headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    def _get_default_params(self) -> dict[str, Any]:
        return {}

    def _build_url(self, endpoint: str) -> str:
        base = self.base_url.rstrip("/")
        endpoint = endpoint.lstrip("/")
        return f"{base}/{endpoint}"

    def _extract_error_message(self, body: Any) -> str | None:
        """Pull a human-readable message out of an error body, if any."""
        if not isinstance(body, dict):
            return None
        error = body.get("error")
        if isinstance(error, dict):
            return error.get("info") or error.get("message")
        return body.get("message") or error

    def _handle_response(self, response: requests.Response) -> Any:
        """
        Handle the API response and raise appropriate exceptions.

        Args:
            response: The requests Response object

        Returns:
            The parsed JSON response

        Raises:
            APIAuthenticationError: If authentication fails (401)
            APINotFoundError: If resource not found (404)
            APIRateLimitError: If rate limit exceeded (429)
            APIResponseError: For other error status codes or a non-JSON body
        """
        provider = self.provider_name
        try:
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError:
            status_code = response.status_code

            try:
                error_message = self._extract_error_message(response.json())
            except ValueError:
                error_message = None
            if not error_message:
                error_message = (
                    f"API call failed with status: {status_code}"
                )

            if status_code == 401:
                raise APIAuthenticationError(error_message, provider=provider)
            elif status_code == 404:
                raise APINotFoundError(error_message, provider=provider)
            elif status_code == 429:
                retry_after = response.headers.get("Retry-After")
                raise APIRateLimitError(
                    error_message,
                    retry_after=_parse_retry_after(retry_after),
                    provider=provider,
                )
            else:
                raise APIResponseError(
                    error_message, status_code=status_code, provider=provider
                )
        except ValueError as e:
            raise APIResponseError(f"Invalid JSON response: {e}", provider=provider)

    def get(
        self,
        endpoint: str,
        params: dict | None = None,
        headers: dict | None = None,
    ) -> Any:
        """
        Make a GET request to the API.

        Args:
            endpoint: API endpoint (appended to base_url)
            params: Query parameters (merged with defaults)
            headers: Additional headers (merged with defaults)

        Returns:
            The parsed JSON response

        Raises:
            APIClientError: For any API-related errors
        """
        url = self._build_url(endpoint)

        request_headers = self._get_default_headers()
        if headers:
            request_headers.update(headers)

        request_params = self._get_default_params()
        if params:
            request_params.update(params)

        logger.debug(f"Making GET request to {url}")

        try:
            response = self._session.request(
                method="GET",
                url=url,
                params=request_params,
                headers=request_headers,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            raise APITimeoutError(
                f"Request to {url} timed out after {self.timeout}s",
                provider=self.provider_name,
            )
        except requests.exceptions.ConnectionError as e:
            raise APIConnectionError(
                f"Connection error to {url}: {e}", provider=self.provider_name
            )
        except requests.exceptions.RequestException as e:
            raise APIClientError(
                f"Request failed: {e}", provider=self.provider_name
            )

        return self._handle_response(response)

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def _parse_retry_after(value: str | None) -> int | None:
    """
    Seconds to wait from a ``Retry-After`` header.

    The header holds either delay-seconds or an HTTP-date; anything
    unparseable yields ``None``.
    """
    if not value:
        return None
    try:
        return max(int(value), 0)
    except ValueError:
        pass
    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=timezone.utc)
    delay = (retry_at - datetime.now(timezone.utc)).total_seconds()
    return max(int(delay), 0)
