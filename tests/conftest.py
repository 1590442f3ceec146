"""Pytest configuration and fixtures."""

import json
from decimal import Decimal

import pytest
import requests

from conversion.config import ConversionSettings
from external.api_clients.adapters import CurrencyAdapter, ProviderQuote

PRIMARY_URL = "https://rates.test"
FALLBACK_URL = "https://fx.test"


def make_response(payload=None, status_code=200, text=None, headers=None):
    """Build a real ``requests.Response`` carrying ``payload`` as JSON."""
    response = requests.Response()
    response.status_code = status_code
    if text is not None:
        response._content = text.encode()
    else:
        response._content = json.dumps(payload).encode()
        response.headers["Content-Type"] = "application/json"
    response.headers.update(headers or {})
    response.encoding = "utf-8"
    response.url = "https://test.invalid/"
    return response


class FakeSession:
    """
    Stand-in for ``requests.Session`` that answers by URL prefix.

    Every call is recorded; a URL without a route fails the test.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        for prefix, outcome in self.routes.items():
            if url.startswith(prefix):
                if isinstance(outcome, Exception):
                    raise outcome
                return outcome
        raise AssertionError(f"Unexpected request to {url}")

    def calls_to(self, prefix):
        return [call for call in self.calls if call["url"].startswith(prefix)]

    def close(self):
        self.closed = True


class StubAdapter(CurrencyAdapter):
    """Adapter double returning a fixed converted amount or raising."""

    def __init__(self, name, converted=None, error=None):
        super().__init__(base_url="https://stub.test")
        self._name = name
        self._converted = converted
        self._error = error
        self.calls = 0
        self.closed = False

    @property
    def provider_name(self):
        return self._name

    def get_quote(self, source_currency, exchanged_currency, amount):
        self.calls += 1
        if self._error is not None:
            raise self._error
        converted = Decimal(str(self._converted))
        return ProviderQuote(
            source_currency=source_currency,
            exchanged_currency=exchanged_currency,
            amount=amount,
            rate=converted / amount,
            converted_amount=converted,
            provider_name=self._name,
        )

    def close(self):
        self.closed = True


@pytest.fixture
def conversion_settings():
    return ConversionSettings(
        primary_endpoint=PRIMARY_URL,
        fallback_endpoint=FALLBACK_URL,
        fallback_api_key="test-key",
    )


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def patch_requests(monkeypatch):
    """Route every ``requests.Session.request`` call through a FakeSession."""
    session = FakeSession()

    def fake_request(self, method, url, **kwargs):
        return session.request(method, url, **kwargs)

    monkeypatch.setattr(requests.Session, "request", fake_request)
    return session
