"""HTTP client and provider adapter tests."""

from decimal import Decimal

import pytest
import requests

from conftest import FakeSession, make_response
from external.api_clients import (
    APIAuthenticationError,
    APIClient,
    APIClientError,
    APIConfigurationError,
    APIConnectionError,
    APINotFoundError,
    APIRateLimitError,
    APIResponseError,
    APITimeoutError,
)
from external.api_clients.adapters import register_adapter
from external.api_clients.adapters.alphavantage import AlphaVantageAdapter
from external.api_clients.adapters.exchangeratehost import ExchangeRateHostAdapter
from external.api_clients.alphavantage import AlphaVantageClient
from external.api_clients.exchangeratehost import ExchangeRateHostClient

BASE_URL = "https://api.test"


def client_with(outcome, **kwargs):
    session = FakeSession({BASE_URL: outcome})
    return APIClient(base_url=BASE_URL, session=session, **kwargs), session


def test_get_builds_url_and_returns_json():
    client, session = client_with(make_response({"ok": True}), timeout=3)

    assert client.get("/thing", params={"a": "1"}) == {"ok": True}
    call = session.calls[0]
    assert call["url"] == f"{BASE_URL}/thing"
    assert call["params"] == {"a": "1"}
    assert call["timeout"] == 3
    assert call["headers"]["Accept"] == "application/json"


@pytest.mark.parametrize(
    "status_code,error_class",
    [
        (401, APIAuthenticationError),
        (404, APINotFoundError),
        (429, APIRateLimitError),
        (500, APIResponseError),
    ],
)
def test_error_status_codes_map_to_exceptions(status_code, error_class):
    client, _ = client_with(make_response({"message": "nope"}, status_code=status_code))

    with pytest.raises(error_class) as exc_info:
        client.get("/thing")

    assert exc_info.value.message == "nope"
    assert exc_info.value.status_code == status_code


def test_retry_after_header_is_kept():
    client, _ = client_with(
        make_response({}, status_code=429, headers={"Retry-After": "30"})
    )

    with pytest.raises(APIRateLimitError) as exc_info:
        client.get("/thing")

    assert exc_info.value.retry_after == 30


@pytest.mark.parametrize(
    "header,expected",
    [
        ("Wed, 21 Oct 2015 07:28:00 GMT", 0),
        ("soon", None),
        ("-5", 0),
    ],
)
def test_retry_after_header_variants(header, expected):
    client, _ = client_with(
        make_response({}, status_code=429, headers={"Retry-After": header})
    )

    with pytest.raises(APIRateLimitError) as exc_info:
        client.get("/thing")

    assert exc_info.value.retry_after == expected


def test_retry_after_http_date_becomes_seconds():
    client, _ = client_with(
        make_response(
            {}, status_code=429, headers={"Retry-After": "Fri, 01 Jan 2100 00:00:00 GMT"}
        )
    )

    with pytest.raises(APIRateLimitError) as exc_info:
        client.get("/thing")

    assert exc_info.value.retry_after > 0


def test_nested_error_info_is_used_as_message():
    client, _ = client_with(
        make_response({"error": {"code": 101, "info": "Invalid access key"}}, status_code=400)
    )

    with pytest.raises(APIResponseError, match="Invalid access key"):
        client.get("/thing")


def test_invalid_json_body_is_a_response_error():
    client, _ = client_with(make_response(text="<html>"))

    with pytest.raises(APIResponseError, match="Invalid JSON"):
        client.get("/thing")


@pytest.mark.parametrize(
    "raised,error_class",
    [
        (requests.exceptions.Timeout("slow"), APITimeoutError),
        (requests.exceptions.ConnectionError("refused"), APIConnectionError),
        (requests.exceptions.TooManyRedirects("loop"), APIClientError),
    ],
)
def test_transport_errors_are_wrapped(raised, error_class):
    client, _ = client_with(raised)

    with pytest.raises(error_class):
        client.get("/thing")


def test_context_manager_closes_session():
    client, session = client_with(make_response({}))

    with client:
        pass

    assert session.closed is True


def test_exchangeratehost_sends_access_key_when_configured():
    session = FakeSession({BASE_URL: make_response({"rates": {"EUR": 0.9}})})
    client = ExchangeRateHostClient(base_url=BASE_URL, api_key="k", session=session)

    response = client.rates.get_latest(base="USD", symbols=["EUR"])

    assert response.rates == {"EUR": 0.9}
    assert session.calls[0]["params"] == {
        "access_key": "k",
        "base": "USD",
        "symbols": "EUR",
    }


def test_exchangeratehost_unsuccessful_body_raises():
    session = FakeSession(
        {
            BASE_URL: make_response(
                {"success": False, "error": {"code": 104, "info": "Usage limit reached"}}
            )
        }
    )
    client = ExchangeRateHostClient(base_url=BASE_URL, session=session)

    with pytest.raises(APIResponseError, match="Usage limit reached"):
        client.rates.get_latest(base="USD")


def test_exchangeratehost_adapter_rejects_missing_pair():
    session = FakeSession({BASE_URL: make_response({"rates": {}})})
    adapter = ExchangeRateHostAdapter(base_url=BASE_URL, session=session)

    with pytest.raises(APIResponseError, match="USD-EUR"):
        adapter.get_quote("USD", "EUR", Decimal("100"))


def test_alphavantage_information_note_is_rate_limit():
    session = FakeSession(
        {
            BASE_URL: make_response(
                {"Information": "You have reached the daily rate limit for this key."}
            )
        }
    )
    client = AlphaVantageClient(base_url=BASE_URL, api_key="k", session=session)

    with pytest.raises(APIRateLimitError) as exc_info:
        client.forex.get_realtime_rate("USD", "EUR")

    assert exc_info.value.status_code is None


def test_alphavantage_non_numeric_rate_is_response_error():
    session = FakeSession(
        {
            BASE_URL: make_response(
                {"Realtime Currency Exchange Rate": {"5. Exchange Rate": "n/a"}}
            )
        }
    )
    client = AlphaVantageClient(base_url=BASE_URL, api_key="k", session=session)

    with pytest.raises(APIResponseError, match="alphavantage"):
        client.forex.get_realtime_rate("USD", "EUR")


def test_alphavantage_adapter_requires_api_key():
    session = FakeSession()
    adapter = AlphaVantageAdapter(base_url=BASE_URL, session=session)

    with pytest.raises(APIConfigurationError, match="Missing API key"):
        adapter.get_quote("USD", "EUR", Decimal("1"))

    assert session.calls == []


def test_alphavantage_adapter_multiplies_rate():
    session = FakeSession(
        {
            BASE_URL: make_response(
                {"Realtime Currency Exchange Rate": {"5. Exchange Rate": "1.25"}}
            )
        }
    )
    adapter = AlphaVantageAdapter(base_url=BASE_URL, api_key="k", session=session)

    quote = adapter.get_quote("EUR", "USD", Decimal("8"))

    assert quote.rate == Decimal("1.25")
    assert quote.converted_amount == Decimal("10")
    assert quote.provider_name == "alphavantage"


@pytest.mark.parametrize("adapter_class", [ExchangeRateHostAdapter, AlphaVantageAdapter])
def test_adapter_builds_its_client_up_front(adapter_class):
    session = FakeSession()
    adapter = adapter_class(base_url=BASE_URL, api_key="k", timeout=4, session=session)

    client = adapter.client
    assert adapter.client is client
    assert client.base_url == BASE_URL
    assert client.timeout == 4

    adapter.close()

    assert session.closed is True
    assert session.calls == []


def test_register_adapter_rejects_non_adapters():
    with pytest.raises(TypeError):
        register_adapter("bogus", object)
