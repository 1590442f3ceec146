import logging
from decimal import Decimal
from typing import Any

import requests

from conversion.config import ConversionSettings
from conversion.schemas import ConversionRequest, ConversionResult
from external.api_clients.adapters import CurrencyAdapter

from .provider_chain import ProviderChain, build_provider_chain

logger = logging.getLogger(__name__)


class CurrencyConversionService:
    """
    Converts amounts between currencies.

    The request is validated first, identical currencies are answered
    without touching the network, and anything else goes through the
    provider chain (primary provider, then fallback). The service keeps
    no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        settings: ConversionSettings | None = None,
        adapters: list[CurrencyAdapter] | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the service.

        Args:
            settings: Provider configuration. Read from Django settings
                      when neither settings nor adapters are given.
            adapters: Explicit provider adapters, tried in order. Takes
                      precedence over ``settings``.
            session: Optional ``requests.Session`` shared by the adapters

        Raises:
            ConfigurationError: If a provider endpoint is missing
        """
        if adapters is not None:
            self._chain = ProviderChain(adapters)
        else:
            settings = settings or ConversionSettings.from_django_settings()
            self._chain = build_provider_chain(settings, session=session)

    def convert(
        self, request: ConversionRequest | dict[str, Any]
    ) -> ConversionResult:
        """
        Convert an amount from one currency to another.

        Args:
            request: A ConversionRequest or a mapping with ``from``,
                     ``to`` and ``amount``

        Returns:
            ConversionResult with the converted amount and the rate used

        Raises:
            ValidationError: If the request is malformed
            ConfigurationError: If the fallback is needed but not configured
            ConversionError: If every provider failed
        """
        conversion_request = ConversionRequest.parse(request)
        source = conversion_request.from_currency
        target = conversion_request.to_currency
        amount = conversion_request.amount

        if source == target:
            logger.debug(f"Same currency {source}, returning amount unchanged")
            return ConversionResult(
                from_currency=source,
                to_currency=target,
                amount=amount,
                converted_amount=amount,
            )

        quote = self._chain.get_quote(
            source_currency=source,
            exchanged_currency=target,
            amount=amount,
        )

        return ConversionResult(
            from_currency=source,
            to_currency=target,
            amount=amount,
            rate=quote.rate,
            converted_amount=quote.converted_amount,
            provider=quote.provider_name,
        )

    def close(self) -> None:
        """Close the provider HTTP sessions."""
        self._chain.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def convert_currency(
    from_currency: str,
    to_currency: str,
    amount: Decimal | float | int | str,
) -> ConversionResult:
    """
    Convert an amount using the providers configured in Django settings.

    Args:
        from_currency: Source currency code (e.g., 'USD')
        to_currency: Target currency code (e.g., 'EUR')
        amount: Amount to convert, strictly positive

    Returns:
        ConversionResult with the converted amount
    """
    with CurrencyConversionService() as service:
        return service.convert(
            {"from": from_currency, "to": to_currency, "amount": amount}
        )
