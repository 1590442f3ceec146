from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class RealtimeExchangeRate(BaseModel):
    """The ``Realtime Currency Exchange Rate`` block of a response."""

    model_config = ConfigDict(populate_by_name=True)

    from_currency: str | None = Field(None, alias="1. From_Currency Code")
    to_currency: str | None = Field(None, alias="3. To_Currency Code")
    exchange_rate: Decimal | None = Field(None, alias="5. Exchange Rate")
    last_refreshed: str | None = Field(None, alias="6. Last Refreshed")


class CurrencyExchangeRateResponse(BaseModel):
    """
    Schema for ``function=CURRENCY_EXCHANGE_RATE``.

    Alpha Vantage answers 200 even when throttled; the quota message then
    arrives in ``Note`` (or ``Information``) instead of the rate block.
    """

    model_config = ConfigDict(populate_by_name=True)

    realtime: RealtimeExchangeRate | None = Field(
        None, alias="Realtime Currency Exchange Rate"
    )
    note: str | None = Field(None, alias="Note")
    information: str | None = Field(None, alias="Information")
    error_message: str | None = Field(None, alias="Error Message")

    @property
    def is_rate_limited(self) -> bool:
        return any(
            "limit" in text.lower()
            for text in (self.note, self.information)
            if text
        )
