from datetime import date as date_type

from pydantic import BaseModel


class ErrorInfo(BaseModel):
    """Error object embedded in an unsuccessful response."""

    code: int | None = None
    type: str | None = None
    info: str | None = None


class LatestRatesResponse(BaseModel):
    """
    Schema for the ``/latest`` response.

    When ``amount`` is sent with the request, every value in ``rates`` is
    the converted amount rather than the per-unit rate.
    """

    success: bool | None = None
    base: str | None = None
    date: date_type | None = None
    rates: dict[str, float] | None = None
    error: ErrorInfo | None = None

    def error_message(self) -> str | None:
        if self.error is not None:
            return self.error.info or self.error.type
        return None

