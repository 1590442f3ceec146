from decimal import Decimal
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError


def _check_currency_code(value: str) -> str:
    if len(value) != 3:
        raise ValueError("Currency code must be 3 characters")
    return value.upper()


def _check_positive(value: Decimal) -> Decimal:
    if value <= 0:
        raise ValueError("Amount must be a positive number")
    return value


CurrencyCode = Annotated[str, AfterValidator(_check_currency_code)]
PositiveAmount = Annotated[Decimal, AfterValidator(_check_positive)]


class ConversionRequest(BaseModel):
    """An amount to convert between two currencies."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_currency: CurrencyCode = Field(alias="from")
    to_currency: CurrencyCode = Field(alias="to")
    amount: PositiveAmount

    @classmethod
    def parse(cls, data: "ConversionRequest | dict[str, Any]") -> "ConversionRequest":
        """
        Build a request from caller input.

        Raises:
            ValidationError: With the failing fields, before any network call
        """
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e) from e


class ConversionResult(BaseModel):
    """
    Outcome of a conversion.

    ``rate`` is ``None`` when both currencies are the same and no provider
    was consulted; ``provider`` names the source of the figure otherwise.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_currency: str = Field(alias="from")
    to_currency: str = Field(alias="to")
    amount: Decimal
    rate: Decimal | None = None
    converted_amount: Decimal = Field(alias="convertedAmount")
    provider: str | None = None
