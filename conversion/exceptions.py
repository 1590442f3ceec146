from pydantic import ValidationError as PydanticValidationError


class ConversionServiceError(Exception):
    """Base exception for currency conversion errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationError(ConversionServiceError):
    """
    Raised when a conversion request is malformed.

    ``errors`` maps each failing field (``from``, ``to``, ``amount``) to
    its messages. Nothing has been sent over the network at this point.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        details = "; ".join(
            f"{field}: {', '.join(messages)}" for field, messages in errors.items()
        )
        super().__init__(f"Invalid conversion request: {details}")

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "non_field_errors"
            if error["type"] == "value_error":
                message = str(error.get("ctx", {}).get("error", error["msg"]))
            else:
                message = error["msg"]
            errors.setdefault(field, []).append(message)
        return cls(errors)


class ConfigurationError(ConversionServiceError):
    """Raised when a provider endpoint or credential is missing."""


class ConversionError(ConversionServiceError):
    """
    Raised when every provider failed.

    Attributes:
        errors: Failure message per attempted provider, in attempt order
        rate_limited: Whether the last provider failed on a usage quota
    """

    def __init__(
        self,
        message: str,
        errors: dict[str, str] | None = None,
        rate_limited: bool = False,
    ):
        super().__init__(message)
        self.errors = errors or {}
        self.rate_limited = rate_limited
