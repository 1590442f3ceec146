class APIClientError(Exception):
    """Base exception for all exchange-rate API client errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        provider: str | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.provider = provider
        super().__init__(self.message)


class APIConnectionError(APIClientError):
    """The provider could not be reached."""


class APITimeoutError(APIClientError):
    """The request exceeded the configured timeout."""


class APIResponseError(APIClientError):
    """The provider answered with an error status or an unusable body."""


class APIAuthenticationError(APIClientError):
    def __init__(self, message: str = "Authentication failed", **kwargs):
        super().__init__(message, status_code=401, **kwargs)


class APIRateLimitError(APIClientError):
    """
    Raised when the provider signals that the usage quota is exhausted.

    Some providers answer 429, others return 200 with an in-band note,
    so ``status_code`` is optional here.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int | None = None,
        status_code: int | None = 429,
        **kwargs,
    ):
        super().__init__(message, status_code=status_code, **kwargs)
        self.retry_after = retry_after


class APINotFoundError(APIClientError):
    def __init__(self, message: str = "Resource not found", **kwargs):
        super().__init__(message, status_code=404, **kwargs)


class APIConfigurationError(APIClientError):
    """Raised before any request when a provider lacks required settings."""
