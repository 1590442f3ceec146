from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from external.api_clients.exceptions import APIResponseError

if TYPE_CHECKING:
    from external.api_clients.client import APIClient

T = TypeVar("T", bound=BaseModel)


class BaseService:
    def __init__(self, client: APIClient) -> None:
        """
        Initialize the service with a shared client.

        Args:
            client: The provider client instance to use for API calls
        """
        self._client = client

    def _parse_response(self, response: Any, model: type[T]) -> T:
        """
        Parse and validate an API response using a Pydantic model.

        Args:
            response: Raw API response (decoded JSON)
            model: Pydantic model class to validate against

        Returns:
            Validated Pydantic model instance

        Raises:
            APIResponseError: If the response doesn't match the expected schema
        """
        try:
            return model.model_validate(response)
        except ValidationError as e:
            raise APIResponseError(
                f"Invalid response from {self._client.provider_name}: {e}",
                provider=self._client.provider_name,
            ) from e
