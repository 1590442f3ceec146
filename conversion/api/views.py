import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from conversion.exceptions import ConfigurationError, ConversionError, ValidationError
from conversion.schemas import ConversionRequest
from conversion.services import CurrencyConversionService

from .serializers import CurrencyConversionResponseSerializer

logger = logging.getLogger(__name__)


class CurrencyConversionView(APIView):
    """
    API View for currency conversion.

    POST /api/convert/
    Converts an amount from one currency to another.

    Request Body:
    - from: Source currency code
    - to: Target currency code
    - amount: Amount to convert (strictly positive)

    Response:
    - Original amount and currencies
    - Converted amount
    - Exchange rate used (null for identical currencies)
    - Provider used
    """

    def post(self, request: Request) -> Response:
        """Convert currency amount."""
        try:
            conversion_request = ConversionRequest.parse(request.data)
        except ValidationError as e:
            return Response({"errors": e.errors}, status=status.HTTP_400_BAD_REQUEST)

        try:
            with CurrencyConversionService() as service:
                result = service.convert(conversion_request)
        except ConfigurationError as e:
            logger.error(f"Currency conversion is misconfigured: {e}")
            return Response(
                {"error": e.message},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        except ConversionError as e:
            return Response(
                {"error": e.message, "rate_limited": e.rate_limited},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return Response(CurrencyConversionResponseSerializer(result).data)
