from django.core.management.base import BaseCommand, CommandError

from conversion.exceptions import ConversionServiceError
from conversion.services import convert_currency


class Command(BaseCommand):
    """Convert an amount between two currencies using the configured providers."""

    help = "Convert an amount between two currencies, e.g. convert_currency USD EUR 100"

    def add_arguments(self, parser):
        parser.add_argument("from_currency", help="Source currency code (e.g., USD)")
        parser.add_argument("to_currency", help="Target currency code (e.g., EUR)")
        parser.add_argument("amount", help="Amount to convert")

    def handle(self, *args, **options):
        try:
            result = convert_currency(
                from_currency=options["from_currency"],
                to_currency=options["to_currency"],
                amount=options["amount"],
            )
        except ConversionServiceError as e:
            raise CommandError(e.message)

        self.stdout.write(
            self.style.SUCCESS(
                f"{result.amount} {result.from_currency} = "
                f"{result.converted_amount} {result.to_currency}"
            )
        )
        if result.rate is not None:
            self.stdout.write(f"  Rate: {result.rate} (provider: {result.provider})")
