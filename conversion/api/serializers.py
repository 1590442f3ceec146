from rest_framework import serializers


class CurrencyConversionResponseSerializer(serializers.Serializer):
    to = serializers.CharField(source="to_currency")
    amount = serializers.DecimalField(max_digits=None, decimal_places=None)
    rate = serializers.DecimalField(
        max_digits=None, decimal_places=None, allow_null=True
    )
    convertedAmount = serializers.DecimalField(
        max_digits=None, decimal_places=None, source="converted_amount"
    )
    provider = serializers.CharField(allow_null=True)

    def get_fields(self):
        # "from" is a keyword and cannot be declared as an attribute
        fields = super().get_fields()
        return {"from": serializers.CharField(source="from_currency"), **fields}
