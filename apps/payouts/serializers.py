from rest_framework import serializers


# =============================================================================
# Input Serializers
# =============================================================================

class BankInfoSerializer(serializers.Serializer):
    """
    Bank wire instructions.

    Every key is optional; only the keys that are sent are stored.
    """

    bankName = serializers.CharField(max_length=255, required=False, allow_blank=True)
    accountName = serializers.CharField(max_length=255, required=False, allow_blank=True)
    accountNumber = serializers.CharField(max_length=64, required=False, allow_blank=True)
    swift = serializers.CharField(max_length=32, required=False, allow_blank=True)
    notes = serializers.CharField(max_length=1000, required=False, allow_blank=True)


class AccountDetailsInputSerializer(serializers.Serializer):
    """
    Validate a PUT /account-details body.

    Fields:
        bank (object): Bank wire instructions, defaults to {}
        crypto (object): Currency code -> address, defaults to {}
    """

    bank = BankInfoSerializer(required=False, allow_null=True)
    crypto = serializers.DictField(
        child=serializers.CharField(max_length=255, allow_blank=True),
        required=False,
        allow_null=True,
        help_text="Deposit addresses keyed by currency code, e.g. {\"btc\": \"...\"}",
    )

    def validate_crypto(self, value):
        """Currency codes are stored lower-case."""
        if value is None:
            return value

        normalized = {}
        for code, address in value.items():
            code = str(code).strip().lower()
            if not code:
                raise serializers.ValidationError('Currency code cannot be empty')
            normalized[code] = address
        return normalized


# =============================================================================
# Output Serializers
# =============================================================================

class AccountDetailsSerializer(serializers.Serializer):
    """Public payout instructions."""

    bank = serializers.JSONField(allow_null=True)
    crypto = serializers.JSONField(allow_null=True)
