from datetime import timezone as dt_timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.utils import timezone
from django.utils.dateparse import parse_datetime
from rest_framework import serializers

from .models import Submission, SubmissionMethod
from .storage import is_allowed_upload

# Basic local@domain.tld shape
EMAIL_SHAPE = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'

UNSUPPORTED_FILE_MESSAGE = 'Only images and PDFs allowed'


def canonical_timestamp(value):
    """
    Render a stored timestamp as ISO-8601 UTC with milliseconds and ``Z``.

    Accepts aware or naive datetimes and ISO text; unparseable text is
    returned unchanged.
    """
    if value is None:
        return None
    if isinstance(value, str):
        parsed = parse_datetime(value)
        if parsed is None:
            return value
        value = parsed
    if timezone.is_naive(value):
        value = timezone.make_aware(value, dt_timezone.utc)
    return (
        value.astimezone(dt_timezone.utc)
        .isoformat(timespec='milliseconds')
        .replace('+00:00', 'Z')
    )


# =============================================================================
# Input Serializers
# =============================================================================

class RoundedDecimalField(serializers.DecimalField):
    """
    Decimal input rounded to ``decimal_places`` instead of rejected.

    Values that no longer fit ``max_digits`` after rounding still fail.
    """

    def validate_precision(self, value):
        try:
            value = self.quantize(value)
        except InvalidOperation:
            self.fail('max_digits', max_digits=self.max_digits)
        return super().validate_precision(value)


class SubmissionCreateSerializer(serializers.Serializer):
    """
    Validate a multipart POST /submissions body.

    Field names follow the payment form: selectedNetwork, idFile,
    paymentProof. Every failing field is reported at once.
    """

    name = serializers.CharField(max_length=255)
    email = serializers.RegexField(
        EMAIL_SHAPE,
        max_length=255,
        error_messages={'invalid': 'Enter a valid email address.'}
    )
    method = serializers.ChoiceField(choices=SubmissionMethod.choices)
    amount = RoundedDecimalField(
        max_digits=20,
        decimal_places=2,
        rounding=ROUND_HALF_UP,
        min_value=Decimal('0.01'),
        error_messages={'min_value': 'Amount must be greater than zero.'}
    )
    selectedNetwork = serializers.CharField(
        max_length=50, required=False, allow_blank=True, allow_null=True
    )
    txid = serializers.CharField(
        max_length=255, required=False, allow_blank=True, allow_null=True
    )
    idFile = serializers.FileField(
        error_messages={'required': 'Identity file is required.'}
    )
    paymentProof = serializers.FileField(required=False, allow_null=True)

    def validate_idFile(self, value):
        if not is_allowed_upload(value):
            raise serializers.ValidationError(UNSUPPORTED_FILE_MESSAGE)
        return value

    def validate_paymentProof(self, value):
        if value is not None and not is_allowed_upload(value):
            raise serializers.ValidationError(UNSUPPORTED_FILE_MESSAGE)
        return value


class SubmissionStatusInputSerializer(serializers.Serializer):
    """Validate a PUT /submissions/<id>/status body."""

    status = serializers.CharField(max_length=20)


# =============================================================================
# Output Serializers
# =============================================================================

class SubmissionSerializer(serializers.ModelSerializer):
    """Submission as shown on the administrator dashboard."""

    selectedNetwork = serializers.CharField(source='selected_network', read_only=True, allow_null=True)
    idFileUrl = serializers.SerializerMethodField()
    paymentProofUrl = serializers.SerializerMethodField()
    createdAt = serializers.SerializerMethodField()

    class Meta:
        model = Submission
        fields = [
            'id',
            'name',
            'email',
            'method',
            'selectedNetwork',
            'amount',
            'txid',
            'idFileUrl',
            'paymentProofUrl',
            'status',
            'createdAt',
        ]
        read_only_fields = fields

    def get_idFileUrl(self, obj):
        return str(obj.id_file_url) if obj.id_file_url else None

    def get_paymentProofUrl(self, obj):
        return str(obj.payment_proof_url) if obj.payment_proof_url else None

    def get_createdAt(self, obj):
        return canonical_timestamp(obj.created_at)


class SubmissionCreatedSerializer(serializers.Serializer):
    id = serializers.CharField()
