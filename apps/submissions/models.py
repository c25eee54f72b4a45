from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from decimal import Decimal
import secrets


class SubmissionMethod(models.TextChoices):
    WIRE = 'wire', 'Bank wire'
    CRYPTO = 'crypto', 'Cryptocurrency'


class SubmissionStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    CONFIRMED = 'confirmed', 'Confirmed'


def generate_submission_id():
    """Opaque, unguessable 12-character URL-safe token."""
    return secrets.token_urlsafe(9)


class Submission(models.Model):
    """
    A payment claim submitted by an end user.

    Status moves one way only: pending -> confirmed. Rows are never deleted
    here. Name, email and amount are nullable only for rows imported from the
    legacy document store; new submissions always carry them.
    """

    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_submission_id,
        editable=False
    )

    # Claimant
    name = models.CharField(max_length=255, null=True, blank=True)
    email = models.CharField(max_length=255, null=True, blank=True)

    # Payment claim
    method = models.CharField(
        max_length=10,
        choices=SubmissionMethod.choices,
        default=SubmissionMethod.CRYPTO
    )
    selected_network = models.CharField(max_length=50, null=True, blank=True)
    amount = models.DecimalField(
        max_digits=20,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    txid = models.CharField(max_length=255, null=True, blank=True)

    # Public paths of the stored uploads
    id_file_url = models.CharField(max_length=512, null=True, blank=True)
    payment_proof_url = models.CharField(max_length=512, null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=SubmissionStatus.choices,
        default=SubmissionStatus.PENDING
    )

    # Server-assigned; the legacy importer carries over original timestamps
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'submissions'
        indexes = [
            models.Index(fields=['created_at'], name='submissions_created_idx'),
            models.Index(fields=['status', 'created_at'], name='submissions_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.id} - {self.name} {self.amount} ({self.method}, {self.status})"

    @property
    def is_confirmed(self):
        return self.status == SubmissionStatus.CONFIRMED

    def mark_confirmed(self):
        """Move a pending submission to confirmed."""
        self.status = SubmissionStatus.CONFIRMED
        self.save(update_fields=['status'])
