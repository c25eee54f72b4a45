"""
One-time import of submissions from the legacy document store.

The previous version of the service kept everything in a JSON document::

    {
        "submissions": [
            {"id": "V1StGXR8_Z5j", "name": "...", "email": "...",
             "method": "crypto", "selectedNetwork": "USDT", "amount": "150",
             "txid": "...", "idFileUrl": "/mock-storage/...",
             "paymentProofUrl": null, "status": "pending",
             "createdAt": "2024-05-01T10:00:00.000Z"}
        ]
    }

The import runs only while the submissions table is empty, so it can be
invoked on every start without duplicating rows or touching organic data.
It is best-effort: a bad record is logged and skipped, never fatal.
"""

import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime, time as dt_time
from datetime import timezone as dt_timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from pathlib import Path
from typing import Any, List, Optional

from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from apps.submissions.models import (
    Submission,
    SubmissionMethod,
    SubmissionStatus,
    generate_submission_id,
)

logger = logging.getLogger(__name__)

LEGACY_ID_RE = re.compile(r'^[A-Za-z0-9_-]{1,32}$')
CENTS = Decimal('0.01')


@dataclass
class LegacyImportResult:
    ran: bool
    imported: int = 0
    skipped: int = 0
    reason: str = ''


def load_legacy_records(source) -> Optional[List[Any]]:
    """
    Read the ``submissions`` array from a legacy JSON document.

    Returns None when the file is missing, unreadable, or has no array.
    """
    path = Path(source)
    if not path.is_file():
        return None

    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except (OSError, ValueError) as e:
        logger.warning("Legacy data at %s could not be read: %s", path, e)
        return None

    records = data.get('submissions') if isinstance(data, dict) else None
    if not isinstance(records, list):
        return None
    return records


def _text(value, max_length):
    if value is None:
        return None
    value = str(value).strip()
    return value[:max_length] or None


def _legacy_id(value):
    if isinstance(value, str) and LEGACY_ID_RE.match(value):
        return value
    return generate_submission_id()


def _legacy_amount(value):
    if value is None or isinstance(value, bool) or value == '':
        return None
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not amount.is_finite() or amount <= 0:
        return None
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def _legacy_created_at(value):
    """Parse ISO-8601 text or epoch milliseconds; anything else becomes now."""
    parsed = None

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=dt_timezone.utc)
        except (OverflowError, OSError, ValueError):
            parsed = None
    elif isinstance(value, str) and value.strip():
        try:
            parsed = parse_datetime(value.strip())
            if parsed is None:
                day = parse_date(value.strip())
                if day is not None:
                    parsed = datetime.combine(day, dt_time.min)
        except ValueError:
            parsed = None

    if parsed is None:
        return timezone.now()
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)
    return parsed


def normalize_legacy_record(record: dict) -> dict:
    """Map a legacy document onto Submission fields, defaulting gaps."""
    method = record.get('method')
    if method not in SubmissionMethod.values:
        method = SubmissionMethod.CRYPTO

    status = record.get('status')
    if status not in SubmissionStatus.values:
        status = SubmissionStatus.PENDING

    return {
        'id': _legacy_id(record.get('id')),
        'name': _text(record.get('name'), 255),
        'email': _text(record.get('email'), 255),
        'method': method,
        'selected_network': _text(record.get('selectedNetwork'), 50),
        'amount': _legacy_amount(record.get('amount')),
        'txid': _text(record.get('txid'), 255),
        'id_file_url': _text(record.get('idFileUrl'), 512),
        'payment_proof_url': _text(record.get('paymentProofUrl'), 512),
        'status': status,
        'created_at': _legacy_created_at(record.get('createdAt')),
    }


def import_legacy_submissions(source, *, dry_run: bool = False) -> LegacyImportResult:
    """
    Import legacy submissions if, and only if, the table is empty.

    Args:
        source: Path to the legacy JSON document
        dry_run: Count importable records without inserting

    Returns:
        LegacyImportResult with imported/skipped counts. ``ran`` is False
        when the guard or a missing source prevented the import.
    """
    if not source:
        return LegacyImportResult(ran=False, reason='no legacy source configured')

    if Submission.objects.exists():
        logger.info("Submissions already present; legacy import skipped.")
        return LegacyImportResult(ran=False, reason='submissions table is not empty')

    records = load_legacy_records(source)
    if records is None:
        return LegacyImportResult(ran=False, reason='no legacy submissions found')

    result = LegacyImportResult(ran=True)

    for index, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning("Legacy record #%s is not an object; skipped", index)
            result.skipped += 1
            continue

        fields = normalize_legacy_record(record)
        if dry_run:
            result.imported += 1
            continue

        try:
            with transaction.atomic():
                Submission.objects.create(**fields)
        except IntegrityError:
            logger.warning("Duplicate legacy submission %s skipped", fields['id'])
            result.skipped += 1
            continue
        except DatabaseError:
            logger.exception("Legacy submission %s could not be imported", fields['id'])
            result.skipped += 1
            continue

        result.imported += 1

    logger.info(
        "Legacy import finished: %s imported, %s skipped",
        result.imported,
        result.skipped,
    )
    return result
