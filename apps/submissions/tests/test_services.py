"""
Tests for submissions services.

These test business logic directly, without HTTP layer.
"""

import json
from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command
from django.db import DatabaseError
from django.utils import timezone

from apps.submissions.models import Submission, SubmissionStatus
from apps.submissions.serializers import canonical_timestamp
from apps.submissions.services import (
    create_submission,
    list_submissions,
    set_submission_status,
    import_legacy_submissions,
    normalize_legacy_record,
    InvalidSubmissionError,
    UnsupportedFileTypeError,
    InvalidStatusTransitionError,
    SubmissionNotFoundError,
    SubmissionStorageError,
)
from apps.submissions.services import submission_intake
from apps.submissions.storage import build_stored_name, is_allowed_upload

from .conftest import PDF_BYTES, make_upload


# =============================================================================
# Upload checks
# =============================================================================

class TestUploads:

    @pytest.mark.parametrize('name, content_type', [
        ('id.png', 'image/png'),
        ('id.jpg', 'image/jpeg'),
        ('scan.pdf', 'application/pdf'),
        ('no-extension', 'image/webp'),
    ])
    def test_allowed(self, name, content_type):
        assert is_allowed_upload(make_upload(name, content_type))

    @pytest.mark.parametrize('name, content_type', [
        ('notes.txt', 'text/plain'),
        ('notes.txt', 'image/png'),
        ('archive.zip', 'application/zip'),
        ('id.png', ''),
    ])
    def test_rejected(self, name, content_type):
        assert not is_allowed_upload(make_upload(name, content_type))

    def test_stored_name_keeps_original(self):
        name = build_stored_name('my scan.pdf')

        timestamp, _, rest = name.partition('-')
        assert timestamp.isdigit()
        assert rest == 'my_scan.pdf'

    def test_stored_name_strips_directories(self):
        assert build_stored_name('../../etc/passwd').endswith('-passwd')


# =============================================================================
# Intake
# =============================================================================

@pytest.mark.django_db
class TestCreateSubmission:

    def _create(self, **overrides):
        fields = {
            'name': 'Jane Doe',
            'email': 'jane@example.com',
            'method': 'wire',
            'amount': Decimal('10.50'),
            'id_file': make_upload(),
        }
        fields.update(overrides)
        return create_submission(**fields)

    def test_creates_pending(self):
        submission = self._create()

        assert submission.status == SubmissionStatus.PENDING
        assert len(submission.id) == 12
        assert submission.created_at is not None

    def test_missing_identity_file(self, media_root):
        with pytest.raises(InvalidSubmissionError) as exc_info:
            self._create(id_file=None)

        assert exc_info.value.field == 'idFile'
        assert Submission.objects.count() == 0

    def test_bad_proof_writes_nothing(self, media_root):
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            self._create(payment_proof=make_upload('x.exe', 'application/octet-stream'))

        assert exc_info.value.field == 'paymentProof'
        assert list(media_root.iterdir()) == []

    def test_failed_insert_removes_files(self, media_root, monkeypatch):
        """Files of a submission that was never recorded are discarded."""
        def broken_insert(**fields):
            raise DatabaseError('disk I/O error')

        monkeypatch.setattr(submission_intake, '_insert_submission', broken_insert)

        with pytest.raises(SubmissionStorageError):
            self._create(payment_proof=make_upload('proof.pdf', 'application/pdf', PDF_BYTES))

        assert list(media_root.iterdir()) == []
        assert Submission.objects.count() == 0


# =============================================================================
# Review
# =============================================================================

@pytest.mark.django_db
class TestReview:

    def test_list_newest_first(self, pending_submission, confirmed_submission):
        Submission.objects.filter(pk=confirmed_submission.pk).update(
            created_at=timezone.now() - timedelta(hours=1)
        )

        result = list_submissions()

        assert [s.id for s in result] == [pending_submission.id, confirmed_submission.id]

    def test_list_limit_cannot_exceed_cap(self, settings):
        settings.SUBMISSION_LIST_LIMIT = 1
        Submission.objects.create(name='a')
        Submission.objects.create(name='b')

        assert len(list_submissions(limit=50)) == 1

    def test_confirm(self, pending_submission):
        result = set_submission_status(submission_id=pending_submission.id, status='confirmed')

        assert result.status == SubmissionStatus.CONFIRMED

    def test_confirm_already_confirmed(self, confirmed_submission):
        result = set_submission_status(submission_id=confirmed_submission.id, status='confirmed')

        assert result.status == SubmissionStatus.CONFIRMED

    def test_invalid_target(self, pending_submission):
        with pytest.raises(InvalidStatusTransitionError):
            set_submission_status(submission_id=pending_submission.id, status='rejected')

    def test_unknown_id(self, db):
        with pytest.raises(SubmissionNotFoundError):
            set_submission_status(submission_id='nope', status='confirmed')


# =============================================================================
# Timestamps
# =============================================================================

class TestCanonicalTimestamp:

    def test_aware_datetime(self):
        value = datetime(2024, 5, 1, 10, 0, 0, 123456, tzinfo=dt_timezone.utc)

        assert canonical_timestamp(value) == '2024-05-01T10:00:00.123Z'

    def test_naive_datetime_is_utc(self):
        assert canonical_timestamp(datetime(2024, 5, 1, 10, 0)) == '2024-05-01T10:00:00.000Z'

    def test_other_offset_converted(self):
        value = datetime(2024, 5, 1, 12, 0, tzinfo=dt_timezone(timedelta(hours=2)))

        assert canonical_timestamp(value) == '2024-05-01T10:00:00.000Z'

    def test_iso_text(self):
        assert canonical_timestamp('2024-05-01T10:00:00Z') == '2024-05-01T10:00:00.000Z'

    def test_unparseable_text(self):
        assert canonical_timestamp('yesterday') == 'yesterday'


# =============================================================================
# Legacy import
# =============================================================================

def write_legacy(path, records):
    path.write_text(json.dumps({'submissions': records}), encoding='utf-8')
    return path


LEGACY_RECORD = {
    'id': 'V1StGXR8_Z5j',
    'name': 'Old Claimant',
    'email': 'old@example.com',
    'method': 'wire',
    'selectedNetwork': None,
    'amount': '99.999',
    'txid': None,
    'idFileUrl': '/mock-storage/1714557600000-id.png',
    'paymentProofUrl': None,
    'status': 'confirmed',
    'createdAt': '2024-05-01T10:00:00.000Z',
}


class TestNormalizeLegacyRecord:

    def test_full_record(self):
        fields = normalize_legacy_record(LEGACY_RECORD)

        assert fields['id'] == 'V1StGXR8_Z5j'
        assert fields['method'] == 'wire'
        assert fields['amount'] == Decimal('100.00')
        assert fields['status'] == 'confirmed'
        assert fields['created_at'] == datetime(2024, 5, 1, 10, 0, tzinfo=dt_timezone.utc)

    def test_defaults(self):
        fields = normalize_legacy_record({'name': 'Sparse'})

        assert fields['method'] == 'crypto'
        assert fields['status'] == 'pending'
        assert fields['amount'] is None
        assert len(fields['id']) == 12

    def test_epoch_millis(self):
        fields = normalize_legacy_record({'createdAt': 1714557600000})

        assert fields['created_at'] == datetime(2024, 5, 1, 10, 0, tzinfo=dt_timezone.utc)

    def test_unparseable_timestamp_becomes_now(self):
        before = timezone.now()

        fields = normalize_legacy_record({'createdAt': 'last tuesday'})

        assert fields['created_at'] >= before

    @pytest.mark.parametrize('amount', [0, '-1', 'abc', True])
    def test_invalid_amount_dropped(self, amount):
        assert normalize_legacy_record({'amount': amount})['amount'] is None

    def test_unusable_id_replaced(self):
        fields = normalize_legacy_record({'id': 'has spaces and / slashes'})

        assert fields['id'] != 'has spaces and / slashes'
        assert len(fields['id']) == 12


@pytest.mark.django_db
class TestImportLegacySubmissions:

    def test_imports_into_empty_table(self, tmp_path):
        source = write_legacy(tmp_path / 'db.json', [LEGACY_RECORD, {'name': 'Second'}])

        result = import_legacy_submissions(source)

        assert result.ran is True
        assert result.imported == 2
        imported = Submission.objects.get(id='V1StGXR8_Z5j')
        assert imported.status == SubmissionStatus.CONFIRMED
        assert imported.id_file_url == '/mock-storage/1714557600000-id.png'

    def test_skipped_when_table_not_empty(self, tmp_path, pending_submission):
        source = write_legacy(tmp_path / 'db.json', [LEGACY_RECORD])

        result = import_legacy_submissions(source)

        assert result.ran is False
        assert Submission.objects.count() == 1

    def test_second_run_is_noop(self, tmp_path):
        source = write_legacy(tmp_path / 'db.json', [LEGACY_RECORD])

        import_legacy_submissions(source)
        result = import_legacy_submissions(source)

        assert result.ran is False
        assert Submission.objects.count() == 1

    def test_missing_file(self, tmp_path):
        result = import_legacy_submissions(tmp_path / 'missing.json')

        assert result.ran is False
        assert Submission.objects.count() == 0

    def test_invalid_json(self, tmp_path):
        source = tmp_path / 'db.json'
        source.write_text('{not json', encoding='utf-8')

        assert import_legacy_submissions(source).ran is False

    def test_no_submissions_array(self, tmp_path):
        source = tmp_path / 'db.json'
        source.write_text(json.dumps({'accountDetails': {}}), encoding='utf-8')

        assert import_legacy_submissions(source).ran is False

    def test_duplicate_and_malformed_records_skipped(self, tmp_path):
        """One bad record does not stop the rest."""
        source = write_legacy(
            tmp_path / 'db.json',
            [LEGACY_RECORD, dict(LEGACY_RECORD), 'not an object', {'name': 'Fine'}],
        )

        result = import_legacy_submissions(source)

        assert result.imported == 2
        assert result.skipped == 2
        assert Submission.objects.count() == 2

    def test_dry_run_writes_nothing(self, tmp_path):
        source = write_legacy(tmp_path / 'db.json', [LEGACY_RECORD])

        result = import_legacy_submissions(source, dry_run=True)

        assert result.imported == 1
        assert Submission.objects.count() == 0

    def test_management_command(self, tmp_path):
        source = write_legacy(tmp_path / 'db.json', [LEGACY_RECORD])
        out = StringIO()

        call_command('import_legacy_submissions', str(source), stdout=out)

        assert 'Imported 1 submission(s)' in out.getvalue()
        assert Submission.objects.filter(id='V1StGXR8_Z5j').exists()
