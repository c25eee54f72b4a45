import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient
from apps.accounts.models import Administrator
from apps.submissions.models import Submission, SubmissionStatus


PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 16
PDF_BYTES = b'%PDF-1.4\n%\xe2\xe3\xcf\xd3\n'


def make_upload(name='id.png', content_type='image/png', content=PNG_BYTES):
    return SimpleUploadedFile(name, content, content_type=content_type)


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep uploaded files out of the project tree."""
    settings.MEDIA_ROOT = str(tmp_path)
    return tmp_path


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin(db):
    return Administrator.objects.create_user(
        email='admin@example.com',
        password='password123',
    )


@pytest.fixture
def admin_client(api_client, admin):
    """Return an API client holding an administrator session."""
    api_client.force_login(admin)
    return api_client


@pytest.fixture
def submission_payload():
    """Valid multipart body for POST /submissions."""
    return {
        'name': 'Jane Doe',
        'email': 'jane@example.com',
        'method': 'crypto',
        'selectedNetwork': 'USDT',
        'amount': '150.00',
        'txid': '0xdeadbeef',
        'idFile': make_upload(),
    }


@pytest.fixture
def pending_submission(db):
    return Submission.objects.create(
        name='Pending Claimant',
        email='pending@example.com',
        method='wire',
        amount='50.00',
        id_file_url='/mock-storage/1-id.png',
    )


@pytest.fixture
def confirmed_submission(db):
    return Submission.objects.create(
        name='Confirmed Claimant',
        email='confirmed@example.com',
        method='crypto',
        amount='75.00',
        id_file_url='/mock-storage/2-id.png',
        status=SubmissionStatus.CONFIRMED,
    )
