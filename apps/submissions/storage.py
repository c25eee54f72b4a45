"""
Storage for identity documents and payment proofs.

Files are written once under MEDIA_ROOT as ``<epoch-ms>-<original name>``
and never modified. The public path (MEDIA_URL + stored name) is what the
submission row records.
"""

import logging
import mimetypes
import time
from dataclasses import dataclass
from pathlib import PurePath

from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import default_storage
from django.utils.text import get_valid_filename

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {'application/pdf'}
ALLOWED_CONTENT_TYPE_PREFIX = 'image/'
MAX_STORED_NAME_LENGTH = 255


@dataclass(frozen=True)
class StoredUpload:
    name: str
    url: str


def _is_allowed_type(content_type):
    content_type = (content_type or '').split(';')[0].strip().lower()
    return (
        content_type.startswith(ALLOWED_CONTENT_TYPE_PREFIX)
        or content_type in ALLOWED_CONTENT_TYPES
    )


def is_allowed_upload(upload) -> bool:
    """
    Accept images and PDFs only.

    The declared content type must be an image or PDF. When the file name
    has a recognisable extension, it must agree.
    """
    if not _is_allowed_type(getattr(upload, 'content_type', None)):
        return False

    guessed, _ = mimetypes.guess_type(upload.name or '')
    if guessed is not None and not _is_allowed_type(guessed):
        return False

    return True


def build_stored_name(original_name: str) -> str:
    """Collision-resistant name: millisecond timestamp plus the original name."""
    base = PurePath(original_name or '').name
    try:
        safe = get_valid_filename(base)
    except SuspiciousFileOperation:
        safe = 'upload'
    return f"{int(time.time() * 1000)}-{safe}"


def save_upload(upload) -> StoredUpload:
    """
    Write an uploaded file to the default storage.

    Raises:
        OSError: If the file cannot be written
    """
    name = default_storage.save(
        build_stored_name(upload.name),
        upload,
        max_length=MAX_STORED_NAME_LENGTH,
    )
    return StoredUpload(name=name, url=default_storage.url(name))


def discard_upload(stored: StoredUpload) -> None:
    """Remove a file whose submission was never recorded."""
    try:
        default_storage.delete(stored.name)
    except OSError:
        logger.exception("Could not remove orphaned upload %s", stored.name)
