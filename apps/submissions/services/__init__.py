"""
Submissions app services layer.

Intake (public), review (administrator) and the one-time legacy import.
Services raise domain exceptions; views translate them to HTTP responses.
"""

from .exceptions import (
    SubmissionsServiceError,
    InvalidSubmissionError,
    UnsupportedFileTypeError,
    InvalidStatusTransitionError,
    SubmissionNotFoundError,
    SubmissionStorageError,
)

from .submission_intake import create_submission

from .submission_review import (
    list_submissions,
    set_submission_status,
)

from .legacy_import import (
    LegacyImportResult,
    import_legacy_submissions,
    load_legacy_records,
    normalize_legacy_record,
)


__all__ = [
    # Exceptions
    'SubmissionsServiceError',
    'InvalidSubmissionError',
    'UnsupportedFileTypeError',
    'InvalidStatusTransitionError',
    'SubmissionNotFoundError',
    'SubmissionStorageError',

    # Intake
    'create_submission',

    # Review
    'list_submissions',
    'set_submission_status',

    # Legacy import
    'LegacyImportResult',
    'import_legacy_submissions',
    'load_legacy_records',
    'normalize_legacy_record',
]
