"""
Domain-specific exceptions for submissions services.

These exceptions represent business rule violations and storage failures.
Views catch them and convert them to HTTP responses:

    SubmissionsServiceError (base)
    ├── InvalidSubmissionError        -> 400
    │   └── UnsupportedFileTypeError  -> 400
    ├── InvalidStatusTransitionError  -> 400
    ├── SubmissionNotFoundError       -> 404
    └── SubmissionStorageError        -> 500
"""


class SubmissionsServiceError(Exception):
    """Base exception for all submissions service errors."""
    pass


class InvalidSubmissionError(SubmissionsServiceError):
    """Raised when submission input is missing or malformed."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field


class UnsupportedFileTypeError(InvalidSubmissionError):
    """Raised when an upload is neither an image nor a PDF."""
    pass


class InvalidStatusTransitionError(SubmissionsServiceError):
    """Raised when a status other than pending -> confirmed is requested."""
    pass


class SubmissionNotFoundError(SubmissionsServiceError):
    """Raised when a submission id does not exist."""
    pass


class SubmissionStorageError(SubmissionsServiceError):
    """Raised when the database or file storage fails."""
    pass
