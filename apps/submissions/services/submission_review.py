"""
Submission review service (administrator side).

Listing and the single status transition pending -> confirmed.
"""

import logging
from typing import List, Optional

from django.conf import settings
from django.db import DatabaseError, transaction

from apps.submissions.models import Submission, SubmissionStatus

from .exceptions import (
    InvalidStatusTransitionError,
    SubmissionNotFoundError,
    SubmissionStorageError,
)

logger = logging.getLogger(__name__)


def list_submissions(*, limit: Optional[int] = None) -> List[Submission]:
    """
    Return submissions, newest first.

    Args:
        limit: Page size, capped at SUBMISSION_LIST_LIMIT

    Raises:
        SubmissionStorageError: If the query fails
    """
    max_limit = settings.SUBMISSION_LIST_LIMIT
    limit = min(limit, max_limit) if limit else max_limit

    try:
        return list(Submission.objects.order_by('-created_at', '-id')[:limit])
    except DatabaseError as e:
        logger.exception("list_submissions failed")
        raise SubmissionStorageError("Could not load submissions") from e


@transaction.atomic
def _confirm(submission_id: str) -> Submission:
    try:
        submission = (
            Submission.objects
            .select_for_update()
            .get(id=submission_id)
        )
    except Submission.DoesNotExist:
        raise SubmissionNotFoundError(f"Submission {submission_id} not found")

    if submission.is_confirmed:
        # Already confirmed: repeat requests succeed without writing
        return submission

    submission.mark_confirmed()
    logger.info("Submission %s confirmed", submission_id)
    return submission


def set_submission_status(*, submission_id: str, status: str) -> Submission:
    """
    Apply an administrator status change.

    Only "confirmed" is a valid target. Confirming an already confirmed
    submission is a no-op success.

    Args:
        submission_id: Submission id
        status: Requested status

    Returns:
        The submission after the change

    Raises:
        InvalidStatusTransitionError: If status is not "confirmed"
        SubmissionNotFoundError: If the id does not exist
        SubmissionStorageError: If the update fails
    """
    if status != SubmissionStatus.CONFIRMED:
        raise InvalidStatusTransitionError(
            f"Invalid status '{status}'. Only '{SubmissionStatus.CONFIRMED}' is accepted"
        )

    try:
        return _confirm(submission_id)
    except DatabaseError as e:
        logger.exception("set_submission_status failed for %s", submission_id)
        raise SubmissionStorageError("Could not update submission") from e
