"""
Submission intake service.

Persists a validated payment claim together with its uploaded files.
Input shape is validated by SubmissionCreateSerializer before this runs;
file types are re-checked here so nothing is written for a bad upload,
even when the service is called without the serializer (commands, tests).
"""

import logging
from decimal import Decimal
from typing import Optional

from django.db import DatabaseError, IntegrityError, transaction

from apps.submissions.models import Submission, SubmissionStatus, generate_submission_id
from apps.submissions.storage import discard_upload, is_allowed_upload, save_upload

from .exceptions import (
    InvalidSubmissionError,
    UnsupportedFileTypeError,
    SubmissionStorageError,
)

logger = logging.getLogger(__name__)

# Extra attempts if a generated id collides with an existing row
ID_ATTEMPTS = 3


def _insert_submission(**fields) -> Submission:
    for attempt in range(1, ID_ATTEMPTS + 1):
        submission_id = generate_submission_id()
        try:
            with transaction.atomic():
                return Submission.objects.create(id=submission_id, **fields)
        except IntegrityError:
            if Submission.objects.filter(id=submission_id).exists() and attempt < ID_ATTEMPTS:
                logger.warning("Submission id collision on %s, retrying", submission_id)
                continue
            raise


def create_submission(
    *,
    name: str,
    email: str,
    method: str,
    amount: Decimal,
    id_file,
    selected_network: Optional[str] = None,
    txid: Optional[str] = None,
    payment_proof=None,
) -> Submission:
    """
    Store a payment claim and its files.

    Steps:
        1. Check both uploads are images or PDFs (before any write)
        2. Save the files and record their public paths
        3. Insert the row with status "pending" and a fresh opaque id

    If the insert fails, files saved in step 2 are removed again.

    Args:
        name: Claimant name
        email: Claimant email
        method: "wire" or "crypto"
        amount: Positive amount
        id_file: Identity document upload (required)
        selected_network: Crypto network chosen by the user
        txid: Transaction id as typed by the user (not verified)
        payment_proof: Optional payment proof upload

    Returns:
        The created Submission

    Raises:
        InvalidSubmissionError: If the identity file is missing
        UnsupportedFileTypeError: If an upload is not an image or PDF
        SubmissionStorageError: If files or the row cannot be written
    """
    if id_file is None:
        raise InvalidSubmissionError("Identity file is required", field='idFile')

    for field, upload in (('idFile', id_file), ('paymentProof', payment_proof)):
        if upload is not None and not is_allowed_upload(upload):
            raise UnsupportedFileTypeError("Only images and PDFs allowed", field=field)

    stored = []
    try:
        id_upload = save_upload(id_file)
        stored.append(id_upload)
        proof_upload = None
        if payment_proof is not None:
            proof_upload = save_upload(payment_proof)
            stored.append(proof_upload)
    except OSError as e:
        for upload in stored:
            discard_upload(upload)
        logger.exception("create_submission: storing uploads for %s failed", email)
        raise SubmissionStorageError("Could not store uploaded files") from e

    try:
        submission = _insert_submission(
            name=name,
            email=email,
            method=method,
            selected_network=selected_network or None,
            amount=amount,
            txid=txid or None,
            id_file_url=id_upload.url,
            payment_proof_url=proof_upload.url if proof_upload else None,
            status=SubmissionStatus.PENDING,
        )
    except DatabaseError as e:
        for upload in stored:
            discard_upload(upload)
        logger.exception("create_submission: insert for %s failed", email)
        raise SubmissionStorageError("Could not save submission") from e

    logger.info("New submission saved %s", submission.id)
    return submission
