"""
Account details store.

A single logical record of payout instructions. Reads are public; writes
are reserved for the administrator and always land on the current row, so
callers never observe more than one record.
"""

import copy
import logging
from typing import Optional

from django.db import transaction

from apps.payouts.models import AccountDetails

from .decoding import decode_json_value

logger = logging.getLogger(__name__)


DEFAULT_BANK = {
    'bankName': 'Demo Bank',
    'accountName': 'Demo Account',
    'accountNumber': '0123456789',
    'swift': '',
    'notes': 'Local transfers only',
}

DEFAULT_CRYPTO = {
    'btc': '1BoatSLRHtKNngkdXEeobR76b53LETtpyT',
    'eth': '0x0000000000000000000000000000000000000000',
    'usdt': 'TETHER-DEMO-ADDRESS',
}


def _current_queryset():
    return AccountDetails.objects.order_by('-updated_at', '-id')


def get_current_account_details() -> Optional[AccountDetails]:
    """Return the current row, or None when the table is empty."""
    return _current_queryset().first()


def get_account_details() -> dict:
    """
    Return the current ``{bank, crypto}`` payload.

    Returns an empty dict if no row exists. Both values are canonicalized
    with decode_json_value.
    """
    record = get_current_account_details()
    if record is None:
        logger.warning("No account details row found")
        return {}

    return {
        'bank': decode_json_value(record.bank),
        'crypto': decode_json_value(record.crypto),
    }


@transaction.atomic
def set_account_details(*, bank: Optional[dict] = None, crypto: Optional[dict] = None) -> AccountDetails:
    """
    Replace the payout instructions.

    Updates the current row in place, or inserts one when none exists.
    ``bank`` and ``crypto`` each default to an empty dict when omitted.

    Args:
        bank: Bank wire details
        crypto: Currency code to address mapping

    Returns:
        The written AccountDetails row
    """
    bank = bank if bank is not None else {}
    crypto = crypto if crypto is not None else {}

    record = _current_queryset().select_for_update().first()
    if record is None:
        record = AccountDetails.objects.create(bank=bank, crypto=crypto)
        logger.info("Inserted account details row %s", record.pk)
        return record

    record.bank = bank
    record.crypto = crypto
    record.save(update_fields=['bank', 'crypto', 'updated_at'])
    logger.info("Updated account details row %s", record.pk)
    return record


def ensure_default_account_details() -> bool:
    """
    Insert the demo payout instructions when the table is empty.

    Returns:
        True if a row was inserted, False if one already existed
    """
    if AccountDetails.objects.count() > 0:
        return False

    AccountDetails.objects.create(
        bank=copy.deepcopy(DEFAULT_BANK),
        crypto=copy.deepcopy(DEFAULT_CRYPTO),
    )
    logger.info("Inserted default account_details row")
    return True
