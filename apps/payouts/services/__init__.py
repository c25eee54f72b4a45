"""Services for the payout instructions (account details) store."""

from .decoding import decode_json_value
from .account_details import (
    DEFAULT_BANK,
    DEFAULT_CRYPTO,
    get_account_details,
    get_current_account_details,
    set_account_details,
    ensure_default_account_details,
)

__all__ = [
    'decode_json_value',
    'DEFAULT_BANK',
    'DEFAULT_CRYPTO',
    'get_account_details',
    'get_current_account_details',
    'set_account_details',
    'ensure_default_account_details',
]
