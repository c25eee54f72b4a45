"""
Tests for payouts services.

These test business logic directly, without HTTP layer.
"""

import json
from datetime import timedelta

import pytest
from django.utils import timezone

from apps.payouts.models import AccountDetails
from apps.payouts.services import (
    decode_json_value,
    ensure_default_account_details,
    get_account_details,
    get_current_account_details,
    set_account_details,
    DEFAULT_BANK,
    DEFAULT_CRYPTO,
)


# =============================================================================
# decode_json_value
# =============================================================================

class TestDecodeJsonValue:

    @pytest.mark.parametrize('value', [
        None,
        {'btc': 'addr'},
        [1, 2],
        42,
        1.5,
        True,
    ])
    def test_structured_values_unchanged(self, value):
        assert decode_json_value(value) == value

    def test_json_text(self):
        assert decode_json_value('{"bankName": "X"}') == {'bankName': 'X'}

    def test_bytes(self):
        assert decode_json_value(b'{"btc": "addr"}') == {'btc': 'addr'}

    def test_bytearray_and_memoryview(self):
        payload = b'{"eth": "0x1"}'

        assert decode_json_value(bytearray(payload)) == {'eth': '0x1'}
        assert decode_json_value(memoryview(payload)) == {'eth': '0x1'}

    def test_double_encoded(self):
        value = json.dumps(json.dumps({'bankName': 'X'}))

        assert decode_json_value(value) == {'bankName': 'X'}

    def test_unparseable_text_returned_unchanged(self):
        assert decode_json_value('not json') == 'not json'

    def test_unparseable_bytes_returned_as_text(self):
        assert decode_json_value(b'not json') == 'not json'

    def test_non_utf8_bytes_returned_raw(self):
        raw = b'\xff\xfe\x00'

        assert decode_json_value(raw) == raw


# =============================================================================
# Account details store
# =============================================================================

@pytest.mark.django_db
class TestAccountDetailsStore:

    def test_get_empty(self):
        assert get_account_details() == {}

    def test_set_inserts_when_empty(self):
        record = set_account_details(bank={'bankName': 'X'})

        assert AccountDetails.objects.count() == 1
        assert record.bank == {'bankName': 'X'}
        assert record.crypto == {}

    def test_set_updates_current_row(self, seeded_details):
        set_account_details(bank={}, crypto={'btc': 'new'})

        seeded_details.refresh_from_db()
        assert seeded_details.crypto == {'btc': 'new'}
        assert AccountDetails.objects.count() == 1

    def test_current_row_is_most_recent(self):
        """Legacy databases may hold several rows; the newest one wins."""
        old = AccountDetails.objects.create(bank={'bankName': 'Old'}, crypto={})
        new = AccountDetails.objects.create(bank={'bankName': 'New'}, crypto={})
        AccountDetails.objects.filter(pk=old.pk).update(
            updated_at=timezone.now() - timedelta(days=1)
        )

        assert get_current_account_details().pk == new.pk
        assert get_account_details()['bank'] == {'bankName': 'New'}

        set_account_details(bank={'bankName': 'Edited'})
        old.refresh_from_db()
        assert old.bank == {'bankName': 'Old'}

    def test_ensure_default_inserts_once(self):
        assert ensure_default_account_details() is True
        assert ensure_default_account_details() is False

        assert AccountDetails.objects.count() == 1
        assert get_account_details() == {'bank': DEFAULT_BANK, 'crypto': DEFAULT_CRYPTO}
