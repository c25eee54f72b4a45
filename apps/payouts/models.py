from django.db import models


class AccountDetails(models.Model):
    """
    Payout instructions shown to users (bank wire and crypto addresses).

    Singleton record: only the most recently updated row is current. Writes
    go through apps.payouts.services, which update the current row in place.

    bank:   {bankName, accountName, accountNumber, swift?, notes?}
    crypto: {currency code: address}, e.g. {"btc": "...", "usdt": "..."}
    """

    bank = models.JSONField(null=True, blank=True)
    crypto = models.JSONField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'account_details'
        verbose_name_plural = 'account details'
        get_latest_by = ['updated_at', 'id']

    def __str__(self):
        return f"Account details #{self.pk} (updated {self.updated_at:%Y-%m-%d %H:%M})"
