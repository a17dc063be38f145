"""Unit tests for LedgerEntry balance effects"""

from datetime import date
from decimal import Decimal
from src.domain.account import Account
from src.domain.ledger_entry import LedgerEntry, LedgerStatus


class TestLedgerEntryDefaults:

    def test_defaults(self):
        entry = LedgerEntry(amount=Decimal("10.00"), destination_account_id=1)

        assert entry.status == LedgerStatus.CLEARED
        assert entry.transaction_date == date.today()
        assert entry.source_account_id is None

    def test_timestamps_are_timezone_aware(self):
        entry = LedgerEntry(amount=Decimal("10.00"), destination_account_id=1)
        account = Account(name="Main")

        assert entry.created_at.tzinfo is not None
        assert account.created_at.tzinfo is not None
        assert account.updated_at.tzinfo is not None
        assert LedgerEntry.__table__.c.created_at.type.timezone is True
        assert Account.__table__.c.updated_at.type.timezone is True


class TestLedgerEntryEffect:
    """Source is debited |amount|, destination is credited |amount|"""

    def test_deposit_credits_destination(self):
        entry = LedgerEntry(amount=Decimal("3000.00"), destination_account_id=1)

        assert entry.effect_on(1) == Decimal("3000.00")
        assert entry.effect_on(2) == Decimal("0")

    def test_transfer_moves_money_between_accounts(self):
        entry = LedgerEntry(
            amount=Decimal("-35.00"), source_account_id=1, destination_account_id=2
        )

        assert entry.effect_on(1) == Decimal("-35.00")
        assert entry.effect_on(2) == Decimal("35.00")

    def test_expense_debits_source(self):
        entry = LedgerEntry(amount=Decimal("-50.00"), source_account_id=3)

        assert entry.effect_on(3) == Decimal("-50.00")
