"""Unit tests for ListLedger use case"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.finance.list_ledger import ListLedger
from src.domain.account import Account
from src.domain.ledger_entry import LedgerEntry


@pytest.mark.asyncio
class TestListLedger:

    async def test_names_resolved_and_pagination_echoed(self):
        ledger_repo = MagicMock()
        ledger_repo.list_recent = AsyncMock(return_value=([
            LedgerEntry(id=3, amount=Decimal("-50.00"), source_account_id=2, description="Water"),
            LedgerEntry(id=2, amount=Decimal("-35.00"), source_account_id=1, destination_account_id=2),
            LedgerEntry(id=1, amount=Decimal("3000.00"), destination_account_id=1),
        ], 10))
        account_repo = MagicMock()
        account_repo.get_all = AsyncMock(return_value=[
            Account(id=1, name="Main", current_cleared_balance=Decimal("0")),
            Account(id=2, name="HOA", current_cleared_balance=Decimal("0")),
        ])

        result = await ListLedger(ledger_repo, account_repo).execute(limit=3, offset=0)

        assert result.is_ok()
        page = result.value
        assert page.total == 10
        assert page.limit == 3
        assert [e.id for e in page.entries] == [3, 2, 1]
        assert page.entries[0].source_account_name == "HOA"
        assert page.entries[0].destination_account_name is None
        assert page.entries[1].destination_account_name == "HOA"
        assert page.entries[2].status == "CLEARED"
        assert page.entries[0].description == "Water"
        assert page.entries[0].amount == Decimal("-50.00")
        ledger_repo.list_recent.assert_called_once_with(limit=3, offset=0)
