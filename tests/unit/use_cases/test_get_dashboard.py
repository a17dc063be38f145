"""Unit tests for GetDashboard use case"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.finance.get_dashboard import GetDashboard
from src.domain.account import Account
from src.domain.bill import Bill


@pytest.fixture
def mock_account_repo():
    repo = MagicMock()
    repo.get_all = AsyncMock(return_value=[
        Account(id=1, name="Main", current_cleared_balance=Decimal("1815.00")),
        Account(id=3, name="Utilities", current_cleared_balance=Decimal("2150.00")),
    ])
    return repo


@pytest.fixture
def mock_bill_repo():
    repo = MagicMock()
    repo.get_active = AsyncMock(return_value=[
        Bill(id=1, name="Phone", expected_amount=Decimal("85.50"), paying_account_id=1, is_active=True),
        Bill(id=2, name="Water", expected_amount=Decimal("50.00"), paying_account_id=3, is_active=True),
    ])
    return repo


@pytest.mark.asyncio
class TestGetDashboard:

    async def test_safe_to_spend(self, mock_account_repo, mock_bill_repo):
        result = await GetDashboard(mock_account_repo, mock_bill_repo, primary_account_id=1).execute()

        assert result.is_ok()
        dashboard = result.value
        assert dashboard.primary_balance == Decimal("1815.00")
        assert dashboard.active_bills_total == Decimal("135.50")
        assert dashboard.safe_to_spend == Decimal("1679.50")
        assert [a.id for a in dashboard.accounts] == [1, 3]
        assert [b.paying_account_name for b in dashboard.active_bills] == ["Main", "Utilities"]

    async def test_missing_primary_account(self, mock_account_repo, mock_bill_repo):
        result = await GetDashboard(mock_account_repo, mock_bill_repo, primary_account_id=9).execute()

        assert result.is_ok()
        assert result.value.primary_balance is None
        assert result.value.safe_to_spend is None

    async def test_no_active_bills(self, mock_account_repo, mock_bill_repo):
        mock_bill_repo.get_active = AsyncMock(return_value=[])

        result = await GetDashboard(mock_account_repo, mock_bill_repo, primary_account_id=1).execute()

        assert result.value.active_bills_total == Decimal("0")
        assert result.value.safe_to_spend == Decimal("1815.00")
