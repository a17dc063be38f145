"""Unit tests for ResetMonthlyBills use case"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.finance.reset_monthly_bills import ResetMonthlyBills


@pytest.fixture
def mock_bill_repo():
    return MagicMock()


@pytest.mark.asyncio
class TestResetMonthlyBills:

    async def test_reactivates_all_bills(self, mock_uow, mock_bill_repo):
        mock_bill_repo.activate_all = AsyncMock(return_value=5)

        result = await ResetMonthlyBills(mock_uow, mock_bill_repo).execute()

        assert result.is_ok()
        assert result.value.bills_reactivated == 5
        mock_bill_repo.activate_all.assert_called_once_with()
        mock_uow.commit.assert_called_once()

    async def test_failure_rolls_back(self, mock_uow, mock_bill_repo):
        mock_bill_repo.activate_all = AsyncMock(side_effect=RuntimeError("db down"))

        result = await ResetMonthlyBills(mock_uow, mock_bill_repo).execute()

        assert result.is_err()
        assert result.error.code == "RESET_BILLS_FAILED"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
