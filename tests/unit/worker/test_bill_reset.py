"""Unit tests for BillResetWorker"""

import pytest
from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

from libs.result import Return, Error
from src.app.use_cases.finance.dtos import ResetBillsResponseDTO
from src.worker.bill_reset import BillResetWorker


@pytest.fixture
def worker():
    return BillResetWorker(db_uri="sqlite+aiosqlite:///:memory:", reset_day=1)


class TestIsResetDay:

    def test_matches_configured_day(self, worker):
        assert worker.is_reset_day(date(2024, 3, 1)) is True
        assert worker.is_reset_day(date(2024, 3, 2)) is False

    def test_runs_once_per_month(self, worker):
        worker.last_reset_month = (2024, 3)

        assert worker.is_reset_day(date(2024, 3, 1)) is False
        assert worker.is_reset_day(date(2024, 4, 1)) is True

    def test_day_past_month_end_falls_on_last_day(self):
        worker = BillResetWorker(db_uri="sqlite+aiosqlite:///:memory:", reset_day=31)

        assert worker.is_reset_day(date(2024, 2, 29)) is True
        assert worker.is_reset_day(date(2024, 2, 28)) is False
        assert worker.is_reset_day(date(2024, 1, 31)) is True


@pytest.mark.asyncio
class TestRunOnce:

    async def test_run_once_records_month(self, worker):
        use_case = MagicMock()
        use_case.execute = AsyncMock(
            return_value=Return.ok(
                ResetBillsResponseDTO(bills_reactivated=4, reset_at=datetime.now(timezone.utc))
            )
        )

        with patch("src.worker.bill_reset.ResetMonthlyBills", return_value=use_case):
            result = await worker.run_once()

        assert result.bills_reactivated == 4
        today = date.today()
        assert worker.last_reset_month == (today.year, today.month)
        await worker.shutdown()

    async def test_run_once_raises_on_failure(self, worker):
        use_case = MagicMock()
        use_case.execute = AsyncMock(
            return_value=Return.err(Error(code="RESET_BILLS_FAILED", message="Failed to reset monthly bills"))
        )

        with patch("src.worker.bill_reset.ResetMonthlyBills", return_value=use_case):
            with pytest.raises(RuntimeError):
                await worker.run_once()

        assert worker.last_reset_month is None
        await worker.shutdown()
