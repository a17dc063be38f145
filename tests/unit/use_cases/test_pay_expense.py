"""Unit tests for PayExpense use case

Tests cover:
- Scenario: 200.00 balance, 50.00 bill payment -> 150.00, bill inactive
- Expenses without a bill
- Unknown bill or account leaves everything untouched
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from datetime import datetime, timezone

from src.app.use_cases.finance.pay_expense import PayExpense
from src.app.use_cases.finance.dtos import PayExpenseCommandDTO
from src.domain.account import Account
from src.domain.bill import Bill


@pytest.fixture
def mock_account_repo():
    return MagicMock()


@pytest.fixture
def mock_bill_repo():
    return MagicMock()


@pytest.fixture
def mock_ledger_repo():
    repo = MagicMock()

    async def assign_id(entry):
        entry.id = 11
        return entry

    repo.create = AsyncMock(side_effect=assign_id)
    return repo


@pytest.fixture
def pay_use_case(mock_uow, mock_account_repo, mock_ledger_repo, mock_bill_repo):
    return PayExpense(
        uow=mock_uow,
        account_repo=mock_account_repo,
        ledger_repo=mock_ledger_repo,
        bill_repo=mock_bill_repo,
    )


@pytest.fixture
def sample_account():
    return Account(
        id=3,
        name="Utilities",
        current_cleared_balance=Decimal("200.00"),
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def sample_bill():
    return Bill(
        id=2,
        name="Water",
        expected_amount=Decimal("50.00"),
        paying_account_id=3,
        due_day_of_month=15,
        is_active=True,
    )


@pytest.mark.asyncio
class TestPayExpenseSuccess:

    async def test_pay_bill(
        self, pay_use_case, mock_account_repo, mock_ledger_repo, mock_bill_repo, mock_uow,
        sample_account, sample_bill
    ):
        """
        Given: Account balance 200.00 and an active 50.00 bill
        When: The bill is paid
        Then: Balance 150.00, bill inactive, one -50.00 ledger row from the account
        """
        # Arrange
        mock_account_repo.get_by_id = AsyncMock(return_value=sample_account)
        mock_account_repo.update_balance = AsyncMock()
        mock_bill_repo.get_by_id = AsyncMock(return_value=sample_bill)
        mock_bill_repo.set_active = AsyncMock(return_value=sample_bill)

        # Act
        result = await pay_use_case.execute(
            PayExpenseCommandDTO(account_id=3, amount=Decimal("50.00"), bill_id=2)
        )

        # Assert
        assert result.is_ok()
        assert result.value.balance_after == Decimal("150.00")
        assert result.value.bill_id == 2

        mock_account_repo.update_balance.assert_called_once_with(3, Decimal("150.00"))
        mock_bill_repo.set_active.assert_called_once_with(2, False)

        entry = mock_ledger_repo.create.call_args.args[0]
        assert entry.amount == Decimal("-50.00")
        assert entry.source_account_id == 3
        assert entry.destination_account_id is None
        assert entry.description == "Water"
        mock_uow.commit.assert_called_once()

    async def test_pay_expense_without_bill(
        self, pay_use_case, mock_account_repo, mock_ledger_repo, mock_bill_repo, sample_account
    ):
        mock_account_repo.get_by_id = AsyncMock(return_value=sample_account)
        mock_account_repo.update_balance = AsyncMock()
        mock_bill_repo.get_by_id = AsyncMock()
        mock_bill_repo.set_active = AsyncMock()

        result = await pay_use_case.execute(
            PayExpenseCommandDTO(account_id=3, amount=Decimal("12.50"), expense_name="Coffee")
        )

        assert result.is_ok()
        assert result.value.bill_id is None
        mock_bill_repo.get_by_id.assert_not_called()
        mock_bill_repo.set_active.assert_not_called()
        assert mock_ledger_repo.create.call_args.args[0].description == "Coffee"

    async def test_overdraft_is_allowed(
        self, pay_use_case, mock_account_repo, sample_account
    ):
        mock_account_repo.get_by_id = AsyncMock(return_value=sample_account)
        mock_account_repo.update_balance = AsyncMock()

        result = await pay_use_case.execute(
            PayExpenseCommandDTO(account_id=3, amount=Decimal("250.00"))
        )

        assert result.is_ok()
        assert result.value.balance_after == Decimal("-50.00")


@pytest.mark.asyncio
class TestPayExpenseFailures:

    async def test_unknown_bill_changes_nothing(
        self, pay_use_case, mock_account_repo, mock_ledger_repo, mock_bill_repo, mock_uow,
        sample_account
    ):
        mock_account_repo.get_by_id = AsyncMock(return_value=sample_account)
        mock_account_repo.update_balance = AsyncMock()
        mock_bill_repo.get_by_id = AsyncMock(return_value=None)
        mock_bill_repo.set_active = AsyncMock()

        result = await pay_use_case.execute(
            PayExpenseCommandDTO(account_id=3, amount=Decimal("50.00"), bill_id=42)
        )

        assert result.is_err()
        assert result.error.code == "BILL_NOT_FOUND"
        mock_account_repo.update_balance.assert_not_called()
        mock_ledger_repo.create.assert_not_called()
        mock_bill_repo.set_active.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_bill_from_other_account_changes_nothing(
        self, pay_use_case, mock_account_repo, mock_ledger_repo, mock_bill_repo, mock_uow,
        sample_account
    ):
        """
        Given: Bill 2 is paid from account 5
        When: It is paid from account 3
        Then: BILL_ACCOUNT_MISMATCH and the bill stays active
        """
        other_bill = Bill(
            id=2,
            name="Mortgage",
            expected_amount=Decimal("50.00"),
            paying_account_id=5,
            is_active=True,
        )
        mock_account_repo.get_by_id = AsyncMock(return_value=sample_account)
        mock_account_repo.update_balance = AsyncMock()
        mock_bill_repo.get_by_id = AsyncMock(return_value=other_bill)
        mock_bill_repo.set_active = AsyncMock()

        result = await pay_use_case.execute(
            PayExpenseCommandDTO(account_id=3, amount=Decimal("50.00"), bill_id=2)
        )

        assert result.is_err()
        assert result.error.code == "BILL_ACCOUNT_MISMATCH"
        mock_account_repo.update_balance.assert_not_called()
        mock_ledger_repo.create.assert_not_called()
        mock_bill_repo.set_active.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_unknown_account(
        self, pay_use_case, mock_account_repo, mock_ledger_repo, mock_uow
    ):
        mock_account_repo.get_by_id = AsyncMock(return_value=None)

        result = await pay_use_case.execute(
            PayExpenseCommandDTO(account_id=3, amount=Decimal("50.00"))
        )

        assert result.is_err()
        assert result.error.code == "ACCOUNT_NOT_FOUND"
        mock_ledger_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_bill_update_failure_rolls_back(
        self, pay_use_case, mock_account_repo, mock_bill_repo, mock_uow, sample_account, sample_bill
    ):
        mock_account_repo.get_by_id = AsyncMock(return_value=sample_account)
        mock_account_repo.update_balance = AsyncMock()
        mock_bill_repo.get_by_id = AsyncMock(return_value=sample_bill)
        mock_bill_repo.set_active = AsyncMock(side_effect=RuntimeError("locked"))

        result = await pay_use_case.execute(
            PayExpenseCommandDTO(account_id=3, amount=Decimal("50.00"), bill_id=2)
        )

        assert result.is_err()
        assert result.error.code == "PAY_EXPENSE_FAILED"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()
