"""PayExpense Use Case

Takes money out of one account for an expense and, when the expense is a
tracked bill, marks that bill paid for the current cycle.
"""

import logging
from datetime import date
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.account_repository import AccountRepository
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.app.repositories.bill_repository import BillRepository
from src.domain.ledger_entry import LedgerEntry, LedgerStatus
from .dtos import PayExpenseCommandDTO, AccountTransactionResponseDTO, to_ledger_entry_dto

logger = logging.getLogger(__name__)


class PayExpense:
    """
    Use Case: Pay an expense from an account

    Business Rules:
    1. balance -= amount; overdrafts are allowed
    2. One ledger entry: -amount, source = account, no destination
    3. bill_id given: the bill becomes inactive in the same transaction
    4. Unknown account or bill: nothing is written
    5. The bill must be paid from its own paying account
    """

    def __init__(
        self,
        uow: UnitOfWork,
        account_repo: AccountRepository,
        ledger_repo: LedgerEntryRepository,
        bill_repo: BillRepository,
    ):
        self.uow = uow
        self.account_repo = account_repo
        self.ledger_repo = ledger_repo
        self.bill_repo = bill_repo

    async def execute(self, command: PayExpenseCommandDTO) -> Result[AccountTransactionResponseDTO]:
        try:
            # Step 1: Validate references before touching anything
            account = await self.account_repo.get_by_id(command.account_id, for_update=True)

            if not account:
                return Return.err(
                    Error(
                        code="ACCOUNT_NOT_FOUND",
                        message=f"Account {command.account_id} not found",
                    )
                )

            bill = None
            if command.bill_id is not None:
                bill = await self.bill_repo.get_by_id(command.bill_id)
                if not bill:
                    return Return.err(
                        Error(
                            code="BILL_NOT_FOUND",
                            message=f"Bill {command.bill_id} not found",
                        )
                    )
                if bill.paying_account_id != account.id:
                    return Return.err(
                        Error(
                            code="BILL_ACCOUNT_MISMATCH",
                            message=(
                                f"Bill {bill.id} is paid from account {bill.paying_account_id}, "
                                f"not account {account.id}"
                            ),
                        )
                    )

            # Step 2: Debit the account
            balance_before = account.current_cleared_balance
            balance_after = balance_before - command.amount

            if balance_after < 0:
                logger.warning(f"Account {account.id} overdrawn by expense: balance {balance_after}")

            await self.account_repo.update_balance(account.id, balance_after)

            # Step 3: Record the expense
            entry = await self.ledger_repo.create(
                LedgerEntry(
                    transaction_date=date.today(),
                    amount=-command.amount,
                    source_account_id=account.id,
                    status=LedgerStatus.CLEARED,
                    description=command.expense_name or (bill.name if bill else None),
                )
            )

            # Step 4: Mark the bill paid
            if bill is not None:
                await self.bill_repo.set_active(bill.id, False)

            await self.uow.commit()

            logger.info(
                f"Paid {command.amount} from account {account.id}"
                + (f" for bill {bill.id}" if bill is not None else "")
            )

            return Return.ok(
                AccountTransactionResponseDTO(
                    account_id=account.id,
                    balance_before=balance_before,
                    balance_after=balance_after,
                    ledger_entry=to_ledger_entry_dto(entry),
                    bill_id=bill.id if bill is not None else None,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Expense payment from account {command.account_id} failed: {e}")
            return Return.err(
                Error(
                    code="PAY_EXPENSE_FAILED",
                    message="Failed to pay expense",
                    reason=str(e),
                )
            )
