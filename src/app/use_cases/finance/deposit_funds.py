"""DepositFunds Use Case

Adds money to one account and records the deposit on the ledger.
"""

import logging
from datetime import date
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.account_repository import AccountRepository
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.domain.ledger_entry import LedgerEntry, LedgerStatus
from .dtos import DepositCommandDTO, AccountTransactionResponseDTO, to_ledger_entry_dto

logger = logging.getLogger(__name__)


class DepositFunds:
    """
    Use Case: Deposit funds into an account

    Business Rules:
    1. Delta semantics: balance += amount (never an overwrite)
    2. One ledger entry: +amount, destination = account, no source
    3. Balance and ledger entry commit together
    """

    def __init__(
        self,
        uow: UnitOfWork,
        account_repo: AccountRepository,
        ledger_repo: LedgerEntryRepository,
    ):
        self.uow = uow
        self.account_repo = account_repo
        self.ledger_repo = ledger_repo

    async def execute(self, command: DepositCommandDTO) -> Result[AccountTransactionResponseDTO]:
        try:
            account = await self.account_repo.get_by_id(command.account_id, for_update=True)

            if not account:
                return Return.err(
                    Error(
                        code="ACCOUNT_NOT_FOUND",
                        message=f"Account {command.account_id} not found",
                    )
                )

            balance_before = account.current_cleared_balance
            balance_after = balance_before + command.amount

            await self.account_repo.update_balance(account.id, balance_after)

            entry = await self.ledger_repo.create(
                LedgerEntry(
                    transaction_date=date.today(),
                    amount=command.amount,
                    destination_account_id=account.id,
                    status=LedgerStatus.CLEARED,
                    description="Deposit",
                )
            )

            await self.uow.commit()

            logger.info(f"Deposited {command.amount} into account {account.id}: {balance_before} -> {balance_after}")

            return Return.ok(
                AccountTransactionResponseDTO(
                    account_id=account.id,
                    balance_before=balance_before,
                    balance_after=balance_after,
                    ledger_entry=to_ledger_entry_dto(entry),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Deposit into account {command.account_id} failed: {e}")
            return Return.err(
                Error(
                    code="DEPOSIT_FAILED",
                    message="Failed to deposit funds",
                    reason=str(e),
                )
            )
