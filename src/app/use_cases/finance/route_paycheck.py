"""RoutePaycheck Use Case

Deposits a paycheck into the primary account and routes fixed amounts from
it to the sub-accounts named by a distribution rule.
"""

import logging
from datetime import date
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.account_repository import AccountRepository
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.domain.distribution_rule import DistributionRuleTable
from src.domain.ledger_entry import LedgerEntry, LedgerStatus
from .dtos import (
    RoutePaycheckCommandDTO,
    RoutePaycheckResponseDTO,
    BalanceChangeDTO,
    to_ledger_entry_dto,
)

logger = logging.getLogger(__name__)


class RoutePaycheck:
    """
    Use Case: Route a paycheck across sub-accounts

    Business Rules:
    1. remainder = gross - sum(transfers); may be negative (overdraft allowed)
    2. Primary balance += remainder, each target balance += its transfer
    3. Ledger: +gross into primary, then -transfer primary->target per
       nonzero transfer, in rule order
    4. Unknown rule key: no transfers, the whole gross stays in primary
    5. All-or-nothing: balances and ledger rows commit in one unit of work
    6. Not idempotent: running twice applies everything twice

    Flow:
    1. Plan the distribution from the rule table
    2. Lock primary and target accounts (SELECT FOR UPDATE)
    3. Fail before any write if an account is missing
    4. Update balances
    5. Append ledger entries
    6. Commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        account_repo: AccountRepository,
        ledger_repo: LedgerEntryRepository,
        distribution_table: DistributionRuleTable,
    ):
        self.uow = uow
        self.account_repo = account_repo
        self.ledger_repo = ledger_repo
        self.distribution_table = distribution_table

    async def execute(self, command: RoutePaycheckCommandDTO) -> Result[RoutePaycheckResponseDTO]:
        """
        Execute paycheck routing

        Args:
            command: RoutePaycheckCommandDTO with gross_amount and optional rule_key

        Returns:
            Result[RoutePaycheckResponseDTO]: Balances and ledger entries, or error
        """
        plan = self.distribution_table.plan(command.gross_amount, command.rule_key)

        logger.info(
            f"Routing paycheck of {plan.gross_amount} with rule '{plan.rule_key}': "
            f"transfers={plan.total_transfers}, remainder={plan.remainder}"
        )
        if not plan.rule_found:
            logger.warning(
                f"No distribution rule '{plan.rule_key}', depositing full amount "
                f"into account {plan.primary_account_id}"
            )

        try:
            # Step 1: Lock every account the plan touches
            account_ids = plan.account_ids()
            accounts = await self.account_repo.get_by_ids(account_ids, for_update=True)
            accounts_by_id = {account.id: account for account in accounts}

            missing = [account_id for account_id in account_ids if account_id not in accounts_by_id]
            if missing:
                return Return.err(
                    Error(
                        code="ACCOUNT_NOT_FOUND",
                        message=f"Accounts not found: {', '.join(str(i) for i in missing)}",
                        reason="Distribution table references accounts that do not exist",
                    )
                )

            # Step 2: Apply balance deltas
            deltas = plan.deltas()
            balances = []
            for account_id in account_ids:
                account = accounts_by_id[account_id]
                balance_before = account.current_cleared_balance
                balance_after = balance_before + deltas[account_id]

                await self.account_repo.update_balance(account_id, balance_after)

                balances.append(
                    BalanceChangeDTO(
                        account_id=account_id,
                        account_name=account.name,
                        balance_before=balance_before,
                        balance_after=balance_after,
                    )
                )

            # Step 3: Append ledger entries
            today = date.today()
            entries = [
                LedgerEntry(
                    transaction_date=today,
                    amount=plan.gross_amount,
                    destination_account_id=plan.primary_account_id,
                    status=LedgerStatus.CLEARED,
                    description=f"Paycheck ({plan.rule_key})",
                )
            ]
            for transfer in plan.transfers:
                if transfer.amount > 0:
                    entries.append(
                        LedgerEntry(
                            transaction_date=today,
                            amount=-transfer.amount,
                            source_account_id=plan.primary_account_id,
                            destination_account_id=transfer.account_id,
                            status=LedgerStatus.CLEARED,
                            description=f"Paycheck routing: {transfer.target}",
                        )
                    )

            created_entries = await self.ledger_repo.create_many(entries)

            # Step 4: Commit everything at once
            await self.uow.commit()

            logger.info(
                f"Paycheck routed: {len(balances)} balances updated, "
                f"{len(created_entries)} ledger entries written"
            )

            return Return.ok(
                RoutePaycheckResponseDTO(
                    rule_key=plan.rule_key,
                    rule_found=plan.rule_found,
                    gross_amount=plan.gross_amount,
                    total_transfers=plan.total_transfers,
                    remainder=plan.remainder,
                    balances=balances,
                    ledger_entries=[to_ledger_entry_dto(e) for e in created_entries],
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Paycheck routing failed, nothing was applied: {e}")
            return Return.err(
                Error(
                    code="ROUTE_PAYCHECK_FAILED",
                    message="Failed to route paycheck",
                    reason=str(e),
                )
            )
