"""ReconcileBalances Use Case

Compares stored account balances with the balances the ledger implies.
"""

import logging
import time
from datetime import datetime, timezone
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.repositories.account_repository import AccountRepository
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from .dtos import BalanceDiscrepancyDTO, ReconciliationResultDTO

logger = logging.getLogger(__name__)


class ReconcileBalances:
    """
    Use Case: Reconcile account balances against the ledger

    Business Rules:
    1. calculated balance = credits - debits over every ledger entry
    2. Any account whose stored balance differs is reported
    3. Read-only: balances may be set outside the ledger, so drift is
       reported, never repaired
    """

    def __init__(self, account_repo: AccountRepository, ledger_repo: LedgerEntryRepository):
        self.account_repo = account_repo
        self.ledger_repo = ledger_repo

    async def execute(self) -> Result[ReconciliationResultDTO]:
        start_time = time.time()
        reconciliation_time = datetime.now(timezone.utc)

        try:
            accounts = await self.account_repo.get_all()
            effects = await self.ledger_repo.get_net_effect_by_account()

            discrepancies: list[BalanceDiscrepancyDTO] = []
            for account in accounts:
                calculated = effects.get(account.id, Decimal("0"))
                if account.current_cleared_balance != calculated:
                    discrepancy = BalanceDiscrepancyDTO(
                        account_id=account.id,
                        account_name=account.name,
                        stored_balance=account.current_cleared_balance,
                        calculated_balance=calculated,
                        discrepancy=account.current_cleared_balance - calculated,
                    )
                    discrepancies.append(discrepancy)
                    logger.warning(
                        f"Balance drift on account {account.id} ({account.name}): "
                        f"stored={account.current_cleared_balance}, ledger={calculated}"
                    )

            execution_time_ms = int((time.time() - start_time) * 1000)

            logger.info(
                f"Reconciliation complete: {len(discrepancies)} of {len(accounts)} "
                f"accounts differ from the ledger ({execution_time_ms}ms)"
            )

            return Return.ok(
                ReconciliationResultDTO(
                    total_accounts_checked=len(accounts),
                    discrepancies_found=len(discrepancies),
                    discrepancies=discrepancies,
                    reconciliation_time=reconciliation_time,
                    execution_time_ms=execution_time_ms,
                )
            )

        except Exception as e:
            logger.error(f"Balance reconciliation failed: {e}")
            return Return.err(
                Error(
                    code="RECONCILIATION_FAILED",
                    message="Failed to reconcile account balances",
                    reason=str(e),
                )
            )
