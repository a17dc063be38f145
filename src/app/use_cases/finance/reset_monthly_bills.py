"""ResetMonthlyBills Use Case

Starts a new billing cycle by marking every bill unpaid again.
"""

import logging
from datetime import datetime, timezone
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.bill_repository import BillRepository
from .dtos import ResetBillsResponseDTO

logger = logging.getLogger(__name__)


class ResetMonthlyBills:
    """
    Use Case: Reactivate all bills

    Unconditional: every bill row gets is_active = True, whatever its
    current state. Intended to run once per billing cycle.
    """

    def __init__(self, uow: UnitOfWork, bill_repo: BillRepository):
        self.uow = uow
        self.bill_repo = bill_repo

    async def execute(self) -> Result[ResetBillsResponseDTO]:
        try:
            count = await self.bill_repo.activate_all()
            await self.uow.commit()

            logger.info(f"Monthly bill reset: {count} bills reactivated")

            return Return.ok(
                ResetBillsResponseDTO(
                    bills_reactivated=count,
                    reset_at=datetime.now(timezone.utc),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Monthly bill reset failed: {e}")
            return Return.err(
                Error(
                    code="RESET_BILLS_FAILED",
                    message="Failed to reset monthly bills",
                    reason=str(e),
                )
            )
