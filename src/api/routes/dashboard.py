"""Dashboard API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.finance.dtos import DashboardResponseDTO
from src.app.use_cases.finance.get_dashboard import GetDashboard
from src.adapter.repositories.account_repository import SqlAlchemyAccountRepository
from src.adapter.repositories.bill_repository import SqlAlchemyBillRepository
from src.domain.distribution_rule import DistributionRuleTable
from src.depends import get_session, get_distribution_table

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "",
    response_model=DashboardResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_dashboard(
    session: AsyncSession = Depends(get_session),
    distribution_table: DistributionRuleTable = Depends(get_distribution_table),
):
    """
    Account balances, unpaid bills and the safe-to-spend figure.

    `safe_to_spend` is the primary account balance minus the expected amount
    of every active bill.
    """
    use_case = GetDashboard(
        SqlAlchemyAccountRepository(session),
        SqlAlchemyBillRepository(session),
        primary_account_id=distribution_table.primary_account_id,
    )
    result = await use_case.execute()
    return result.value
