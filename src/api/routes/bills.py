"""Bill API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.finance.dtos import ResetBillsResponseDTO
from src.app.use_cases.finance.reset_monthly_bills import ResetMonthlyBills
from src.adapter.repositories.bill_repository import SqlAlchemyBillRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/bills", tags=["Bills"])


@router.post(
    "/reset",
    response_model=ResetBillsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def reset_monthly_bills(session: AsyncSession = Depends(get_session)):
    """
    Start a new billing cycle.

    Marks every bill active (unpaid) again, regardless of its current state.
    """
    uow = SqlAlchemyUnitOfWork(session)
    bill_repo = SqlAlchemyBillRepository(session)

    result = await ResetMonthlyBills(uow, bill_repo).execute()

    if result.is_err():
        raise ClientError(result.error)

    return result.value
