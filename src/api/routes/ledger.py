"""Ledger API Routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.finance.dtos import ListLedgerResponseDTO, ReconciliationResultDTO
from src.app.use_cases.finance.list_ledger import ListLedger
from src.app.use_cases.finance.reconcile_balances import ReconcileBalances
from src.adapter.repositories.account_repository import SqlAlchemyAccountRepository
from src.adapter.repositories.ledger_entry_repository import SqlAlchemyLedgerEntryRepository
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/ledger", tags=["Ledger"])


@router.get(
    "",
    response_model=ListLedgerResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_ledger(
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    """
    List ledger entries, newest first.

    **Query parameters:**
    - `limit`: Page size (1-500, default 50)
    - `offset`: Entries to skip (default 0)
    """
    ledger_repo = SqlAlchemyLedgerEntryRepository(session)
    account_repo = SqlAlchemyAccountRepository(session)

    result = await ListLedger(ledger_repo, account_repo).execute(limit=limit, offset=offset)
    return result.value


@router.get(
    "/reconciliation",
    response_model=ReconciliationResultDTO,
    status_code=status.HTTP_200_OK,
)
async def reconcile_balances(session: AsyncSession = Depends(get_session)):
    """
    Compare stored balances with the balances implied by the ledger.

    Read-only: reports drift, never corrects it.
    """
    account_repo = SqlAlchemyAccountRepository(session)
    ledger_repo = SqlAlchemyLedgerEntryRepository(session)

    result = await ReconcileBalances(account_repo, ledger_repo).execute()

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return result.value
