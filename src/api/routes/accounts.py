"""Account API Routes

Single-account money movements: deposits and expense payments.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.finance_request import DepositRequestSchema, PayExpenseRequestSchema
from src.app.use_cases.finance.dtos import (
    AccountTransactionResponseDTO,
    DepositCommandDTO,
    PayExpenseCommandDTO,
)
from src.app.use_cases.finance.deposit_funds import DepositFunds
from src.app.use_cases.finance.pay_expense import PayExpense
from src.adapter.repositories.account_repository import SqlAlchemyAccountRepository
from src.adapter.repositories.ledger_entry_repository import SqlAlchemyLedgerEntryRepository
from src.adapter.repositories.bill_repository import SqlAlchemyBillRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/accounts", tags=["Accounts"])

NOT_FOUND_CODES = {"ACCOUNT_NOT_FOUND", "BILL_NOT_FOUND"}


@router.post(
    "/{account_id}/deposit",
    response_model=AccountTransactionResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Account not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "ACCOUNT_NOT_FOUND",
                            "message": "Account 99 not found"
                        }
                    }
                }
            }
        }
    }
)
async def deposit_funds(
    account_id: int,
    request: DepositRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Deposit funds into an account.

    Adds `amount` to the account's cleared balance and appends a positive
    ledger entry with the account as destination.

    **Returns:**
    - 200: Deposit applied
    - 404: Account not found
    - 422: Invalid amount
    """
    uow = SqlAlchemyUnitOfWork(session)
    account_repo = SqlAlchemyAccountRepository(session)
    ledger_repo = SqlAlchemyLedgerEntryRepository(session)

    command = DepositCommandDTO(account_id=account_id, amount=request.amount)

    use_case = DepositFunds(uow, account_repo, ledger_repo)
    result = await use_case.execute(command)

    if result.is_err():
        if result.error.code in NOT_FOUND_CODES:
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return result.value


@router.post(
    "/{account_id}/pay",
    response_model=AccountTransactionResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Account or bill not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "BILL_NOT_FOUND",
                            "message": "Bill 7 not found"
                        }
                    }
                }
            }
        }
    }
)
async def pay_expense(
    account_id: int,
    request: PayExpenseRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Pay an expense from an account.

    Subtracts `amount` from the balance (overdrafts allowed) and appends a
    negative ledger entry with the account as source. When `bill_id` is
    given, the bill is marked paid until the next monthly reset.

    **Returns:**
    - 200: Payment applied
    - 404: Account or bill not found
    - 400: Bill is paid from a different account
    - 422: Invalid amount
    """
    uow = SqlAlchemyUnitOfWork(session)
    account_repo = SqlAlchemyAccountRepository(session)
    ledger_repo = SqlAlchemyLedgerEntryRepository(session)
    bill_repo = SqlAlchemyBillRepository(session)

    command = PayExpenseCommandDTO(
        account_id=account_id,
        amount=request.amount,
        bill_id=request.bill_id,
        expense_name=request.expense_name,
    )

    use_case = PayExpense(uow, account_repo, ledger_repo, bill_repo)
    result = await use_case.execute(command)

    if result.is_err():
        if result.error.code in NOT_FOUND_CODES:
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return result.value
