"""Paycheck API Routes

Paycheck routing and the distribution rules it applies.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.finance_request import RoutePaycheckRequestSchema
from src.app.use_cases.finance.dtos import (
    RoutePaycheckCommandDTO,
    RoutePaycheckResponseDTO,
    ListDistributionRulesResponseDTO,
)
from src.app.use_cases.finance.route_paycheck import RoutePaycheck
from src.app.use_cases.finance.list_distribution_rules import ListDistributionRules
from src.adapter.repositories.account_repository import SqlAlchemyAccountRepository
from src.adapter.repositories.ledger_entry_repository import SqlAlchemyLedgerEntryRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.distribution_rule import DistributionRuleTable
from src.depends import get_session, get_distribution_table
from src.api.error import ClientError

router = APIRouter(prefix="/paychecks", tags=["Paychecks"])


@router.post(
    "/route",
    response_model=RoutePaycheckResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Routing table references a missing account",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "ACCOUNT_NOT_FOUND",
                            "message": "Accounts not found: 8"
                        }
                    }
                }
            }
        }
    }
)
async def route_paycheck(
    request: RoutePaycheckRequestSchema,
    session: AsyncSession = Depends(get_session),
    distribution_table: DistributionRuleTable = Depends(get_distribution_table),
):
    """
    Deposit a paycheck and route it across sub-accounts.

    The whole `gross_amount` is deposited into the primary account, then each
    transfer of the selected rule moves a fixed amount to its sub-account.
    Either every balance and ledger entry is written or none is.

    Submitting the same paycheck twice routes it twice.

    **Request body:**
    - `gross_amount` (required): Paycheck total (must be > 0)
    - `rule_key` (optional): Distribution rule; default rule when omitted.
      Unknown keys route nothing and keep the whole paycheck in the primary account.

    **Returns:**
    - 200: Paycheck routed
    - 404: An account in the routing table does not exist
    - 422: Invalid amount
    """
    uow = SqlAlchemyUnitOfWork(session)
    account_repo = SqlAlchemyAccountRepository(session)
    ledger_repo = SqlAlchemyLedgerEntryRepository(session)

    command = RoutePaycheckCommandDTO(
        gross_amount=request.gross_amount,
        rule_key=request.rule_key,
    )

    use_case = RoutePaycheck(uow, account_repo, ledger_repo, distribution_table)
    result = await use_case.execute(command)

    if result.is_err():
        if result.error.code == "ACCOUNT_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return result.value


@router.get(
    "/rules",
    response_model=ListDistributionRulesResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_distribution_rules(
    distribution_table: DistributionRuleTable = Depends(get_distribution_table),
):
    """List the distribution rules loaded at startup."""
    result = await ListDistributionRules(distribution_table).execute()
    return result.value
