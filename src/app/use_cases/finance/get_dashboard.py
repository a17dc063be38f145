"""Get Dashboard Use Case

Read model behind the home screen: balances, unpaid bills and the
safe-to-spend figure.
"""

from decimal import Decimal
from libs.result import Result, Return
from src.app.repositories.account_repository import AccountRepository
from src.app.repositories.bill_repository import BillRepository
from .dtos import AccountDTO, BillDTO, DashboardResponseDTO


class GetDashboard:
    """
    Get Dashboard Use Case

    safe_to_spend = primary balance - sum(expected_amount of active bills).
    Derived on every read, never stored.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        bill_repo: BillRepository,
        primary_account_id: int,
    ):
        self.account_repo = account_repo
        self.bill_repo = bill_repo
        self.primary_account_id = primary_account_id

    async def execute(self) -> Result[DashboardResponseDTO]:
        accounts = await self.account_repo.get_all()
        bills = await self.bill_repo.get_active()

        names = {account.id: account.name for account in accounts}
        primary = next((a for a in accounts if a.id == self.primary_account_id), None)

        bills_total = sum((bill.expected_amount for bill in bills), Decimal("0"))
        primary_balance = primary.current_cleared_balance if primary else None

        return Return.ok(
            DashboardResponseDTO(
                accounts=[
                    AccountDTO(
                        id=account.id,
                        name=account.name,
                        current_cleared_balance=account.current_cleared_balance,
                    )
                    for account in accounts
                ],
                active_bills=[
                    BillDTO(
                        id=bill.id,
                        name=bill.name,
                        expected_amount=bill.expected_amount,
                        paying_account_id=bill.paying_account_id,
                        paying_account_name=names.get(bill.paying_account_id),
                        due_day_of_month=bill.due_day_of_month,
                        is_active=bill.is_active,
                    )
                    for bill in bills
                ],
                primary_account_id=self.primary_account_id,
                primary_balance=primary_balance,
                active_bills_total=bills_total,
                safe_to_spend=primary_balance - bills_total if primary_balance is not None else None,
            )
        )
