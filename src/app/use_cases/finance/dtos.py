"""Data Transfer Objects for Finance Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class DepositCommandDTO(BaseModel):
    """
    Command DTO for depositing funds into one account

    Used as input to DepositFunds use case.
    """

    account_id: int = Field(
        ...,
        gt=0,
        description="Account receiving the deposit"
    )

    amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=18,
        decimal_places=2,
        description="Amount to add to the balance (must be > 0)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "account_id": 1,
                "amount": "250.00"
            }
        }


class PayExpenseCommandDTO(BaseModel):
    """
    Command DTO for paying an expense from one account

    Used as input to PayExpense use case. When bill_id is set the bill is
    marked paid (inactive) together with the balance change.
    """

    account_id: int = Field(
        ...,
        gt=0,
        description="Account the expense is paid from"
    )

    amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=18,
        decimal_places=2,
        description="Amount to subtract from the balance (must be > 0)"
    )

    bill_id: Optional[int] = Field(
        default=None,
        gt=0,
        description="Bill settled by this payment, if any"
    )

    expense_name: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Label recorded on the ledger entry"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "account_id": 3,
                "amount": "50.00",
                "bill_id": 2,
                "expense_name": "Water"
            }
        }


class RoutePaycheckCommandDTO(BaseModel):
    """
    Command DTO for routing a paycheck

    Used as input to RoutePaycheck use case. rule_key=None selects the
    configured default rule.
    """

    gross_amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=18,
        decimal_places=2,
        description="Total paycheck amount (must be > 0)"
    )

    rule_key: Optional[str] = Field(
        default=None,
        description="Distribution rule to apply (default rule when omitted)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "gross_amount": "3000.00",
                "rule_key": "standard"
            }
        }


class LedgerEntryDTO(BaseModel):
    """Single ledger entry"""

    id: int = Field(..., description="Entry ID (append order)")
    transaction_date: date = Field(..., description="Date of the movement")
    amount: Decimal = Field(..., description="Signed amount")
    source_account_id: Optional[int] = Field(default=None, description="Debited account")
    destination_account_id: Optional[int] = Field(default=None, description="Credited account")
    status: str = Field(..., description="Settlement status")
    description: Optional[str] = Field(default=None, description="Free text label")


class LedgerListItemDTO(LedgerEntryDTO):
    """Ledger entry with account names resolved for display"""

    source_account_name: Optional[str] = Field(default=None)
    destination_account_name: Optional[str] = Field(default=None)


class BalanceChangeDTO(BaseModel):
    """Balance of one account before and after an operation"""

    account_id: int = Field(..., description="Account ID")
    account_name: str = Field(..., description="Account name")
    balance_before: Decimal = Field(..., description="Balance before the operation")
    balance_after: Decimal = Field(..., description="Balance after the operation")


class AccountTransactionResponseDTO(BaseModel):
    """
    Response DTO for single-account money movements

    Returned by DepositFunds and PayExpense.
    """

    account_id: int = Field(..., description="Account ID")
    balance_before: Decimal = Field(..., description="Balance before the movement")
    balance_after: Decimal = Field(..., description="Balance after the movement")
    ledger_entry: LedgerEntryDTO = Field(..., description="Entry appended to the ledger")
    bill_id: Optional[int] = Field(default=None, description="Bill marked paid, if any")

    class Config:
        json_schema_extra = {
            "example": {
                "account_id": 3,
                "balance_before": "200.00",
                "balance_after": "150.00",
                "ledger_entry": {
                    "id": 42,
                    "transaction_date": "2024-01-15",
                    "amount": "-50.00",
                    "source_account_id": 3,
                    "destination_account_id": None,
                    "status": "CLEARED",
                    "description": "Water"
                },
                "bill_id": 2
            }
        }


class RoutePaycheckResponseDTO(BaseModel):
    """
    Response DTO for a routed paycheck

    remainder + total_transfers == gross_amount.
    """

    rule_key: str = Field(..., description="Rule that was applied")
    rule_found: bool = Field(..., description="False when the key matched no rule")
    gross_amount: Decimal = Field(..., description="Paycheck amount deposited")
    total_transfers: Decimal = Field(..., description="Sum of routed transfers")
    remainder: Decimal = Field(..., description="Amount left in the primary account")
    balances: list[BalanceChangeDTO] = Field(..., description="Primary first, then targets")
    ledger_entries: list[LedgerEntryDTO] = Field(..., description="Entries appended, in order")

    class Config:
        json_schema_extra = {
            "example": {
                "rule_key": "standard",
                "rule_found": True,
                "gross_amount": "3000.00",
                "total_transfers": "2185.00",
                "remainder": "815.00",
                "balances": [
                    {"account_id": 1, "account_name": "Main", "balance_before": "1000.00", "balance_after": "1815.00"}
                ],
                "ledger_entries": []
            }
        }


class ResetBillsResponseDTO(BaseModel):
    """Response DTO for the monthly bill reset"""

    bills_reactivated: int = Field(..., description="Number of bills set active")
    reset_at: datetime = Field(..., description="When the reset ran")


class AccountDTO(BaseModel):
    id: int
    name: str
    current_cleared_balance: Decimal


class BillDTO(BaseModel):
    id: int
    name: str
    expected_amount: Decimal
    paying_account_id: int
    paying_account_name: Optional[str] = None
    due_day_of_month: Optional[int] = None
    is_active: bool


class DashboardResponseDTO(BaseModel):
    """
    Response DTO for the dashboard

    safe_to_spend is the primary balance minus every active bill; it is None
    when the primary account does not exist.
    """

    accounts: list[AccountDTO] = Field(..., description="All accounts ordered by ID")
    active_bills: list[BillDTO] = Field(..., description="Unpaid bills ordered by ID")
    primary_account_id: int = Field(..., description="Account paychecks land in")
    primary_balance: Optional[Decimal] = Field(default=None)
    active_bills_total: Decimal = Field(..., description="Sum of active bills' expected amounts")
    safe_to_spend: Optional[Decimal] = Field(default=None)


class ListLedgerResponseDTO(BaseModel):
    """Paginated ledger, newest first"""

    entries: list[LedgerListItemDTO]
    total: int
    limit: int
    offset: int


class BalanceDiscrepancyDTO(BaseModel):
    """Account whose stored balance disagrees with its ledger"""

    account_id: int
    account_name: str
    stored_balance: Decimal
    calculated_balance: Decimal
    discrepancy: Decimal = Field(..., description="stored_balance - calculated_balance")


class ReconciliationResultDTO(BaseModel):
    total_accounts_checked: int
    discrepancies_found: int
    discrepancies: list[BalanceDiscrepancyDTO]
    reconciliation_time: datetime
    execution_time_ms: int


class TransferDTO(BaseModel):
    target: str
    account_id: int
    amount: Decimal


class DistributionRuleDTO(BaseModel):
    key: str
    is_default: bool
    transfers: list[TransferDTO]
    total: Decimal


class ListDistributionRulesResponseDTO(BaseModel):
    primary_account_id: int
    default_rule: str
    rules: list[DistributionRuleDTO]


def to_ledger_entry_dto(entry) -> LedgerEntryDTO:
    """Convert a LedgerEntry entity to its DTO"""
    return LedgerEntryDTO(
        id=entry.id,
        transaction_date=entry.transaction_date,
        amount=entry.amount,
        source_account_id=entry.source_account_id,
        destination_account_id=entry.destination_account_id,
        status=entry.status.value if hasattr(entry.status, "value") else entry.status,
        description=entry.description,
    )
