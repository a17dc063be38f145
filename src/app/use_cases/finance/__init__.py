"""Finance use cases"""
from .deposit_funds import DepositFunds
from .pay_expense import PayExpense
from .route_paycheck import RoutePaycheck
from .reset_monthly_bills import ResetMonthlyBills
from .get_dashboard import GetDashboard
from .list_ledger import ListLedger
from .reconcile_balances import ReconcileBalances
from .list_distribution_rules import ListDistributionRules
from .dtos import (
    DepositCommandDTO,
    PayExpenseCommandDTO,
    RoutePaycheckCommandDTO,
    LedgerEntryDTO,
    LedgerListItemDTO,
    BalanceChangeDTO,
    AccountTransactionResponseDTO,
    RoutePaycheckResponseDTO,
    ResetBillsResponseDTO,
    AccountDTO,
    BillDTO,
    DashboardResponseDTO,
    ListLedgerResponseDTO,
    BalanceDiscrepancyDTO,
    ReconciliationResultDTO,
    TransferDTO,
    DistributionRuleDTO,
    ListDistributionRulesResponseDTO,
)

__all__ = [
    "DepositFunds",
    "PayExpense",
    "RoutePaycheck",
    "ResetMonthlyBills",
    "GetDashboard",
    "ListLedger",
    "ReconcileBalances",
    "ListDistributionRules",
    "DepositCommandDTO",
    "PayExpenseCommandDTO",
    "RoutePaycheckCommandDTO",
    "LedgerEntryDTO",
    "LedgerListItemDTO",
    "BalanceChangeDTO",
    "AccountTransactionResponseDTO",
    "RoutePaycheckResponseDTO",
    "ResetBillsResponseDTO",
    "AccountDTO",
    "BillDTO",
    "DashboardResponseDTO",
    "ListLedgerResponseDTO",
    "BalanceDiscrepancyDTO",
    "ReconciliationResultDTO",
    "TransferDTO",
    "DistributionRuleDTO",
    "ListDistributionRulesResponseDTO",
]
