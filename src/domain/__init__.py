from .base import BaseModel, id_type, utc_now
from .account import Account
from .ledger_entry import LedgerEntry, LedgerStatus
from .bill import Bill
from .distribution_rule import (
    Transfer,
    DistributionRule,
    DistributionRuleTable,
    DistributionPlan,
    PlannedTransfer,
)

__all__ = [
    "BaseModel",
    "id_type",
    "utc_now",
    "Account",
    "LedgerEntry",
    "LedgerStatus",
    "Bill",
    "Transfer",
    "DistributionRule",
    "DistributionRuleTable",
    "DistributionPlan",
    "PlannedTransfer",
]
