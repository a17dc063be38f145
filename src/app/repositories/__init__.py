from .account_repository import AccountRepository
from .ledger_entry_repository import LedgerEntryRepository
from .bill_repository import BillRepository

__all__ = [
    "AccountRepository",
    "LedgerEntryRepository",
    "BillRepository",
]
