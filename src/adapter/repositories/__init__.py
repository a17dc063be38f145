from .account_repository import SqlAlchemyAccountRepository
from .ledger_entry_repository import SqlAlchemyLedgerEntryRepository
from .bill_repository import SqlAlchemyBillRepository

__all__ = [
    "SqlAlchemyAccountRepository",
    "SqlAlchemyLedgerEntryRepository",
    "SqlAlchemyBillRepository",
]
