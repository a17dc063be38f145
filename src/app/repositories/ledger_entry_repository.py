"""Ledger Entry Repository Interface

Defines the contract for the append-only ledger.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Sequence
from src.domain.ledger_entry import LedgerEntry


class LedgerEntryRepository(ABC):
    """
    Repository interface for LedgerEntry persistence

    Entries are append-only: there is no update or delete.
    """

    @abstractmethod
    async def create(self, entry: LedgerEntry) -> LedgerEntry:
        """
        Append one entry

        Args:
            entry: LedgerEntry to persist

        Returns:
            LedgerEntry with generated ID
        """
        pass

    @abstractmethod
    async def create_many(self, entries: Sequence[LedgerEntry]) -> list[LedgerEntry]:
        """
        Append several entries, preserving their order

        Args:
            entries: LedgerEntry objects to persist

        Returns:
            Entries with generated IDs, in the same order
        """
        pass

    @abstractmethod
    async def list_recent(self, limit: int = 50, offset: int = 0) -> tuple[list[LedgerEntry], int]:
        """
        Page through the ledger newest first

        Args:
            limit: Maximum number of entries
            offset: Number of entries to skip

        Returns:
            Tuple of (entries, total count)
        """
        pass

    @abstractmethod
    async def get_net_effect_by_account(self) -> dict[int, Decimal]:
        """
        Net balance effect of the whole ledger per account

        Credits to destination accounts minus debits from source accounts.

        Returns:
            Mapping of account ID to net effect (accounts without entries omitted)
        """
        pass
