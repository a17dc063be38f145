"""Account Repository Interface

Defines the contract for account persistence operations.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, Sequence
from src.domain.account import Account


class AccountRepository(ABC):
    """
    Repository interface for Account persistence

    Lookups that precede a balance change take a row lock (SELECT FOR UPDATE)
    so the read-modify-write happens inside the caller's transaction.
    """

    @abstractmethod
    async def get_by_id(self, account_id: int, for_update: bool = False) -> Optional[Account]:
        """
        Retrieve account by ID

        Args:
            account_id: Account ID
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Account if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_ids(self, account_ids: Sequence[int], for_update: bool = False) -> list[Account]:
        """
        Retrieve several accounts at once

        Args:
            account_ids: Account IDs to fetch
            for_update: If True, lock the rows with SELECT FOR UPDATE

        Returns:
            Accounts found, ordered by ID (missing IDs are simply absent)
        """
        pass

    @abstractmethod
    async def get_all(self) -> list[Account]:
        """All accounts ordered by ID"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        pass

    @abstractmethod
    async def update_balance(self, account_id: int, new_balance: Decimal) -> None:
        """
        Overwrite an account's cleared balance

        Args:
            account_id: Account ID
            new_balance: New balance value
        """
        pass
