"""Bill Repository Interface

Defines the contract for bill persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.bill import Bill


class BillRepository(ABC):
    """Repository interface for Bill persistence"""

    @abstractmethod
    async def get_by_id(self, bill_id: int) -> Optional[Bill]:
        """
        Retrieve bill by ID

        Args:
            bill_id: Bill ID

        Returns:
            Bill if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_active(self) -> list[Bill]:
        """Active (unpaid) bills ordered by ID"""
        pass

    @abstractmethod
    async def create(self, bill: Bill) -> Bill:
        pass

    @abstractmethod
    async def set_active(self, bill_id: int, is_active: bool) -> Optional[Bill]:
        """
        Flip a single bill's active flag

        Returns:
            Updated Bill if found, None otherwise
        """
        pass

    @abstractmethod
    async def activate_all(self) -> int:
        """
        Mark every bill active

        Returns:
            Number of bills touched (all rows, active or not)
        """
        pass
