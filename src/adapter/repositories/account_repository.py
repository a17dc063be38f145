"""SQLAlchemy implementation of AccountRepository

Provides persistence for Account entities with row locking support for the
read-modify-write balance updates.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Sequence
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.account_repository import AccountRepository
from src.domain.account import Account


class SqlAlchemyAccountRepository(AccountRepository):
    """
    SQLAlchemy implementation of AccountRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - Writes are flushed, never committed (the unit of work commits)
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, account_id: int, for_update: bool = False) -> Optional[Account]:
        stmt = select(Account).where(Account.id == account_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_ids(self, account_ids: Sequence[int], for_update: bool = False) -> list[Account]:
        """
        Retrieve accounts by ID with optional row-level locking

        Rows are locked in ID order so two routing requests cannot deadlock
        on each other.
        """
        if not account_ids:
            return []

        stmt = select(Account).where(Account.id.in_(list(account_ids))).order_by(Account.id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_all(self) -> list[Account]:
        stmt = select(Account).order_by(Account.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, account: Account) -> Account:
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def update_balance(self, account_id: int, new_balance: Decimal) -> None:
        """
        Update account balance and updated_at timestamp

        Note:
            Should be called within a transaction with the account already locked
        """
        account = await self.get_by_id(account_id, for_update=False)
        if account:
            account.current_cleared_balance = new_balance
            account.updated_at = datetime.now(timezone.utc)
            self.session.add(account)
            await self.session.flush()
