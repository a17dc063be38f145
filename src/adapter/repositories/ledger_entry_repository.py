"""SQLAlchemy implementation of LedgerEntryRepository

Append-only persistence for the ledger plus the aggregate used by balance
reconciliation.
"""

from decimal import Decimal
from typing import Sequence
from sqlalchemy import Numeric, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.ledger_entry_repository import LedgerEntryRepository
from src.domain.ledger_entry import LedgerEntry


class SqlAlchemyLedgerEntryRepository(LedgerEntryRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: LedgerEntry) -> LedgerEntry:
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def create_many(self, entries: Sequence[LedgerEntry]) -> list[LedgerEntry]:
        """
        Append entries in one flush

        Insert order (and therefore ID order) follows the input order.
        """
        entries = list(entries)
        self.session.add_all(entries)
        await self.session.flush()
        return entries

    async def list_recent(self, limit: int = 50, offset: int = 0) -> tuple[list[LedgerEntry], int]:
        count_stmt = select(func.count()).select_from(LedgerEntry)
        count_result = await self.session.execute(count_stmt)
        total = count_result.scalar() or 0

        stmt = (
            select(LedgerEntry)
            .order_by(LedgerEntry.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total

    async def get_net_effect_by_account(self) -> dict[int, Decimal]:
        """
        Sum ledger effects per account

        Destination accounts are credited |amount|, source accounts are
        debited |amount|, regardless of the stored sign.
        """
        effects: dict[int, Decimal] = {}

        credit_stmt = (
            select(LedgerEntry.destination_account_id, func.sum(func.abs(LedgerEntry.amount), type_=Numeric(18, 2)))
            .where(LedgerEntry.destination_account_id.is_not(None))
            .group_by(LedgerEntry.destination_account_id)
        )
        for account_id, total in (await self.session.execute(credit_stmt)).all():
            effects[account_id] = effects.get(account_id, Decimal("0")) + (total or Decimal("0"))

        debit_stmt = (
            select(LedgerEntry.source_account_id, func.sum(func.abs(LedgerEntry.amount), type_=Numeric(18, 2)))
            .where(LedgerEntry.source_account_id.is_not(None))
            .group_by(LedgerEntry.source_account_id)
        )
        for account_id, total in (await self.session.execute(debit_stmt)).all():
            effects[account_id] = effects.get(account_id, Decimal("0")) - (total or Decimal("0"))

        return effects
