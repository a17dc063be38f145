"""SQLAlchemy implementation of BillRepository"""

from typing import Optional
from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.bill_repository import BillRepository
from src.domain.bill import Bill


class SqlAlchemyBillRepository(BillRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, bill_id: int) -> Optional[Bill]:
        stmt = select(Bill).where(Bill.id == bill_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active(self) -> list[Bill]:
        stmt = select(Bill).where(Bill.is_active == True).order_by(Bill.id)  # noqa: E712
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, bill: Bill) -> Bill:
        self.session.add(bill)
        await self.session.flush()
        await self.session.refresh(bill)
        return bill

    async def set_active(self, bill_id: int, is_active: bool) -> Optional[Bill]:
        bill = await self.get_by_id(bill_id)
        if not bill:
            return None

        bill.is_active = is_active
        self.session.add(bill)
        await self.session.flush()
        return bill

    async def activate_all(self) -> int:
        """
        Reactivate every bill with a single UPDATE

        Returns:
            Number of rows matched (every bill)
        """
        stmt = update(Bill).values(is_active=True)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
