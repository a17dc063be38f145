"""Ledger Entry Domain Entity

Append-only record of a signed money movement between at most one source
account and at most one destination account.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import DateTime, ForeignKey, Numeric, String
from src.domain.base import BaseModel, id_type, utc_now


class LedgerStatus(str, Enum):
    """Settlement status of a ledger entry"""
    CLEARED = "CLEARED"


class LedgerEntry(BaseModel, table=True):
    """
    Ledger Entry - Immutable money movement

    Domain Rules:
    - Entries are never updated or deleted
    - Deposits: positive amount, destination only
    - Transfers: negative amount, source and destination
    - Expenses: negative amount, source only
    - Balance effect: source is debited |amount|, destination is credited |amount|
    """

    __tablename__ = "ledger"
    __table_args__ = (
        Index('ix_ledger_transaction_date', 'transaction_date'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(id_type(), primary_key=True, autoincrement=True),
        description="Entry identifier (auto-increment, append order)"
    )

    transaction_date: date = Field(
        default_factory=date.today,
        description="Date the movement happened"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Signed amount (precision: 18,2)"
    )

    source_account_id: Optional[int] = Field(
        default=None,
        sa_column=Column(id_type(), ForeignKey("accounts.id"), nullable=True, index=True),
        description="Account the money left, if any"
    )

    destination_account_id: Optional[int] = Field(
        default=None,
        sa_column=Column(id_type(), ForeignKey("accounts.id"), nullable=True, index=True),
        description="Account the money arrived in, if any"
    )

    status: LedgerStatus = Field(
        default=LedgerStatus.CLEARED,
        description="Settlement status"
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Free text, e.g. the expense name"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        description="Insert timestamp (immutable)"
    )

    def effect_on(self, account_id: int) -> Decimal:
        """Signed change this entry implies for the given account's balance"""
        effect = Decimal("0")
        if self.destination_account_id == account_id:
            effect += abs(self.amount)
        if self.source_account_id == account_id:
            effect -= abs(self.amount)
        return effect
