"""Bill Domain Entity

Recurring monthly expense paid from a specific account.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, ForeignKey, Numeric, String
from src.domain.base import BaseModel, id_type


class Bill(BaseModel, table=True):
    """
    Bill - Recurring expense definition

    Lifecycle:
    - Created outside this service
    - is_active -> False when paid through PayExpense
    - is_active -> True for every bill on the monthly reset
    """

    __tablename__ = "bills"
    __table_args__ = (
        CheckConstraint(
            'due_day_of_month IS NULL OR (due_day_of_month >= 1 AND due_day_of_month <= 31)',
            name='due_day_in_month'
        ),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(id_type(), primary_key=True, autoincrement=True),
        description="Unique bill identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Bill name"
    )

    expected_amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Expected monthly amount"
    )

    paying_account_id: int = Field(
        sa_column=Column(id_type(), ForeignKey("accounts.id"), nullable=False),
        description="Account the bill is paid from"
    )

    due_day_of_month: Optional[int] = Field(
        default=None,
        description="Day of month the bill is due (1-31)"
    )

    is_active: bool = Field(
        default=True,
        description="True while the bill is still unpaid this cycle"
    )
