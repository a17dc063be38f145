"""Account Domain Entity

A named money bucket with its current cleared balance.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import DateTime, Numeric, String
from src.domain.base import BaseModel, id_type, utc_now


class Account(BaseModel, table=True):
    """
    Account - Named sub-account with a cleared balance

    Domain Rules:
    - Balance may go negative (overdrafts are permitted, never flagged here)
    - Balance should equal the net effect of ledger entries touching the
      account, but only by convention: nothing enforces it
    - Balances change through the deposit, expense and routing use cases
    """

    __tablename__ = "accounts"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(id_type(), primary_key=True, autoincrement=True),
        description="Unique account identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Display name of the account"
    )

    current_cleared_balance: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
        description="Current cleared balance (precision: 18,2)"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        description="Account creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        description="Last balance update timestamp"
    )
