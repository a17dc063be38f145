"""Request schemas for the Finance API

Pydantic models for validating incoming HTTP requests. Amounts must be
positive, finite and have at most two decimal places; anything else is
rejected with 422 before a use case runs.
"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class DepositRequestSchema(BaseModel):
    """
    Request schema for depositing funds

    Used for POST /accounts/{account_id}/deposit endpoint.
    """

    amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=18,
        decimal_places=2,
        description="Amount to deposit (must be > 0)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "amount": "250.00"
            }
        }


class PayExpenseRequestSchema(BaseModel):
    """
    Request schema for paying an expense

    Used for POST /accounts/{account_id}/pay endpoint.
    """

    amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=18,
        decimal_places=2,
        description="Amount to pay (must be > 0)"
    )

    bill_id: Optional[int] = Field(
        default=None,
        gt=0,
        description="Bill settled by this payment"
    )

    expense_name: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Label for the ledger entry"
    )

    @field_validator('expense_name')
    @classmethod
    def blank_name_is_none(cls, v):
        """Treat empty labels as absent"""
        if v is not None and not v.strip():
            return None
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "amount": "50.00",
                "bill_id": 2,
                "expense_name": "Water"
            }
        }


class RoutePaycheckRequestSchema(BaseModel):
    """
    Request schema for routing a paycheck

    Used for POST /paychecks/route endpoint.
    """

    gross_amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=18,
        decimal_places=2,
        description="Total paycheck amount (must be > 0)"
    )

    rule_key: Optional[str] = Field(
        default=None,
        min_length=1,
        description="Distribution rule key (default rule when omitted)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "gross_amount": "3000.00",
                "rule_key": "standard"
            }
        }
