"""
ewallet/schemas/transfer.py

Schemas for Transfers between two accounts.
"""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ewallet.schemas.common import validate_money_decimal


class TransferBase(BaseModel):
    note: Optional[str] = Field(default=None, max_length=255)
    value: Decimal = Field(gt=0, description="Amount moved from 'from' to 'to'.")
    date: dt.date

    @field_validator("value")
    def validate_value(cls, v: Decimal) -> Decimal:
        return validate_money_decimal(v)


class TransferCreate(TransferBase):
    from_account_id: int
    to_account_id: int


class TransferUpdate(TransferBase):
    """
    note, value and date are copied onto the stored transfer;
    the account pair is fixed at creation.
    """
    pass


class TransferRead(TransferBase):
    id: int
    from_account_id: int
    to_account_id: int

    class Config:
        from_attributes = True
