"""
ewallet/schemas/transaction.py

Schemas for Transaction (income/expense entries) compatible with Pydantic v2.

- TransactionBase: category, date, note, value
- TransactionCreate: adds the owning 'account_id'
- TransactionUpdate: the fields copied onto an existing entry
- TransactionRead: output, includes 'id' and 'account_id'
"""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ewallet.schemas.common import validate_money_decimal


class TransactionBase(BaseModel):
    category: str = Field(min_length=1, max_length=64)
    date: dt.date
    note: Optional[str] = Field(default=None, max_length=255)
    value: Decimal = Field(description="Signed amount, negative for expenses.")

    @field_validator("value")
    def validate_value(cls, v: Decimal) -> Decimal:
        return validate_money_decimal(v)


class TransactionCreate(TransactionBase):
    account_id: int


class TransactionUpdate(TransactionBase):
    """
    Every field is copied onto the stored entry, so all are required
    (except 'note', which may be cleared). The owning account never changes.
    """
    pass


class TransactionRead(TransactionBase):
    id: int
    account_id: int

    class Config:
        from_attributes = True
