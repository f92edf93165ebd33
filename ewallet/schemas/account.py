"""
ewallet/schemas/account.py

Pydantic schemas for creating, updating, and reading Account objects.
'currency' is normalized to an uppercase 3-letter code.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional

from ewallet.models.account import DEFAULT_CURRENCY


def _normalize_currency(v: str) -> str:
    v = v.strip().upper()
    if len(v) != 3 or not v.isalpha():
        raise ValueError("currency must be a 3-letter code, e.g. 'PLN'")
    return v


class AccountBase(BaseModel):
    """
    Common fields for an Account:
    - 'name': a label like "Cash", "Savings"
    - 'currency': 3-letter code
    """
    name: str = Field(min_length=1, max_length=255)
    currency: str = DEFAULT_CURRENCY

    @field_validator("currency")
    def currency_must_be_valid(cls, v: str) -> str:
        return _normalize_currency(v)


class AccountCreate(AccountBase):
    """
    Schema for creating a new Account; 'user_id' is the owner.
    """
    user_id: int


class AccountUpdate(BaseModel):
    """
    Only 'name' or 'currency' can be updated, both optional.
    """
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    currency: Optional[str] = None

    @field_validator("currency")
    def currency_must_be_valid(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return _normalize_currency(v)
        return v


class AccountRead(AccountBase):
    id: int
    user_id: int

    class Config:
        from_attributes = True
