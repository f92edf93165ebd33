"""
ewallet/models/account.py

Defines the Account model. An Account belongs to one User and holds
Transactions; it is also the source ('transfers_from') or target
('transfers_to') of Transfers between the user's accounts.

User => One-to-many => Account
Account => One-to-many => Transaction
Account => One-to-many => Transfer (as from / as to)
"""

from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from ewallet.database import Base

DEFAULT_CURRENCY = "PLN"


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_account_user_name"),
    )

    # ---------------------------------------------------------------------
    # Primary Key & Fields
    # ---------------------------------------------------------------------
    id = Column(Integer, primary_key=True, index=True)

    # Each Account belongs to one User, enforced by user_id (NOT NULL)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # A label such as "Cash" or "Savings", unique per user
    name = Column(String(255), nullable=False)

    # ISO 4217 code, e.g. "PLN", "EUR"
    currency = Column(String(3), nullable=False, default=DEFAULT_CURRENCY)

    # ---------------------------------------------------------------------
    # Relationships
    # ---------------------------------------------------------------------
    user = relationship(
        "User",
        back_populates="accounts",
        doc="The user that owns this account."
    )

    transactions = relationship(
        "Transaction",
        back_populates="account",
        cascade="all, delete",
        passive_deletes=True,
        doc="Income and expense entries booked on this account."
    )

    transfers_from = relationship(
        "Transfer",
        foreign_keys="[Transfer.from_account_id]",
        back_populates="from_account",
        cascade="all, delete",
        passive_deletes=True,
        doc="Outgoing transfers: this account is the 'from' side."
    )
    transfers_to = relationship(
        "Transfer",
        foreign_keys="[Transfer.to_account_id]",
        back_populates="to_account",
        cascade="all, delete",
        passive_deletes=True,
        doc="Incoming transfers: this account is the 'to' side."
    )

    def __repr__(self):
        return (
            f"<Account(id={self.id}, user_id={self.user_id}, "
            f"name={self.name}, currency={self.currency})>"
        )
