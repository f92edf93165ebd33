"""
ewallet/models/transaction.py

A Transaction is a single income or expense entry booked on one Account:
a category, the calendar date it happened, an optional note and a signed
money value (negative for expenses).
"""

from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from ewallet.database import Base, UTCDateTime, utcnow


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)

    account_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="Account this entry is booked on."
    )

    category = Column(String(64), nullable=False, doc="e.g. 'Food', 'Salary', 'Rent'")

    date = Column(Date, nullable=False, doc="When the transaction happened (user-facing).")

    note = Column(String(255), nullable=True)

    value = Column(Numeric(18, 2), nullable=False, doc="Signed amount in the account currency.")

    # Audit fields
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)

    account = relationship("Account", back_populates="transactions")

    def __repr__(self):
        return (
            f"<Transaction(id={self.id}, account_id={self.account_id}, "
            f"category={self.category}, date={self.date}, value={self.value})>"
        )
