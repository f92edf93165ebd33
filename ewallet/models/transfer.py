"""
ewallet/models/transfer.py

A Transfer moves a value from one Account to another on a given date.
Both sides reference 'accounts.id'; removing either account removes the transfer.
"""

from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from ewallet.database import Base, UTCDateTime, utcnow


class Transfer(Base):
    __tablename__ = "transfers"

    id = Column(Integer, primary_key=True, index=True)

    from_account_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    to_account_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    note = Column(String(255), nullable=True)

    value = Column(Numeric(18, 2), nullable=False)

    date = Column(Date, nullable=False)

    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)

    from_account = relationship(
        "Account",
        foreign_keys=[from_account_id],
        back_populates="transfers_from"
    )
    to_account = relationship(
        "Account",
        foreign_keys=[to_account_id],
        back_populates="transfers_to"
    )

    def __repr__(self):
        return (
            f"<Transfer(id={self.id}, from={self.from_account_id}, "
            f"to={self.to_account_id}, value={self.value}, date={self.date})>"
        )
