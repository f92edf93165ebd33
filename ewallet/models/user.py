"""
ewallet/models/user.py

Represents a wallet owner. Each user logs in with a unique 'login'
and owns any number of Accounts; deleting the user removes its accounts
(and, through them, their transactions and transfers).
"""

from __future__ import annotations
from typing import List, TYPE_CHECKING
import bcrypt
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from ewallet.database import Base

if TYPE_CHECKING:
    from ewallet.models.account import Account


class User(Base):
    """
    The main user table. Each user has:
      - An ID (PK)
      - A unique login
      - A bcrypt-hashed password
      - A list of accounts
    """

    __tablename__ = 'users'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    login: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    accounts: Mapped[List[Account]] = relationship(
        "Account",
        back_populates="user",
        cascade="all, delete",
        passive_deletes=True,
        doc="All accounts owned by this user."
    )

    def set_password(self, password: str) -> None:
        """
        Hash and store the user's password with bcrypt.
        bcrypt only looks at the first 72 bytes, so longer input is rejected.
        """
        raw = password.encode("utf-8")
        if len(raw) > 72:
            raise ValueError("Password cannot exceed 72 bytes.")
        self.password_hash = bcrypt.hashpw(raw, bcrypt.gensalt()).decode("utf-8")

    def verify_password(self, password: str) -> bool:
        """
        Verify a plain-text password against the stored hash.
        """
        if not password or not self.password_hash:
            return False
        raw = password.encode("utf-8")
        if len(raw) > 72:
            return False
        return bcrypt.checkpw(raw, self.password_hash.encode("utf-8"))

    def __repr__(self) -> str:
        return f"<User(id={self.id}, login={self.login})>"
