# FILE: ewallet/services/transaction.py

"""
ewallet/services/transaction.py

CRUD and finder queries for Transactions (income/expense entries).

Finders:
 - by account:  every entry booked on one account
 - by user:     every entry booked on any account the user owns
"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ewallet.models.account import Account
from ewallet.models.transaction import Transaction
from ewallet.schemas.transaction import TransactionCreate, TransactionUpdate
from ewallet.services import account as account_service

logger = logging.getLogger(__name__)

# Account id meaning "every account of the user" in list queries
ALL_ACCOUNTS = 0


# ------------------------------------------------------------------------------
# Finders
# ------------------------------------------------------------------------------
def get_transaction_by_id(transaction_id: int, db: Session) -> Transaction | None:
    return db.query(Transaction).filter(Transaction.id == transaction_id).first()


def get_transactions_by_account_id(account_id: int, db: Session) -> list[Transaction]:
    return (
        db.query(Transaction)
        .filter(Transaction.account_id == account_id)
        .order_by(Transaction.date.desc(), Transaction.id.desc())
        .all()
    )


def get_transactions_by_user_id(user_id: int, db: Session) -> list[Transaction]:
    """
    Entries of all accounts owned by the user, newest first.
    """
    return (
        db.query(Transaction)
        .join(Account, Transaction.account_id == Account.id)
        .filter(Account.user_id == user_id)
        .order_by(Transaction.date.desc(), Transaction.id.desc())
        .all()
    )


def get_transactions(user_id: int, account_id: int, db: Session) -> list[Transaction]:
    """
    List entries for one account, or for every account of the user
    when account_id is ALL_ACCOUNTS.
    """
    if account_id == ALL_ACCOUNTS:
        return get_transactions_by_user_id(user_id, db)
    return get_transactions_by_account_id(account_id, db)


def exists_by_id(transaction_id: int, db: Session) -> bool:
    return (
        db.query(Transaction.id).filter(Transaction.id == transaction_id).first()
        is not None
    )


# ------------------------------------------------------------------------------
# Create / Update / Delete
# ------------------------------------------------------------------------------
def create_transaction_record(tx_data: TransactionCreate, db: Session) -> Transaction:
    """
    Book a new entry on an existing account (404 if the account is unknown).
    """
    account = account_service.get_account_by_id(tx_data.account_id, db)
    if not account:
        raise HTTPException(
            status_code=404,
            detail=f"Account {tx_data.account_id} not found."
        )

    new_tx = Transaction(
        account=account,
        category=tx_data.category,
        date=tx_data.date,
        note=tx_data.note,
        value=tx_data.value,
    )
    db.add(new_tx)
    db.commit()
    db.refresh(new_tx)
    logger.info(f"Created transaction id={new_tx.id} on account_id={account.id}")
    return new_tx


def update_transaction_record(
    transaction_id: int, tx_data: TransactionUpdate, db: Session
) -> Transaction | None:
    """
    Copy category, date, note and value onto the stored entry.
    Returns None if there is no such transaction.
    """
    tx = get_transaction_by_id(transaction_id, db)
    if not tx:
        return None

    tx.category = tx_data.category
    tx.date = tx_data.date
    tx.note = tx_data.note
    tx.value = tx_data.value

    db.commit()
    db.refresh(tx)
    logger.info(f"Updated transaction id={tx.id}")
    return tx


def delete_transaction_record(transaction_id: int, db: Session) -> bool:
    tx = get_transaction_by_id(transaction_id, db)
    if not tx:
        return False
    db.delete(tx)
    db.commit()
    logger.info(f"Deleted transaction id={transaction_id}")
    return True
