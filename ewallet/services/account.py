"""
ewallet/services/account.py

Manages creation, update, deletion, and retrieval of Accounts.
Deleting an account also removes its transactions and any transfer
it takes part in.
"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ewallet.models.account import Account
from ewallet.schemas.account import AccountCreate, AccountUpdate
from ewallet.services import user as user_service

logger = logging.getLogger(__name__)


def get_all_accounts(db: Session) -> list[Account]:
    return db.query(Account).order_by(Account.id).all()


def get_account_by_id(account_id: int, db: Session) -> Account | None:
    """
    Return the Account with the specified ID, or None if it doesn't exist.
    """
    return db.query(Account).filter(Account.id == account_id).first()


def get_accounts_by_user_id(user_id: int, db: Session) -> list[Account]:
    """
    All accounts owned by the given user (empty for an unknown user).
    """
    return (
        db.query(Account)
        .filter(Account.user_id == user_id)
        .order_by(Account.id)
        .all()
    )


def exists_by_id(account_id: int, db: Session) -> bool:
    return db.query(Account.id).filter(Account.id == account_id).first() is not None


def create_account(account_data: AccountCreate, db: Session) -> Account:
    """
    Create a new Account for an existing user.

    Raises 404 when the owner doesn't exist and 400 when the user
    already has an account with that name.
    """
    if not user_service.exists_by_id(account_data.user_id, db):
        raise HTTPException(
            status_code=404,
            detail=f"User {account_data.user_id} not found."
        )
    _ensure_name_free(account_data.user_id, account_data.name, db)

    new_account = Account(
        user_id=account_data.user_id,
        name=account_data.name,
        currency=account_data.currency,
    )
    db.add(new_account)
    db.commit()
    db.refresh(new_account)
    logger.info(f"Created account id={new_account.id} for user_id={new_account.user_id}")
    return new_account


def update_account(account_id: int, account_data: AccountUpdate, db: Session) -> Account | None:
    """
    Update an existing account's name and/or currency.
    If account doesn't exist, return None.
    """
    account = get_account_by_id(account_id, db)
    if not account:
        return None

    if account_data.name is not None and account_data.name != account.name:
        _ensure_name_free(account.user_id, account_data.name, db)
        account.name = account_data.name
    if account_data.currency is not None:
        account.currency = account_data.currency

    db.commit()
    db.refresh(account)
    logger.info(f"Updated account id={account.id}")
    return account


def delete_account(account_id: int, db: Session) -> bool:
    account = get_account_by_id(account_id, db)
    if not account:
        return False

    db.delete(account)
    db.commit()
    logger.info(f"Deleted account id={account_id}")
    return True


def _ensure_name_free(user_id: int, name: str, db: Session) -> None:
    clash = (
        db.query(Account.id)
        .filter(Account.user_id == user_id, Account.name == name)
        .first()
    )
    if clash:
        raise HTTPException(
            status_code=400,
            detail=f"User {user_id} already has an account named '{name}'."
        )
