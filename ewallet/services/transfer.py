"""
ewallet/services/transfer.py

CRUD and finder queries for Transfers between two accounts.
"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ewallet.models.transfer import Transfer
from ewallet.schemas.transfer import TransferCreate, TransferUpdate
from ewallet.services import account as account_service

logger = logging.getLogger(__name__)


def get_transfer_by_id(transfer_id: int, db: Session) -> Transfer | None:
    return db.query(Transfer).filter(Transfer.id == transfer_id).first()


def get_transfers_from(account_id: int, db: Session) -> list[Transfer]:
    """
    Outgoing transfers of an account, newest first.
    """
    return (
        db.query(Transfer)
        .filter(Transfer.from_account_id == account_id)
        .order_by(Transfer.date.desc(), Transfer.id.desc())
        .all()
    )


def get_transfers_to(account_id: int, db: Session) -> list[Transfer]:
    """
    Incoming transfers of an account, newest first.
    """
    return (
        db.query(Transfer)
        .filter(Transfer.to_account_id == account_id)
        .order_by(Transfer.date.desc(), Transfer.id.desc())
        .all()
    )


def exists_by_id(transfer_id: int, db: Session) -> bool:
    return db.query(Transfer.id).filter(Transfer.id == transfer_id).first() is not None


def create_transfer_record(transfer_data: TransferCreate, db: Session) -> Transfer:
    """
    Create a transfer between two distinct, existing accounts.

    Raises:
        HTTPException(400): source and target are the same account.
        HTTPException(404): either account doesn't exist.
    """
    if transfer_data.from_account_id == transfer_data.to_account_id:
        raise HTTPException(
            status_code=400,
            detail="Cannot transfer from an account to itself."
        )

    from_account = account_service.get_account_by_id(transfer_data.from_account_id, db)
    if not from_account:
        raise HTTPException(
            status_code=404,
            detail=f"Account {transfer_data.from_account_id} not found."
        )
    to_account = account_service.get_account_by_id(transfer_data.to_account_id, db)
    if not to_account:
        raise HTTPException(
            status_code=404,
            detail=f"Account {transfer_data.to_account_id} not found."
        )

    new_transfer = Transfer(
        from_account=from_account,
        to_account=to_account,
        note=transfer_data.note,
        value=transfer_data.value,
        date=transfer_data.date,
    )
    db.add(new_transfer)
    db.commit()
    db.refresh(new_transfer)
    logger.info(
        f"Created transfer id={new_transfer.id} "
        f"{from_account.id} -> {to_account.id} value={new_transfer.value}"
    )
    return new_transfer


def update_transfer_record(
    transfer_id: int, transfer_data: TransferUpdate, db: Session
) -> Transfer | None:
    """
    Copy note, value and date onto the stored transfer.
    Returns None if there is no such transfer.
    """
    transfer = get_transfer_by_id(transfer_id, db)
    if not transfer:
        return None

    transfer.note = transfer_data.note
    transfer.value = transfer_data.value
    transfer.date = transfer_data.date

    db.commit()
    db.refresh(transfer)
    logger.info(f"Updated transfer id={transfer.id}")
    return transfer


def delete_transfer_record(transfer_id: int, db: Session) -> bool:
    transfer = get_transfer_by_id(transfer_id, db)
    if not transfer:
        return False
    db.delete(transfer)
    db.commit()
    logger.info(f"Deleted transfer id={transfer_id}")
    return True
