"""
ewallet/routers/transaction.py

Router for Transaction endpoints, mounted under /api/transaction.

 - GET    /{user_id}/{account_id}  entries of one account, or of all the
                                   user's accounts when account_id is 0
 - GET    /{transaction_id}        a single entry
 - POST   /                        book a new entry
 - PUT    /{transaction_id}        overwrite category/date/note/value
 - DELETE /{transaction_id}        remove an entry
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import List
from sqlalchemy.orm import Session

from ewallet.schemas.transaction import (
    TransactionCreate,
    TransactionUpdate,
    TransactionRead
)
from ewallet.services import transaction as tx_service
from ewallet.database import get_db

router = APIRouter(tags=["transaction"])


@router.get("/{user_id}/{account_id}", response_model=List[TransactionRead])
def list_transactions(user_id: int, account_id: int, db: Session = Depends(get_db)):
    """
    List transactions of the given account. Passing account_id=0 lists the
    transactions of every account owned by user_id. Unknown ids give [].
    """
    return tx_service.get_transactions(user_id, account_id, db)


@router.get("/{transaction_id}", response_model=TransactionRead)
def get_transaction(transaction_id: int, db: Session = Depends(get_db)):
    tx = tx_service.get_transaction_by_id(transaction_id, db)
    if not tx:
        raise HTTPException(status_code=404, detail="Transaction not found.")
    return tx


@router.post("/", response_model=TransactionRead)
def create_transaction(tx: TransactionCreate, db: Session = Depends(get_db)):
    """
    Create a transaction on tx.account_id; 404 if that account doesn't exist.
    """
    return tx_service.create_transaction_record(tx, db)


@router.put("/{transaction_id}", response_model=TransactionRead)
def update_transaction(transaction_id: int, tx: TransactionUpdate, db: Session = Depends(get_db)):
    updated_tx = tx_service.update_transaction_record(transaction_id, tx, db)
    if not updated_tx:
        raise HTTPException(status_code=404, detail="Transaction not found.")
    return updated_tx


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    success = tx_service.delete_transaction_record(transaction_id, db)
    if not success:
        raise HTTPException(status_code=404, detail="Transaction not found.")
    return
