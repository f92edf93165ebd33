"""
ewallet/routers/transfer.py

Router for Transfer endpoints, mounted under /api/transfer.
Outgoing and incoming transfers of an account are listed separately.
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import List
from sqlalchemy.orm import Session

from ewallet.schemas.transfer import TransferCreate, TransferUpdate, TransferRead
from ewallet.services import transfer as transfer_service
from ewallet.database import get_db

router = APIRouter(tags=["transfer"])


@router.get("/from/{account_id}", response_model=List[TransferRead])
def list_outgoing(account_id: int, db: Session = Depends(get_db)):
    """
    Transfers whose 'from' side is account_id.
    """
    return transfer_service.get_transfers_from(account_id, db)


@router.get("/to/{account_id}", response_model=List[TransferRead])
def list_incoming(account_id: int, db: Session = Depends(get_db)):
    """
    Transfers whose 'to' side is account_id.
    """
    return transfer_service.get_transfers_to(account_id, db)


@router.get("/{transfer_id}", response_model=TransferRead)
def get_transfer(transfer_id: int, db: Session = Depends(get_db)):
    transfer = transfer_service.get_transfer_by_id(transfer_id, db)
    if not transfer:
        raise HTTPException(status_code=404, detail="Transfer not found.")
    return transfer


@router.post("/", response_model=TransferRead)
def create_transfer(transfer: TransferCreate, db: Session = Depends(get_db)):
    return transfer_service.create_transfer_record(transfer, db)


@router.put("/{transfer_id}", response_model=TransferRead)
def update_transfer(transfer_id: int, transfer: TransferUpdate, db: Session = Depends(get_db)):
    """
    Overwrite note, value and date. The account pair never changes.
    """
    updated = transfer_service.update_transfer_record(transfer_id, transfer, db)
    if not updated:
        raise HTTPException(status_code=404, detail="Transfer not found.")
    return updated


@router.delete("/{transfer_id}", status_code=204)
def delete_transfer(transfer_id: int, db: Session = Depends(get_db)):
    success = transfer_service.delete_transfer_record(transfer_id, db)
    if not success:
        raise HTTPException(status_code=404, detail="Transfer not found.")
    return
