"""
ewallet/routers/account.py

FastAPI router handling Account endpoints, mounted under /api/account.
"""

from fastapi import APIRouter, Depends, HTTPException
from typing import List
from ewallet.schemas.account import AccountCreate, AccountUpdate, AccountRead
from ewallet.services import account as account_service
from ewallet.database import get_db

router = APIRouter(tags=["account"])


@router.get("/", response_model=List[AccountRead])
def list_accounts(db = Depends(get_db)):
    return account_service.get_all_accounts(db)


@router.get("/user/{user_id}", response_model=List[AccountRead])
def list_user_accounts(user_id: int, db = Depends(get_db)):
    """
    Retrieve the accounts owned by user_id ([] for an unknown user).
    """
    return account_service.get_accounts_by_user_id(user_id, db)


@router.get("/{account_id}", response_model=AccountRead)
def get_account(account_id: int, db = Depends(get_db)):
    account = account_service.get_account_by_id(account_id, db)
    if not account:
        raise HTTPException(status_code=404, detail="Account not found.")
    return account


@router.post("/", response_model=AccountRead)
def create_account(account: AccountCreate, db = Depends(get_db)):
    """
    Create a new Account. The request body (AccountCreate) includes:
      - user_id: the owner
      - name: e.g. "Cash", "Savings"
      - currency: 3-letter code
    """
    return account_service.create_account(account, db)


@router.put("/{account_id}", response_model=AccountRead)
def update_account(account_id: int, account: AccountUpdate, db = Depends(get_db)):
    updated_account = account_service.update_account(account_id, account, db)
    if not updated_account:
        raise HTTPException(status_code=404, detail="Account not found.")
    return updated_account


@router.delete("/{account_id}", status_code=204)
def delete_account(account_id: int, db = Depends(get_db)):
    """
    Delete an Account by ID, along with its transactions and transfers.
    """
    success = account_service.delete_account(account_id, db)
    if not success:
        raise HTTPException(status_code=404, detail="Account not found.")
    return
