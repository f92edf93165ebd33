# FILE: ewallet/routers/user.py

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session
from typing import List

from ewallet.schemas.user import UserCreate, UserRead, UserUpdate
from ewallet.services import user as user_service
from ewallet.database import get_db

router = APIRouter(tags=["user"])


@router.post("/register", response_model=UserRead)
def register_user(user: UserCreate, db: Session = Depends(get_db)):
    """
    Register a new user: POST /api/user/register

    The password is hashed by the service layer; a taken login gives 400.
    """
    return user_service.create_user(user, db)


@router.get("/", response_model=List[UserRead])
def get_users(db: Session = Depends(get_db)):
    return user_service.get_all_users(db)


@router.get("/login/{login}", response_model=UserRead)
def get_user_by_login(login: str, db: Session = Depends(get_db)):
    user = user_service.get_user_by_login(login, db)
    if not user:
        raise HTTPException(status_code=404, detail="User not found.")
    return user


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = user_service.get_user_by_id(user_id, db)
    if not user:
        raise HTTPException(status_code=404, detail="User not found.")
    return user


@router.patch("/{user_id}", response_model=UserRead)
def patch_user(user_id: int, user_data: UserUpdate, db: Session = Depends(get_db)):
    """
    Partially update a user's login or password: PATCH /api/user/{user_id}
    """
    updated_user = user_service.update_user(user_id, user_data, db)
    if not updated_user:
        raise HTTPException(status_code=404, detail="User not found.")
    return updated_user


@router.delete("/{user_id}", status_code=204)
def delete_user(user_id: int, request: Request, db: Session = Depends(get_db)):
    """
    Delete a user by ID: DELETE /api/user/{user_id}

    Accounts, transactions and transfers of the user go with it.
    The caller's session is cleared afterward.
    """
    success = user_service.delete_user(user_id, db)
    if not success:
        raise HTTPException(status_code=404, detail="User not found.")

    request.session.clear()
    return
