"""
ewallet/services/user.py

Handles user-level operations (list, lookup, create, update, delete).
Missing rows are reported as None/False; the router turns them into 404s.
"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ewallet.models.user import User
from ewallet.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def get_all_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()


def get_user_by_id(user_id: int, db: Session) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_login(login: str, db: Session) -> User | None:
    """
    Return a User by login, or None if not found.
    """
    return db.query(User).filter(User.login == login).first()


def exists_by_id(user_id: int, db: Session) -> bool:
    return db.query(User.id).filter(User.id == user_id).first() is not None


def create_user(user_data: UserCreate, db: Session) -> User:
    """
    Create a new User record, hashing the supplied password.
    A login that is already taken is rejected with 400.
    """
    if get_user_by_login(user_data.login, db):
        raise HTTPException(status_code=400, detail="Login already registered")

    new_user = User(login=user_data.login)
    _set_password_or_400(new_user, user_data.password)
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    logger.info(f"Created user id={new_user.id} login={new_user.login}")
    return new_user


def update_user(user_id: int, user_data: UserUpdate, db: Session) -> User | None:
    """
    Update the login and/or password of an existing user.
    If not found, return None.
    """
    db_user = get_user_by_id(user_id, db)
    if not db_user:
        return None

    if user_data.login is not None and user_data.login != db_user.login:
        if get_user_by_login(user_data.login, db):
            raise HTTPException(status_code=400, detail="Login already registered")
        db_user.login = user_data.login
    if user_data.password:
        _set_password_or_400(db_user, user_data.password)

    db.commit()
    db.refresh(db_user)
    logger.info(f"Updated user id={db_user.id}")
    return db_user


def delete_user(user_id: int, db: Session) -> bool:
    """
    Delete a User by ID together with its accounts,
    their transactions and transfers.
    """
    db_user = get_user_by_id(user_id, db)
    if not db_user:
        return False
    db.delete(db_user)
    db.commit()
    logger.info(f"Deleted user id={user_id}")
    return True


def authenticate(login: str, password: str, db: Session) -> User | None:
    """
    Return the user when login and password match, otherwise None.
    """
    user = get_user_by_login(login, db)
    if not user or not user.verify_password(password):
        return None
    return user


def _set_password_or_400(user: User, password: str) -> None:
    try:
        user.set_password(password)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
