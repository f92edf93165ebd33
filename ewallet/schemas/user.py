"""
ewallet/schemas/user.py

Pydantic schemas for user creation, update, and read.
The raw 'password' is accepted on input only; hashing happens
behind the scenes in the service layer and the hash is never returned.
"""

from pydantic import BaseModel, Field
from typing import Optional


class UserBase(BaseModel):
    """
    Shared user fields. 'login' is the unique identifier.
    """
    login: str = Field(min_length=1, max_length=255)


class UserCreate(UserBase):
    """
    For registering a new user with a raw 'password'.
    """
    password: str = Field(min_length=1)


class UserUpdate(BaseModel):
    """
    Fields for updating an existing user record. All optional.
    If 'password' is provided, it will be hashed before saving.
    """
    login: Optional[str] = Field(default=None, min_length=1, max_length=255)
    password: Optional[str] = Field(default=None, min_length=1)


class UserRead(UserBase):
    id: int

    class Config:
        from_attributes = True


class LoginRequest(BaseModel):
    """
    Schema for login JSON:
      { "login": "someName", "password": "somePass" }
    """
    login: str
    password: str
