#!/usr/bin/env python
"""
ewallet/main.py

Sets up the FastAPI application for eWallet, a personal finance backend.

Key Roles:
 - Loads environment variables & configures session-based authentication
 - Adds CORS middleware for frontend integration
 - Includes 'user', 'account', 'transaction' and 'transfer' routers
 - Maps database integrity errors to 400 responses
"""

import os
import logging
from dotenv import load_dotenv
from fastapi import FastAPI, Request, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ewallet.database import create_tables, get_db
from ewallet.routers import user, account, transaction, transfer
from ewallet.schemas.user import LoginRequest, UserRead
from ewallet.services import user as user_service

# Load environment variables from a .env file at the project root
load_dotenv()

logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# Session Configuration
# ---------------------------------------------------------
SECRET_KEY = os.getenv("SECRET_KEY", "default_secret_key")  # Fallback if not set

# Default CORS origins if none specified (dev environment)
default_origins = (
    "http://127.0.0.1:3000,"
    "http://localhost:3000,"
    "http://127.0.0.1:5173,"
    "http://localhost:5173,"
    "http://127.0.0.1:8000,"
    "http://localhost:8000"
)
raw_origins = os.getenv("CORS_ALLOW_ORIGINS", default_origins)
ALLOWED_ORIGINS = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

# ---------------------------------------------------------
# Initialize the FastAPI application
# ---------------------------------------------------------
app = FastAPI(
    title="eWallet API",
    description=(
        "API for managing users, accounts, income/expense transactions "
        "and transfers between accounts. Session-based auth."
    ),
    version="1.0",
    redirect_slashes=True
)

app.add_middleware(
    SessionMiddleware,
    secret_key=SECRET_KEY,
    session_cookie="ewallet_session_id",
    https_only=os.getenv("SESSION_HTTPS_ONLY", "false").lower() == "true"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup_event():
    """
    Ensures tables are created (if not already) when FastAPI starts.
    This won't delete or overwrite existing data; it's idempotent.
    """
    create_tables()


@app.exception_handler(IntegrityError)
def integrity_error_handler(request: Request, exc: IntegrityError):
    """
    Constraint violations that slipped past the service checks.
    The request session is rolled back when get_db closes it.
    """
    logger.error(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(status_code=400, content={"detail": "Database constraint violated."})

# ---------------------------------------------------------
# Routers
# ---------------------------------------------------------
app.include_router(user.router, prefix="/api/user", tags=["user"])
app.include_router(account.router, prefix="/api/account", tags=["account"])
app.include_router(transaction.router, prefix="/api/transaction", tags=["transaction"])
app.include_router(transfer.router, prefix="/api/transfer", tags=["transfer"])

# ---------------------------------------------------------
# Session-Based Auth
# ---------------------------------------------------------
def get_current_user_id(request: Request) -> int:
    """
    Looks up 'user_id' in request.session; raises 401 if absent.
    """
    user_id = request.session.get("user_id")
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user_id


@app.post("/api/login")
def login(login_req: LoginRequest, request: Request, db: Session = Depends(get_db)):
    """
    Session-based login:
      1) Accepts JSON { "login": "...", "password": "..." }
      2) Looks up the user and checks the bcrypt hash
      3) If valid, stores user.id in the session
    """
    found = user_service.authenticate(login_req.login, login_req.password, db)
    if not found:
        # Don't reveal which part is invalid
        logger.info(f"Failed login attempt for '{login_req.login}'")
        raise HTTPException(status_code=401, detail="Invalid login or password.")

    request.session["user_id"] = found.id
    return {"detail": f"Logged in as {found.login}"}


@app.post("/api/logout")
def logout(request: Request):
    request.session.clear()
    return {"detail": "Logged out successfully"}


@app.get("/api/me", response_model=UserRead)
def read_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    current = user_service.get_user_by_id(user_id, db)
    if not current:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return current


@app.get("/")
def read_root():
    """
    Basic root path to confirm the API is running.
    """
    return {"message": "Welcome to eWallet!"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "ewallet.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )
