"""
Shared pytest fixtures for the eWallet test suite.

Uses FastAPI TestClient with an isolated temporary database so tests
never touch the real database. Sample data is generated before each
test and removed after it.
"""

import os
import pytest
import tempfile
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from ewallet.database import Base, get_db
from ewallet.main import app

# Import all models so Base.metadata knows about them
from ewallet.models import User, Account, Transaction, Transfer

from ewallet import data_generator


@pytest.fixture(scope="session")
def test_engine():
    """Create a temporary SQLite database for the entire test session."""
    tmp = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
    tmp.close()
    engine = create_engine(
        f"sqlite:///{tmp.name}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()
    os.unlink(tmp.name)


@pytest.fixture(scope="session")
def session_factory(test_engine):
    return sessionmaker(bind=test_engine, autocommit=False, autoflush=False)


@pytest.fixture(scope="session")
def client(session_factory):
    """TestClient whose requests run against the temporary database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def test_db(session_factory):
    """Direct SQLAlchemy session for assertions against the database."""
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def generated_data(session_factory):
    """
    Saves a test user with accounts, transactions on every account and
    transfers between the first two accounts. Everything is deleted afterwards.
    """
    db = session_factory()
    try:
        user = data_generator.generate_user()
        db.add(user)
        account_list = data_generator.generate_account_list(user)
        db.add_all(account_list)
        for account in account_list:
            db.add_all(data_generator.generate_transaction_list(account))
        db.add_all(data_generator.generate_transfer_list(account_list[0], account_list[1]))
        db.commit()
        yield {
            "user_id": user.id,
            "account_ids": [a.id for a in account_list],
        }
    finally:
        db.rollback()
        db.query(Transfer).delete()
        db.query(Transaction).delete()
        db.query(Account).delete()
        db.query(User).delete()
        db.commit()
        db.close()
