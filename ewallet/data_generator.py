"""
ewallet/data_generator.py

Builds sample Users, Accounts, Transactions and Transfers for the
integration tests and the demo seed script. Entities are returned
unsaved; callers add and commit them.
"""

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import List

from ewallet.models.user import User
from ewallet.models.account import Account
from ewallet.models.transaction import Transaction
from ewallet.models.transfer import Transfer
from ewallet.schemas.transaction import TransactionCreate, TransactionUpdate
from ewallet.schemas.transfer import TransferCreate, TransferUpdate

TEST_LOGIN = "testUser"
TEST_PASSWORD = "testPassword"

ACCOUNT_NAMES = ["Cash", "Bank", "Savings"]
CATEGORIES = ["Food", "Transport", "Rent", "Entertainment", "Salary"]

_rng = random.Random(2024)


def _random_value(low: int = 1, high: int = 500) -> Decimal:
    return Decimal(_rng.randint(low * 100, high * 100)) / Decimal(100)


def _random_date(days_back: int = 90) -> date:
    return date.today() - timedelta(days=_rng.randint(0, days_back))


def generate_user(login: str = TEST_LOGIN, password: str = TEST_PASSWORD) -> User:
    user = User(login=login)
    user.set_password(password)
    return user


def generate_account_list(user: User) -> List[Account]:
    return [Account(user=user, name=name, currency="PLN") for name in ACCOUNT_NAMES]


def generate_transaction_list(account: Account, count: int = 5) -> List[Transaction]:
    transactions = []
    for i in range(count):
        category = CATEGORIES[i % len(CATEGORIES)]
        value = _random_value()
        if category != "Salary":
            value = -value
        transactions.append(Transaction(
            account=account,
            category=category,
            date=_random_date(),
            note=f"{category} #{i + 1}",
            value=value,
        ))
    return transactions


def generate_transfer_list(from_account: Account, to_account: Account) -> List[Transfer]:
    """
    Three transfers from -> to and one back, so both directions are populated.
    """
    transfers = [
        Transfer(
            from_account=from_account,
            to_account=to_account,
            note=f"Transfer #{i + 1}",
            value=_random_value(),
            date=_random_date(),
        )
        for i in range(3)
    ]
    transfers.append(Transfer(
        from_account=to_account,
        to_account=from_account,
        note="Transfer back",
        value=_random_value(),
        date=_random_date(),
    ))
    return transfers


def generate_transaction_create(account_id: int) -> TransactionCreate:
    return TransactionCreate(
        account_id=account_id,
        category="Food",
        date=date.today(),
        note="Groceries",
        value=Decimal("-42.50"),
    )


def generate_transaction_update(transaction: Transaction) -> TransactionUpdate:
    return TransactionUpdate(
        category=transaction.category,
        date=transaction.date,
        note=transaction.note,
        value=transaction.value,
    )


def generate_transfer_create(from_id: int, to_id: int) -> TransferCreate:
    return TransferCreate(
        from_account_id=from_id,
        to_account_id=to_id,
        note="Pocket money",
        value=Decimal("100.00"),
        date=date.today(),
    )


def generate_transfer_update(transfer: Transfer) -> TransferUpdate:
    return TransferUpdate(
        note=transfer.note,
        value=transfer.value,
        date=transfer.date,
    )
