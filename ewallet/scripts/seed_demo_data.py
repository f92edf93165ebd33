# ewallet/scripts/seed_demo_data.py

"""
Seeds a demo user with three accounts, a handful of transactions on each
and transfers between the first two accounts.

Usage:
    python ewallet/scripts/seed_demo_data.py [login] [password]
"""

import sys
import logging
from pathlib import Path

# Dynamically add project root to sys.path
ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from ewallet.database import SessionLocal, create_tables
from ewallet.services.user import get_user_by_login
from ewallet import data_generator

logger = logging.getLogger("ewallet.seed_demo_data")


def seed_demo_data(login: str = "demo", password: str = "demo") -> int:
    """
    Insert the demo data set and return the new user's id.
    Refuses to run twice for the same login.
    """
    create_tables()
    db = SessionLocal()
    try:
        if get_user_by_login(login, db):
            raise SystemExit(f"User '{login}' already exists; nothing seeded.")

        user = data_generator.generate_user(login, password)
        db.add(user)
        accounts = data_generator.generate_account_list(user)
        db.add_all(accounts)
        for account in accounts:
            db.add_all(data_generator.generate_transaction_list(account))
        db.add_all(data_generator.generate_transfer_list(accounts[0], accounts[1]))
        db.commit()
        logger.info(f"Seeded user '{login}' (id={user.id}) with {len(accounts)} accounts.")
        return user.id
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_demo_data(*sys.argv[1:3])
