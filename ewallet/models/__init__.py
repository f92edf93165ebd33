# ewallet/models/__init__.py

"""
Centralizes model imports so every table is registered on Base.metadata
as soon as the models package is imported.
"""

from ewallet.database import Base

# Models from user.py
from .user import User

# Models from account.py
from .account import Account

# Models from transaction.py
from .transaction import Transaction

# Models from transfer.py
from .transfer import Transfer
