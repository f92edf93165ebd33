#!/usr/bin/env python
"""
create_db.py

Initializes the eWallet database by calling 'create_tables()'
from 'ewallet/database.py'. Existing tables and rows are left untouched.

Usage:
    python ewallet/create_db.py
"""

import sys
import os
import logging

# Determine the project root, one level above this file's directory,
# so 'ewallet' imports work when the script is run directly.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from ewallet.database import create_tables, DATABASE_URL

logger = logging.getLogger("ewallet.create_db")

if __name__ == "__main__":
    try:
        logger.info(f"Creating database tables at {DATABASE_URL}")
        create_tables()
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        sys.exit(1)
