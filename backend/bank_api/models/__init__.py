# bank_api/models/__init__.py
"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- Account: Bank account with owner name, number, password hash and balance
"""
from .account import Account
