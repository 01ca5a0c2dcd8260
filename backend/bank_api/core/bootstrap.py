# bank_api/core/bootstrap.py
"""
Bootstrap module for application initialization.
Primes the account-number counter from stored data and optionally seeds
demo accounts on startup.
"""
import logging

from bank_api.core.numbering import AccountNumberAllocator, allocator as default_allocator
from bank_api.models.account import Account
from bank_api.services import accounts as store

logger = logging.getLogger("uvicorn.error")

DEMO_ACCOUNTS = (
    ("John", "Doe", "password"),
    ("Jane", "Doe", "password"),
    ("Alice", "Bob", "password"),
)

async def prime_account_numbers(allocator: AccountNumberAllocator | None = None) -> int:
    """
    Move the counter past the highest number already in the table.

    Returns:
        The next number that will be handed out
    """
    allocator = allocator or default_allocator
    next_number = allocator.advance_past(await store.max_account_number())
    logger.info("[bootstrap] next account number=%s", next_number)
    return next_number

async def seed_demo_accounts(allocator: AccountNumberAllocator | None = None) -> list[Account]:
    """
    Create the three demo accounts through the regular creation path.
    Any failure propagates; callers treat it as fatal.
    """
    seeded = []
    for first_name, last_name, password in DEMO_ACCOUNTS:
        account = store.new_account(first_name, last_name, password, allocator=allocator)
        await store.create_account(account)
        seeded.append(account)
    logger.warning("[bootstrap] Seeded demo accounts -> numbers=%s",
                   [a.number for a in seeded])
    return seeded
