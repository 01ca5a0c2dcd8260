# bank_api/services/accounts.py
"""
Account creation and the storage operations the routes rely on.

``new_account`` builds an unsaved ``Account`` without touching the database;
the remaining coroutines are thin wrappers over Tortoise that turn "no row"
into ``AccountNotFound`` and ORM failures into ``StorageError``.
"""
import datetime as dt
import logging

from tortoise.exceptions import BaseORMException

from bank_api.core.errors import AccountNotFound, StorageError
from bank_api.core.numbering import AccountNumberAllocator, allocator as default_allocator
from bank_api.core.security import hash_password
from bank_api.models.account import Account

logger = logging.getLogger("uvicorn.error")

def new_account(
    first_name: str,
    last_name: str,
    password: str,
    allocator: AccountNumberAllocator | None = None,
) -> Account:
    """
    Build a new account with a fresh number and a hashed password.

    The number is taken before hashing so the allocator lock is never held
    across the slow hash. A number consumed by a failed hash is simply skipped.

    Raises:
        HashingError: If the password cannot be hashed
    """
    number = (allocator or default_allocator).next()
    encrypted_password = hash_password(password)
    return Account(
        first_name=first_name,
        last_name=last_name,
        number=number,
        encrypted_password=encrypted_password,
        balance=0.0,
        created_at=dt.datetime.now(dt.timezone.utc),
    )

async def create_account(account: Account) -> Account:
    try:
        await account.save()
    except BaseORMException as exc:
        raise StorageError(f"could not create account {account.number}: {exc}") from exc
    logger.info("[accounts] created account id=%s number=%s", account.id, account.number)
    return account

async def update_account(account: Account) -> Account:
    """Persist changes to an existing account. No route mutates accounts yet."""
    try:
        await account.save()
    except BaseORMException as exc:
        raise StorageError(f"could not update account {account.id}: {exc}") from exc
    return account

async def list_accounts() -> list[Account]:
    try:
        return await Account.all().order_by("id")
    except BaseORMException as exc:
        raise StorageError(f"could not list accounts: {exc}") from exc

async def get_account_by_id(account_id: int) -> Account:
    try:
        account = await Account.get_or_none(id=account_id)
    except BaseORMException as exc:
        raise StorageError(f"could not load account {account_id}: {exc}") from exc
    if account is None:
        raise AccountNotFound(f"account {account_id} not found")
    return account

async def get_account_by_number(number: int) -> Account:
    try:
        account = await Account.get_or_none(number=number)
    except BaseORMException as exc:
        raise StorageError(f"could not load account {number}: {exc}") from exc
    if account is None:
        raise AccountNotFound(f"account {number} not found")
    return account

async def delete_account(account_id: int) -> int:
    """Delete by id; returns the number of rows removed (0 or 1)."""
    try:
        return await Account.filter(id=account_id).delete()
    except BaseORMException as exc:
        raise StorageError(f"could not delete account {account_id}: {exc}") from exc

async def max_account_number() -> int | None:
    """Highest stored account number, or None for an empty table."""
    try:
        top = await Account.all().order_by("-number").first()
    except BaseORMException as exc:
        raise StorageError(f"could not read account numbers: {exc}") from exc
    return top.number if top else None
