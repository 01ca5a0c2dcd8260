# bank_api/api/deps.py
import logging
import re
from dataclasses import dataclass

import jwt
from fastapi import Header, status

from bank_api.core.errors import AccountNotFound, AuthError, StorageError
from bank_api.core.security import claim_account_number, decode_access_token
from bank_api.models.account import Account
from bank_api.schemas.account import INT64_MAX, INT64_MIN
from bank_api.services.accounts import get_account_by_id

logger = logging.getLogger("uvicorn.error")

# ASCII digits only; int() would also take " 1 ", "1_0" and non-ASCII digits
ACCOUNT_ID_RE = re.compile(r"[+-]?[0-9]+")
# accounts.id is a 32-bit serial column
ACCOUNT_PK_MIN, ACCOUNT_PK_MAX = -2**31, 2**31 - 1

@dataclass(frozen=True)
class AuthorizedAccount:
    """
    Result of a passed ownership check, handed to the route function.

    ``account_number`` is the verified claim; it always equals
    ``account.number``.
    """
    account: Account
    account_number: int

def _extract_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    token = authorization.strip()
    # Accept both a raw token and "Bearer <token>"
    if token.lower().startswith("bearer "):
        token = token.split(" ", 1)[1].strip()
    return token or None

async def require_account_owner(
    account_id: str,
    authorization: str | None = Header(default=None),
) -> AuthorizedAccount:
    """
    FastAPI dependency guarding ``/account/{account_id}``.

    Checks, in order, and stops at the first failure:
    1. Authorization header present            -> 401 "Missing token"
    2. Token verifies (HS256, secret, expiry)   -> 401 "Unauthorized"
    3. Path id is a 64-bit ASCII integer        -> 400 "Invalid account ID"
    4. Account with that id exists              -> 404 "Account not found"
       (ids outside the key column range cannot exist)
    5. accountNumber claim equals its number    -> 403 "Forbidden"

    Nothing is written on any path; the wrapped route only runs on success.

    Usage:
        @router.get("/account/{account_id}")
        async def get_account(owner: AuthorizedAccount = Depends(require_account_owner)):
            return owner.account
    """
    token = _extract_token(authorization)
    if token is None:
        raise AuthError("Missing token")

    try:
        claims = decode_access_token(token)
    except jwt.PyJWTError as exc:
        logger.info("[auth] token verification failed: %s", exc)
        raise AuthError("Unauthorized") from exc

    parsed_id = int(account_id) if ACCOUNT_ID_RE.fullmatch(account_id) else None
    if parsed_id is None or not INT64_MIN <= parsed_id <= INT64_MAX:
        logger.info("[auth] invalid account id in path: %r", account_id)
        raise AuthError("Invalid account ID", status.HTTP_400_BAD_REQUEST)

    if not ACCOUNT_PK_MIN <= parsed_id <= ACCOUNT_PK_MAX:
        logger.info("[auth] account id out of key range: %s", parsed_id)
        raise AuthError("Account not found", status.HTTP_404_NOT_FOUND)

    try:
        account = await get_account_by_id(parsed_id)
    except (AccountNotFound, StorageError) as exc:
        logger.info("[auth] account lookup failed: %s", exc.message)
        raise AuthError("Account not found", status.HTTP_404_NOT_FOUND) from exc

    claimed = claim_account_number(claims)
    if claimed is None or claimed != account.number:
        logger.info("[auth] ownership mismatch for account id=%s", parsed_id)
        raise AuthError("Forbidden", status.HTTP_403_FORBIDDEN)

    return AuthorizedAccount(account=account, account_number=claimed)
