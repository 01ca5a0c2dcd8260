# bank_api/api/routers/accounts.py
from fastapi import APIRouter, Depends, status

from bank_api.api.deps import AuthorizedAccount, require_account_owner
from bank_api.core.errors import error_response
from bank_api.core.security import create_access_token
from bank_api.schemas.account import AccountOut, CreateAccountRequest, DeletedOut
from bank_api.services import accounts as store

router = APIRouter(prefix="/account", tags=["accounts"])

@router.get("", response_model=list[AccountOut])
async def list_accounts():
    """
    List every account.

    Returns:
        list: Account objects (id, firstName, lastName, number, balance,
            createdAt), ordered by id. Password hashes are never included.
    """
    return [AccountOut.from_model(a) for a in await store.list_accounts()]

@router.post("", response_model=str)
async def create_account(body: CreateAccountRequest):
    """
    Open a new account and return its bearer token.

    A fresh account number is allocated, the password is hashed, the row is
    stored, and a token bound to the new number is signed.

    Returns:
        str: Signed JWT (a bare JSON string)

    Errors (as {"error": ...}):
        - 400: Malformed body
        - 500: Hashing, storage or signing failure
    """
    account = store.new_account(body.firstName, body.lastName, body.password)
    await store.create_account(account)
    return create_access_token(account.number)

@router.delete("", include_in_schema=False)
async def delete_without_id():
    # No id to act on
    return error_response(status.HTTP_405_METHOD_NOT_ALLOWED, "method not allowed DELETE")

@router.get("/{account_id}", response_model=AccountOut)
async def get_account(owner: AuthorizedAccount = Depends(require_account_owner)):
    """
    Fetch one account. Requires a token issued for that same account.

    Errors (as {"error": ...}):
        - 401: Missing or invalid token
        - 400: Non-integer id
        - 404: No such account
        - 403: Token belongs to another account
    """
    return AccountOut.from_model(owner.account)

@router.delete("/{account_id}", response_model=DeletedOut)
async def delete_account(owner: AuthorizedAccount = Depends(require_account_owner)):
    """
    Delete one account. Same authorization rules as GET.

    Returns:
        dict: {"deleted": <id>}
    """
    await store.delete_account(owner.account.id)
    return DeletedOut(deleted=owner.account.id)
