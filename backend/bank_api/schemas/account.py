# bank_api/schemas/account.py
"""
Pydantic schemas for account, login and transfer endpoints.
Field names follow the public JSON contract (camelCase).
"""
import datetime as dt

from pydantic import BaseModel, Field

INT64_MIN, INT64_MAX = -2**63, 2**63 - 1

class CreateAccountRequest(BaseModel):
    """Request body for POST /account."""
    firstName: str
    lastName: str
    password: str  # Plain text, hashed server-side

class LoginRequest(BaseModel):
    """Request body for POST /login."""
    number: int = Field(ge=INT64_MIN, le=INT64_MAX)  # Account number (bigint column)
    password: str

class TransferRequest(BaseModel):
    """Request body for POST /transfer (echoed back, nothing is moved)."""
    toAccountId: int
    amount: int

class AccountOut(BaseModel):
    """
    Account as returned by the API.
    The password hash is never part of it.
    """
    id: int
    firstName: str
    lastName: str
    number: int
    balance: float
    createdAt: dt.datetime

    @classmethod
    def from_model(cls, account) -> "AccountOut":
        return cls(
            id=account.id,
            firstName=account.first_name,
            lastName=account.last_name,
            number=account.number,
            balance=account.balance,
            createdAt=account.created_at,
        )

class DeletedOut(BaseModel):
    deleted: int
