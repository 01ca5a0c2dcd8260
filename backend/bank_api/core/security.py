# bank_api/core/security.py
"""
Security module for account credentials and bearer tokens.
Handles password hashing, JWT token creation/validation and the
account-number claim conversion used by the ownership check.
"""
import datetime as dt
import math

import jwt  # PyJWT
from passlib.context import CryptContext
from passlib.exc import PasswordSizeError

from bank_api.config import settings
from bank_api.core.errors import HashingError, SigningError

# Password hashing context
# Argon2 is slow and salted; time cost comes from PASSWORD_HASH_ROUNDS
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__rounds=settings.password_hash_rounds,
)

JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256); the only one accepted on decode
ACCOUNT_NUMBER_CLAIM = "accountNumber"

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)

    Raises:
        HashingError: If the password exceeds the hasher's size limit or the
            backend fails
    """
    try:
        return pwd_context.hash(plain)
    except PasswordSizeError as exc:
        raise HashingError(f"password too long: {exc}") from exc
    except (ValueError, TypeError) as exc:
        raise HashingError(f"password hashing failed: {exc}") from exc

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Not called by /login yet, which only looks the account up; kept for the
    password check once that endpoint authenticates.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain, hashed)

def _signing_secret() -> str:
    secret = settings.jwt_secret
    if not secret:
        raise SigningError("signing secret is not configured")
    return secret

def create_access_token(account_number: int) -> str:
    """
    Create a JWT bearer token bound to an account number.

    Token payload includes:
        - accountNumber: The owning account's number
        - expiresAt: Expiration as unix seconds
        - iat / exp: Registered claims, so expiry is enforced on decode

    Raises:
        SigningError: If JWT_SECRET is not set or encoding fails
    """
    secret = _signing_secret()
    now = dt.datetime.now(dt.timezone.utc)
    expires = now + dt.timedelta(hours=settings.token_ttl_hours)
    payload = {
        ACCOUNT_NUMBER_CLAIM: account_number,
        "expiresAt": int(expires.timestamp()),
        "iat": now,
        "exp": expires,
    }
    try:
        return jwt.encode(payload, secret, algorithm=JWT_ALG)
    except (jwt.PyJWTError, TypeError, ValueError) as exc:
        raise SigningError(f"token signing failed: {exc}") from exc

def decode_access_token(token: str) -> dict:
    """
    Decode and validate a JWT bearer token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid, malformed or signed with
            another key or algorithm
        SigningError: If JWT_SECRET is not set
    """
    return jwt.decode(token, _signing_secret(), algorithms=[JWT_ALG])

def claim_account_number(claims: dict) -> int | None:
    """
    Read the account-number claim as an exact integer.

    JSON decoders may hand the claim back as a float. A float is accepted only
    when it is integral and survives the int round-trip unchanged; anything
    else returns None and the caller must treat it as forbidden.
    """
    value = claims.get(ACCOUNT_NUMBER_CLAIM)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        number = int(value)
        if float(number) != value:
            return None
        return number
    return None
