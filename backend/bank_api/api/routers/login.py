# bank_api/api/routers/login.py
import logging

from fastapi import APIRouter

from bank_api.schemas.account import LoginRequest
from bank_api.services import accounts as store

logger = logging.getLogger("uvicorn.error")

router = APIRouter(tags=["auth"])

@router.post("/login", response_model=LoginRequest)
async def login(payload: LoginRequest):
    """
    Look up an account by number and echo the request.

    The password is not checked and no token is issued; tokens only come from
    POST /account for now. An unknown number answers 500 with
    {"error": "account <number> not found"}.
    """
    account = await store.get_account_by_number(payload.number)
    logger.info("[login] login attempt for account number=%s id=%s", account.number, account.id)
    return payload
