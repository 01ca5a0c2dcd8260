# bank_api/main.py
import logging

from fastapi import FastAPI

from bank_api.config import settings
from bank_api.core.db import init_db, close_db
from bank_api.core.errors import register_error_handlers
from bank_api.core.bootstrap import prime_account_numbers, seed_demo_accounts

from bank_api.api.routers import accounts, login, transfer

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

register_error_handlers(app)

@app.on_event("startup")
async def on_startup():
    # Any failure here aborts startup; the server never serves half-initialized
    try:
        logger.info("[db] connecting to %s", settings.db_target())
        await init_db()
        await prime_account_numbers()
        if settings.seed_demo_accounts:
            await seed_demo_accounts()
    except Exception:
        logger.critical("[startup] initialization failed", exc_info=True)
        raise

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

app.include_router(login.router)
app.include_router(accounts.router)
app.include_router(transfer.router)

@app.get("/healthz")
def healthz():
    return {"ok": True}
