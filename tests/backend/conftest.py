import os

TEST_DB_URL = "sqlite://:memory:"
TEST_JWT_SECRET = "test-signing-secret"
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ["JWT_SECRET"] = TEST_JWT_SECRET
os.environ["PASSWORD_HASH_ROUNDS"] = "1"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from bank_api.config import settings
from bank_api.core import db as db_module
from bank_api.main import app

settings.database_url = TEST_DB_URL
settings.jwt_secret = TEST_JWT_SECRET
db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest.fixture(autouse=True)
def _signing_secret():
    """Restore the signing secret for tests that change it."""
    settings.jwt_secret = TEST_JWT_SECRET
    yield
    settings.jwt_secret = TEST_JWT_SECRET


@pytest_asyncio.fixture
async def db():
    """Fresh database without an HTTP client, for service-level tests."""
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client():
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    await _init_test_db()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def open_account(client):
    """
    Factory fixture: create an account over HTTP and return (id, number, token).
    """
    from bank_api.core.security import decode_access_token
    from bank_api.models.account import Account

    async def _open_account(first_name: str = "John", last_name: str = "Doe",
                            password: str = "secret") -> tuple[int, int, str]:
        resp = await client.post(
            "/account",
            json={"firstName": first_name, "lastName": last_name, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()
        number = decode_access_token(token)["accountNumber"]
        account = await Account.get(number=number)
        return account.id, number, token

    return _open_account
