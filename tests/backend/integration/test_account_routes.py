import pytest

from bank_api.core.security import decode_access_token


pytestmark = pytest.mark.asyncio


async def test_create_then_fetch_own_account(client, open_account):
    account_id, number, token = await open_account("John", "Doe", "secret")

    resp = await client.get(f"/account/{account_id}", headers={"Authorization": token})
    body = resp.json()
    assert resp.status_code == 200
    assert body["firstName"] == "John"
    assert body["lastName"] == "Doe"
    assert body["number"] == number
    assert body["balance"] == 0.0
    assert "encryptedPassword" not in body
    assert "encrypted_password" not in body


async def test_bearer_prefix_is_accepted(client, open_account):
    account_id, _, token = await open_account()
    resp = await client.get(f"/account/{account_id}", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200


async def test_create_returns_bare_token_string(client):
    resp = await client.post(
        "/account",
        json={"firstName": "Jane", "lastName": "Doe", "password": "pw"},
    )
    assert resp.status_code == 200
    token = resp.json()
    assert isinstance(token, str)
    assert isinstance(decode_access_token(token)["accountNumber"], int)


async def test_sequential_creation_increments_numbers(client, open_account):
    _, first, _ = await open_account("A", "One")
    _, second, _ = await open_account("B", "Two")
    assert second == first + 1


async def test_list_accounts(client, open_account):
    empty = await client.get("/account")
    assert empty.status_code == 200
    assert empty.json() == []

    await open_account("John", "Doe")
    await open_account("Jane", "Doe")
    resp = await client.get("/account")
    items = resp.json()
    assert resp.status_code == 200
    assert [a["firstName"] for a in items] == ["John", "Jane"]
    assert all("password" not in key.lower() for item in items for key in item)


async def test_delete_then_fetch_is_not_found(client, open_account):
    account_id, _, token = await open_account()
    headers = {"Authorization": token}

    delete_resp = await client.delete(f"/account/{account_id}", headers=headers)
    assert delete_resp.status_code == 200
    assert delete_resp.json() == {"deleted": account_id}

    missing = await client.get(f"/account/{account_id}", headers=headers)
    assert missing.status_code == 404
    assert missing.json() == {"error": "Account not found"}


async def test_delete_without_id_is_rejected(client, open_account):
    await open_account()
    resp = await client.delete("/account")
    assert resp.status_code == 405
    assert resp.json() == {"error": "method not allowed DELETE"}
    assert len((await client.get("/account")).json()) == 1


async def test_unsupported_method_uses_error_envelope(client):
    resp = await client.put("/account", json={})
    assert resp.status_code == 405
    assert "error" in resp.json()


async def test_malformed_body_is_bad_request(client):
    resp = await client.post(
        "/account",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "error" in resp.json()


async def test_missing_fields_is_bad_request(client):
    resp = await client.post("/account", json={"firstName": "John"})
    assert resp.status_code == 400
    assert "lastName" in resp.json()["error"] or "password" in resp.json()["error"]


async def test_oversized_password_is_server_error(client):
    resp = await client.post(
        "/account",
        json={"firstName": "John", "lastName": "Doe", "password": "x" * 5000},
    )
    assert resp.status_code == 500
    assert resp.json()["error"].startswith("password too long")


async def test_create_without_secret_is_server_error(client):
    from bank_api.config import settings

    settings.jwt_secret = None
    resp = await client.post(
        "/account",
        json={"firstName": "John", "lastName": "Doe", "password": "pw"},
    )
    assert resp.status_code == 500
    assert resp.json() == {"error": "signing secret is not configured"}


async def test_healthz(client):
    resp = await client.get("/healthz")
    assert resp.json() == {"ok": True}
