import pytest


@pytest.mark.asyncio
async def test_register_without_cookie_mints_session(client):
    resp = await client.post("/users", json={"name": "Alice", "email": "alice@example.com"})

    assert resp.status_code == 201
    assert resp.content == b""
    set_cookie = resp.headers["set-cookie"]
    assert set_cookie.startswith("sessionId=")
    assert "Max-Age=604800" in set_cookie
    assert "Path=/" in set_cookie
    assert client.cookies.get("sessionId")


@pytest.mark.asyncio
async def test_registered_session_lists_its_user(registered_client):
    resp = await registered_client.get("/users")

    assert resp.status_code == 200
    users = resp.json()["users"]
    assert len(users) == 1
    assert users[0]["name"] == "Alice"
    assert users[0]["email"] == "alice@example.com"
    assert users[0]["sessionId"] == registered_client.cookies.get("sessionId")
    assert {"id", "createdAt", "updatedAt"} <= users[0].keys()


@pytest.mark.asyncio
async def test_list_users_without_session_is_unauthorized(client):
    resp = await client.get("/users")

    assert resp.status_code == 401
    assert resp.json() == {"detail": "Unauthorized."}


@pytest.mark.asyncio
async def test_list_users_with_unknown_session_is_unauthorized(client):
    client.cookies.set("sessionId", "not-a-real-session")
    resp = await client.get("/users")

    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_second_registration_reuses_session(registered_client):
    token = registered_client.cookies.get("sessionId")

    resp = await registered_client.post("/users", json={"name": "Alice 2", "email": "alice2@example.com"})
    assert resp.status_code == 201
    assert "set-cookie" not in resp.headers
    assert registered_client.cookies.get("sessionId") == token

    users = (await registered_client.get("/users")).json()["users"]
    assert [u["name"] for u in users] == ["Alice", "Alice 2"]


@pytest.mark.asyncio
async def test_sessions_do_not_see_each_other(registered_client, other_registered_client):
    alice = (await registered_client.get("/users")).json()["users"]
    bob = (await other_registered_client.get("/users")).json()["users"]

    assert [u["name"] for u in alice] == ["Alice"]
    assert [u["name"] for u in bob] == ["Bob"]


@pytest.mark.asyncio
async def test_register_requires_name_and_email(client):
    resp = await client.post("/users", json={"name": "Alice"})

    assert resp.status_code == 400
    assert resp.json()["detail"][0]["loc"] == ["body", "email"]
    assert "set-cookie" not in resp.headers
