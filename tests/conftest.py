"""Test fixtures.

Each test gets a fresh app over an in-memory SQLite database.
HTTP tests go through httpx.AsyncClient + ASGITransport; every client has its
own cookie jar, so two clients are two independent sessions.
"""

from __future__ import annotations

from typing import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.orm import Session

from dailydiet.core.config import Settings
from dailydiet.db.session import init_db
from dailydiet.main import create_app
from dailydiet.services.sessions import SessionIdentity, resolve_session
from dailydiet.services.user_registry import UserRegistry


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://", create_tables_on_startup=False)


@pytest.fixture
def app(settings: Settings) -> Iterator[FastAPI]:
    application = create_app(settings)
    init_db(application.state.engine)
    yield application
    application.state.engine.dispose()


@pytest.fixture
def db(app: FastAPI) -> Iterator[Session]:
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def _make_identity(db: Session, name: str) -> SessionIdentity:
    _, token, _ = UserRegistry(db).register(name=name, email=f"{name.lower()}@example.com")
    return resolve_session(db, token)


@pytest.fixture
def identity(db: Session) -> SessionIdentity:
    return _make_identity(db, "Alice")


@pytest.fixture
def other_identity(db: Session) -> SessionIdentity:
    return _make_identity(db, "Bob")


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest_asyncio.fixture
async def other_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest_asyncio.fixture
async def registered_client(client: AsyncClient) -> AsyncClient:
    resp = await client.post("/users", json={"name": "Alice", "email": "alice@example.com"})
    assert resp.status_code == 201
    return client


@pytest_asyncio.fixture
async def other_registered_client(other_client: AsyncClient) -> AsyncClient:
    resp = await other_client.post("/users", json={"name": "Bob", "email": "bob@example.com"})
    assert resp.status_code == 201
    return other_client
