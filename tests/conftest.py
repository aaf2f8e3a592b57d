"""
SocialHub - Test Configuration (conftest.py)
=============================================

Shared pytest fixtures for the test suite.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── database: Empty schema in a throwaway SQLite file
    ├── db_session: AsyncSession bound to that database
    ├── storage: In-memory object store, installed as a dependency override
    ├── client: HTTPX AsyncClient talking to the FastAPI app
    ├── make_user: Factory that signs up a user and returns its token
    └── make_post: Factory that creates a post through the API
"""

import os
import tempfile
from typing import Optional

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="socialhub_test_"), "test.db"
)
os.environ["APP_ENV"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from socialhub.api.main import app
from socialhub.shared.adapters.storage_adapter import (
    StorageAdapter,
    StoredObject,
    get_storage_adapter,
)
from socialhub.shared.db.session import AsyncSessionLocal, engine
from socialhub.shared.models import Base


class FakeStorage(StorageAdapter):
    """Object store that keeps uploads in memory instead of calling S3."""

    def __init__(self) -> None:
        super().__init__(
            bucket="test-bucket",
            region="us-east-1",
            public_base_url="https://cdn.example.com",
            folder="appcrud",
        )
        self.objects: dict[str, bytes] = {}

    def upload_image(
        self,
        data: bytes,
        filename: str,
        content_type: Optional[str] = None,
    ) -> StoredObject:
        key = self.build_key(filename)
        self.objects[key] = data
        return StoredObject(
            key=key,
            url=self.public_url(key),
            content_type=content_type,
            size=len(data),
        )


# ══════════════════════════════════════════════════════════════════════════
# Database
# ══════════════════════════════════════════════════════════════════════════


@pytest_asyncio.fixture
async def database():
    """Fresh schema for every test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    """Session for service-level tests. Callers commit when needed."""
    async with AsyncSessionLocal() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# API
# ══════════════════════════════════════════════════════════════════════════


@pytest.fixture
def storage():
    """In-memory object store used by the upload endpoint."""
    fake = FakeStorage()
    app.dependency_overrides[get_storage_adapter] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_storage_adapter, None)


@pytest_asyncio.fixture
async def client(database, storage):
    """
    Async HTTP client routed straight into the ASGI app.

    Usage:
        async def test_index(client):
            response = await client.get("/api")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


@pytest.fixture
def make_user(client):
    """
    Factory that signs a user up and returns its id, token and auth headers.

    Usage:
        ada = await make_user("ada")
        await client.get("/auth/verify", headers=ada["headers"])
    """

    async def _make_user(username: str = "ada", password: str = "Passw0rd", **fields) -> dict:
        payload = {
            "username": username,
            "password": password,
            "name": fields.pop("name", username.title()),
            "email": fields.pop("email", f"{username}@example.com"),
        }
        response = await client.post("/auth/signup", json=payload)
        assert response.status_code == 200, response.text

        token = response.json()["authToken"]
        headers = {"Authorization": f"Bearer {token}"}

        claims = await client.get("/auth/verify", headers=headers)
        assert claims.status_code == 200, claims.text

        return {
            "id": claims.json()["id"],
            "username": username,
            "password": password,
            "token": token,
            "headers": headers,
        }

    return _make_user


@pytest.fixture
def make_post(client):
    """Factory that publishes a post as ``user`` and returns the response body."""

    async def _make_post(user: dict, content: str = "Hello world", image_url: Optional[str] = None) -> dict:
        payload = {"content": content}
        if image_url:
            payload["imageUrl"] = image_url
        response = await client.post(
            f"/create-post/{user['id']}",
            json=payload,
            headers=user["headers"],
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make_post
