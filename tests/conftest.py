"""
Pytest configuration and shared fixtures.

Settings are read when app.core.config is first imported, so the test
environment is set up here before anything from the app package is loaded.
"""
import os
import tempfile

_TEST_DIR = tempfile.mkdtemp(prefix="resume-profile-tests-")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key-with-enough-length-for-hs256"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["ADMIN_PASSWORD"] = "admin-password"
os.environ["SECURITY_PERMIT_ALL"] = "false"
os.environ["API_PREFIX"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.db.base import AsyncSessionLocal, async_engine
from app.db.init_db import ensure_admin_user
from app.main import app
from app.models import Base

ADMIN_EMAIL = os.environ["ADMIN_EMAIL"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


# Database Setup
@pytest_asyncio.fixture
async def database():
    """Fresh schema (plus the bootstrap admin) for every test."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with AsyncSessionLocal() as session:
        await ensure_admin_user(session)

    yield

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # pooled aiosqlite connections are bound to this test's event loop
    await async_engine.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    """A session for calling services directly."""
    async with AsyncSessionLocal() as session:
        yield session


@pytest_asyncio.fixture
async def client(database):
    """In-process HTTP client for the ASGI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def token_codec():
    return app.state.token_codec


@pytest.fixture
def admin_headers(token_codec):
    """Bearer header for the bootstrap admin, signed directly to skip issuer pacing."""
    token = token_codec.encode(ADMIN_EMAIL, 60 * 60 * 1000)
    return {"Authorization": f"Bearer {token}"}


# Sample payloads
def profile_payload(email="jane.doe@example.com", **overrides):
    payload = {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": email,
        "phone": "+44 7700 900000",
        "location": "Dublin, Ireland",
        "linkedInUrl": "https://linkedin.com/in/janedoe",
        "githubUrl": "https://github.com/janedoe",
        "title": "Senior Software Engineer",
        "summary": "Backend engineer focused on APIs.",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def profile_data():
    return profile_payload()


@pytest_asyncio.fixture
async def profile(client, admin_headers, profile_data):
    """A persisted profile, as returned by the API."""
    response = await client.post("/profiles", json=profile_data, headers=admin_headers)
    assert response.status_code == 201, response.text
    return response.json()
