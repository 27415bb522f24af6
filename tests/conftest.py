"""
Global test fixtures for the Akira backend.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Test user payloads
- FastAPI app and clients with the database mocked
"""

import os
import sys
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, patch

# Cheap bcrypt cost for tests; must be set before akira.config is first read
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_akira_db(mock_async_mongo_client):
    """Provide mock akira_db with indexes and seeded roles, like the real app."""
    from akira.database.registry import create_indexes, seed_roles

    db = mock_async_mongo_client["akira_db"]
    await create_indexes(db)
    await seed_roles(db)
    yield db


@pytest_asyncio.fixture
async def mock_akira_db_without_roles(mock_async_mongo_client):
    """Provide mock akira_db with indexes but an empty roles collection."""
    from akira.database.registry import create_indexes

    db = mock_async_mongo_client["akira_db"]
    await create_indexes(db)
    yield db


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def register_payload() -> dict:
    """Registration body as the storefront sends it."""
    return {
        "name": "Ana",
        "surname": "Quispe",
        "email": "ana.quispe@example.com",
        "password": "SecurePassword123!",
        "numberCellphone": "987654321",
        "payment": "VISA-4242",
    }


@pytest.fixture
def login_payload(register_payload) -> dict:
    """Login body matching register_payload."""
    return {
        "email": register_payload["email"],
        "password": register_payload["password"],
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """
    Create FastAPI app for testing.

    Note: This imports the actual app and should be used with mocked
    database connections.
    """
    from akira.main import app
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    The startup bootstrap runs against an in-memory database.
    """
    from mongomock_motor import AsyncMongoMockClient

    startup_db = AsyncMongoMockClient()["akira_db"]

    with patch("akira.main.get_database", AsyncMock(return_value=startup_db)):
        with TestClient(app) as c:
            yield c


@pytest_asyncio.fixture
async def async_client(app, mock_akira_db):
    """
    Create an async test client whose AuthService uses the mock database.
    """
    from httpx import AsyncClient, ASGITransport

    from akira.dependencies.auth import get_auth_service
    from akira.services.auth_service import AuthService

    async def _get_auth_service():
        return AuthService.from_database(mock_akira_db)

    app.dependency_overrides[get_auth_service] = _get_auth_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def bearer():
    """Helper building the Authorization header for a bearer token."""
    def _bearer(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
    return _bearer
