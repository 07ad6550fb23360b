"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from skillswap.config import Settings
from skillswap.dependencies import Stores
from skillswap.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings with demo seeding off so every test starts empty."""
    return Settings(seed_demo=False, log_format="console", environment="test")


@pytest.fixture
def stores() -> Stores:
    """Fresh stores for each test."""
    return Stores()


@pytest.fixture
def app(settings: Settings, stores: Stores) -> FastAPI:
    return create_app(settings, stores)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to a fresh app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def login(client: AsyncClient, username: str) -> dict:
    """Helper to log a user in via the API."""
    response = await client.post("/auth", json={"username": username})
    assert response.status_code == 200
    return response.json()


async def set_skills(client: AsyncClient, user_id: str, offered: list[str], wanted: list[str]) -> dict:
    """Helper to replace a user's skill lists via the API."""
    response = await client.post("/profile", json={
        "id": user_id,
        "skillsOffered": offered,
        "skillsWanted": wanted,
    })
    assert response.status_code == 200
    return response.json()
