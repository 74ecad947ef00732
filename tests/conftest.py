"""
Shared pytest fixtures.

The API is built through `create_app` with in-memory collaborators, so
endpoint tests need neither a database nor connected WebSocket clients.
"""

import os
from datetime import datetime, timezone
from typing import List, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Must be set before `config.settings` is first imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_grapes.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from models.grape import GrapeCreate, GrapeRead  # noqa: E402
from services.results import OperationResult  # noqa: E402


class FakeGrapeStore:
    """In-memory storage; `fail_with` turns every call into a failure."""

    def __init__(self, grapes: Optional[List[GrapeRead]] = None):
        self.grapes: List[GrapeRead] = list(grapes or [])
        self.fail_with: Optional[BaseException] = None
        self.added: List[GrapeCreate] = []
        self.deleted: List[int] = []

    async def add_grape(self, grape: GrapeCreate) -> OperationResult[GrapeRead]:
        if self.fail_with is not None:
            return OperationResult.failure(self.fail_with)
        self.added.append(grape)
        created = GrapeRead(
            id=grape.id or len(self.grapes) + 1,
            name=grape.name,
            color=grape.color,
            created_at=datetime.now(timezone.utc),
        )
        self.grapes.append(created)
        return OperationResult.success(created)

    async def get_grapes(self) -> OperationResult[List[GrapeRead]]:
        if self.fail_with is not None:
            return OperationResult.failure(self.fail_with)
        return OperationResult.success(list(self.grapes))

    async def delete_grape(self, grape_id: int) -> OperationResult[None]:
        if self.fail_with is not None:
            return OperationResult.failure(self.fail_with)
        self.deleted.append(grape_id)
        self.grapes = [g for g in self.grapes if g.id != grape_id]
        return OperationResult.success()


class FakeHub:
    """Counts broadcasts instead of sending them."""

    def __init__(self):
        self.broadcasts = 0
        self.fail_with: Optional[BaseException] = None

    async def send_grape_message(self) -> OperationResult[None]:
        if self.fail_with is not None:
            return OperationResult.failure(self.fail_with)
        self.broadcasts += 1
        return OperationResult.success()


@pytest.fixture
def grape_store():
    return FakeGrapeStore()


@pytest.fixture
def hub():
    return FakeHub()


@pytest.fixture
def app(grape_store, hub):
    from main import create_app
    return create_app(grape_service=grape_store, hub_service=hub)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/v1/hateoas-grapes/")
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_grape():
    return GrapeRead(
        id=1,
        name="Red",
        color="red",
        created_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
    )
