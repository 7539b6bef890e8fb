import asyncio
import re
from typing import Dict, List, Optional
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from stuff_manager.app import app
from stuff_manager.domain.models.stuff import Stuff
from stuff_manager.domain.ports.repositories.stuff_repository import StuffRepository
from stuff_manager.domain.ports.services.stuff_api_client import StuffApiClientPort
from stuff_manager.infrastructure.adapters.repositories.sqlalchemy_stuff_repository import (
    SQLAlchemyStuffRepository,
)
from stuff_manager.infrastructure.persistence.database import get_session
from stuff_manager.infrastructure.persistence.models import table_registry


def make_stuff(count: int, start: int = 1, with_ids: bool = True) -> List[Stuff]:
    return [
        Stuff(
            id=i if with_ids else None,
            name=f"Stuff Item {i}",
            description=f"Description for stuff item {i}",
        )
        for i in range(start, start + count)
    ]


class FakeStuffApiClient(StuffApiClientPort):
    """In-memory API client; pages listed in ``gates`` block until their event is set."""

    def __init__(
        self,
        pages: Optional[Dict[int, List[Stuff]]] = None,
        errors: Optional[Dict[int, Exception]] = None,
        gates: Optional[Dict[int, asyncio.Event]] = None,
    ):
        self.pages = pages or {}
        self.errors = errors or {}
        self.gates = gates or {}
        self.requested: List[int] = []

    async def fetch_page(self, page: int) -> List[Stuff]:
        self.requested.append(page)
        if page in self.gates:
            await self.gates[page].wait()
        if page in self.errors:
            raise self.errors[page]
        return list(self.pages.get(page, []))


class RenderedPage:
    """Small query helper over the HTML produced by the list view."""

    def __init__(self, html: str):
        self.html = html

    def has_role(self, role: str) -> bool:
        return f'role="{role}"' in self.html

    def has_text(self, text: str) -> bool:
        return text in self.html

    def has_table(self) -> bool:
        return "<table>" in self.html

    def body_rows(self) -> List[str]:
        body = re.search(r"<tbody>(.*?)</tbody>", self.html, re.S)
        if body is None:
            return []
        return re.findall(r"<tr>.*?</tr>", body.group(1), re.S)

    def all_rows(self) -> List[str]:
        return re.findall(r"<tr>.*?</tr>", self.html, re.S)

    def button(self, label: str) -> str:
        match = re.search(rf'<button[^>]*aria-label="{label} page"[^>]*>', self.html)
        assert match is not None, f"{label} button not rendered"
        return match.group(0)

    def is_disabled(self, label: str) -> bool:
        return " disabled" in self.button(label)


@pytest.fixture
def first_page() -> List[Stuff]:
    return make_stuff(10)


@pytest.fixture
def second_page() -> List[Stuff]:
    return make_stuff(2, start=11)


@pytest.fixture
def mock_stuff_repository():
    return AsyncMock(spec=StuffRepository)


@pytest_asyncio.fixture
async def sqlite_engine():
    """In-memory SQLite engine shared by every session of one test"""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(table_registry.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(sqlite_engine):
    async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def stuff_repository(session):
    return SQLAlchemyStuffRepository(session)


@pytest_asyncio.fixture
async def seeded_stuff(stuff_repository):
    """Twelve records, ids 1-12, named Stuff Item {i}"""
    return await stuff_repository.add_many(make_stuff(12, with_ids=False))


@pytest_asyncio.fixture
async def client(session):
    """HTTP client against the app with the session swapped for the SQLite one"""

    async def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
