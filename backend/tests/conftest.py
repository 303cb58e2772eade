"""
TechShirt Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the whole suite.
How:   Every test gets its own in-memory SQLite database (aiosqlite) with the
       full schema created from Base.metadata, so services run real SQL.
       Failure paths use AsyncMock sessions instead.

Fixture Hierarchy (all function-scoped):
    ├── db_engine:        in-memory SQLite engine with every table created
    │   ├── db:           AsyncSession on that engine
    │   │   └── seed:     helpers that insert users, designs, items, ...
    │   └── client:       HTTPX AsyncClient over a fresh app, sessions from db_engine
    ├── mock_db_session:  AsyncMock standing in for AsyncSession
    ├── temp_storage:     temporary blob store root
    ├── blob_store:       LocalBlobStore rooted at temp_storage
    └── sample_png_bytes: a real 1x1 PNG
"""

import base64
import os
import tempfile
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, List, Optional
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

# Settings are read at import time; point them at throwaway resources first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["STORAGE_ROOT"] = tempfile.mkdtemp(prefix="techshirt_test_")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.database import Base, get_db_session
from app.models import (
    Design,
    DesignPreview,
    DesignStatus,
    Designer,
    InventoryCategory,
    InventoryItem,
    Notification,
    Portfolio,
    User,
    UserRole,
)
from app.services.blob_store import LocalBlobStore

# 1x1 transparent PNG
_PNG_1X1 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


# ══════════════════════════════════════════════════════════════════════════
# Database
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """In-memory database shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


class Seeder:
    """
    Inserts fixture records the API has no create endpoint for.

    Each helper flushes and returns the ORM object. Tests that go through
    the HTTP client call `await seed.commit()` so request sessions see the rows.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def tick(self) -> datetime:
        """Strictly increasing created_at values, one minute apart."""
        self._clock += timedelta(minutes=1)
        return self._clock

    async def _add(self, record):
        self.session.add(record)
        await self.session.flush()
        return record

    async def commit(self) -> None:
        await self.session.commit()

    async def user(
        self,
        clerk_id: str,
        role: UserRole = UserRole.CLIENT,
        email: Optional[str] = None,
        first_name: str = "Test",
        last_name: str = "User",
    ) -> User:
        return await self._add(
            User(
                clerk_id=clerk_id,
                email=email or f"{clerk_id}@example.com",
                first_name=first_name,
                last_name=last_name,
                role=role,
                created_at=self.tick(),
            )
        )

    async def designer(self, user_id: UUID, **fields) -> Designer:
        return await self._add(Designer(user_id=user_id, created_at=self.tick(), **fields))

    async def portfolio(
        self,
        designer_id: UUID,
        specialization: Optional[str] = None,
        skills: Optional[List[str]] = None,
    ) -> Portfolio:
        return await self._add(
            Portfolio(
                designer_id=designer_id,
                specialization=specialization,
                skills=skills or [],
                created_at=self.tick(),
            )
        )

    async def design(
        self,
        client_id: Optional[UUID] = None,
        status: DesignStatus = DesignStatus.PENDING,
    ) -> Design:
        return await self._add(Design(client_id=client_id, status=status, created_at=self.tick()))

    async def preview(self, design_id: UUID) -> DesignPreview:
        return await self._add(DesignPreview(design_id=design_id, created_at=self.tick()))

    async def notification(self, user_id: UUID, content: str) -> Notification:
        return await self._add(
            Notification(
                recipient_user_id=user_id,
                recipient_user_type=UserRole.CLIENT,
                content=content,
                created_at=self.tick(),
            )
        )

    async def category(self, name: str) -> InventoryCategory:
        return await self._add(InventoryCategory(category_name=name, created_at=self.tick()))

    async def item(
        self,
        name: str,
        category_id: UUID,
        stock: float = 10,
        unit: str = "m",
        pending_restock: Optional[float] = None,
    ) -> InventoryItem:
        stamp = self.tick()
        return await self._add(
            InventoryItem(
                name=name,
                category_id=category_id,
                unit=unit,
                stock=stock,
                pending_restock=pending_restock,
                created_at=stamp,
                updated_at=stamp,
            )
        )


@pytest_asyncio.fixture
async def seed(db) -> Seeder:
    return Seeder(db)


@pytest.fixture
def mock_db_session():
    """
    AsyncMock standing in for AsyncSession, for failure injection.

    Usage:
        mock_db_session.get.return_value = design
        mock_db_session.flush.side_effect = OperationalError(...)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# Blob storage
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def temp_storage(tmp_path):
    storage_dir = tmp_path / "storage"
    storage_dir.mkdir()
    return str(storage_dir)


@pytest.fixture
def blob_store(temp_storage):
    return LocalBlobStore(storage_root=temp_storage)


@pytest.fixture
def sample_png_bytes():
    return base64.b64decode(_PNG_1X1)


# ══════════════════════════════════════════════════════════════════════════
# HTTP
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def client(db_engine, monkeypatch):
    """
    HTTPX client over a fresh app whose sessions come from db_engine.

    Usage:
        async def test_list(client):
            response = await client.get("/api/print-pricing")
            assert response.status_code == 200
    """
    from app.main import create_app

    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    monkeypatch.setattr("app.routes.health.engine", db_engine)

    application = create_app()
    application.dependency_overrides[get_db_session] = override_session

    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
