"""
Shared test fixtures.

Uses an in-memory SQLite database (via aiosqlite) so tests run without
Docker / PostgreSQL.  PostGIS-specific features (Geometry columns) are
mocked by using plain String columns in the test models.
"""

import uuid
from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import JSON, Column, DateTime, Float, String, Text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from campus_nav.domain.entities import Road


# ── Test DB (SQLite in-memory) ────────────────────────────────────────

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"

test_engine = create_async_engine(TEST_DB_URL, echo=False)
TestSessionFactory = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


class TestBase(DeclarativeBase):
    pass


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


# Mirror the production models but without PostGIS Geometry columns
# (SQLite doesn't support them).

class TestRoadModel(TestBase):
    __tablename__ = "roads"
    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(120), nullable=False)
    type = Column(String(20), default="custom", nullable=False)
    path = Column(String, nullable=True)  # stub for Geometry
    coordinates = Column(JSON, nullable=False)
    created_at = Column(DateTime, default=_now)


class TestLocationModel(TestBase):
    __tablename__ = "locations"
    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(120), nullable=False)
    description = Column(Text, default="", nullable=False)
    category = Column(String(20), default="custom", nullable=False)
    point = Column(String, nullable=True)  # stub for Geometry
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)
    created_at = Column(DateTime, default=_now)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield a session, then drop everything."""
    async with test_engine.begin() as conn:
        await conn.run_sync(TestBase.metadata.create_all)

    async with TestSessionFactory() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(TestBase.metadata.drop_all)


@pytest.fixture
def crossing_roads() -> list[Road]:
    """Two diagonals of the unit square, crossing at (0.5, 0.5)."""
    return [
        Road(id="r1", name="Diagonal A", coordinates=[(0, 0), (1, 1)]),
        Road(id="r2", name="Diagonal B", coordinates=[(0, 1), (1, 0)]),
    ]
