"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection
    - Seed fixtures write through their own session, routes read through theirs
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from calculator.db.base import Base
from calculator.infrastructure.database import get_db, DatabaseSessionManager
from calculator.models.calculation import Calculation
from calculator.models.project import Project
import calculator.infrastructure.database as db_module
from calculator.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_project(test_session_factory):
    """Insert an empty project."""
    async with test_session_factory() as db:
        project = Project(name="Test name", calculations=[])
        db.add(project)
        await db.commit()
        return project


@pytest.fixture
async def seed_calculations(test_session_factory, seed_project):
    """Insert three calculations under seed_project, the last one unevaluable."""
    async with test_session_factory() as db:
        calculations = [
            Calculation(
                project_id=seed_project.id,
                description="sum", expression="2 + 3",
            ),
            Calculation(
                project_id=seed_project.id,
                description="precedence", expression="(1 + 2) * 4 - 6 / 3",
            ),
            Calculation(
                project_id=seed_project.id,
                description="broken", expression="1 / 0",
            ),
        ]
        db.add_all(calculations)
        await db.commit()
        return calculations
