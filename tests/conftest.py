"""Test config and shared fixtures."""
import os

os.environ.setdefault("APP_ENV", "testing")

import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from apps.members.models import Member, Team


# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh schema per test; the session is rolled back at the end."""
    # Registers every table on SQLModel.metadata
    import apps.models  # noqa: F401

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async_session_maker = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def client(async_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with the DB session overridden."""
    from main import app
    from apps.members.api.router import get_db

    async def _get_db():
        yield async_session

    app.dependency_overrides[get_db] = _get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def team_a(async_session: AsyncSession) -> Team:
    team = Team(name="teamA")
    async_session.add(team)
    await async_session.flush()
    return team


@pytest.fixture
async def team_b(async_session: AsyncSession) -> Team:
    team = Team(name="teamB")
    async_session.add(team)
    await async_session.flush()
    return team


@pytest.fixture
async def four_members_aged_ten(async_session: AsyncSession) -> list[Member]:
    members = [
        Member(username="kim", age=10),
        Member(username="choi", age=10),
        Member(username="ha", age=10),
        Member(username="park", age=10),
    ]
    async_session.add_all(members)
    await async_session.flush()
    return members
