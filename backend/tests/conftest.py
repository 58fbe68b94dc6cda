"""
Shared fixtures: in-memory SQLite repositories, isolated session stores
and a scripted chat-completion provider.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from cinematic_mirror.infrastructure.local.database import Base
from cinematic_mirror.infrastructure.local.interview_session_repository import (
    SqliteInterviewSessionRepository,
)
from cinematic_mirror.infrastructure.local.profile_repository import SqliteProfileRepository
from cinematic_mirror.services.character_catalog import get_character_catalog
from cinematic_mirror.services.session_store import SessionStore

from fakes import FakeChatProvider


@pytest.fixture
async def session_factory():
    """In-memory SQLite session factory with all tables created."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def session_repo(session_factory):
    return SqliteInterviewSessionRepository(session_factory)


@pytest.fixture
def profile_repo(session_factory):
    return SqliteProfileRepository(session_factory)


@pytest.fixture
def llm():
    return FakeChatProvider()


@pytest.fixture
def interview_sessions():
    return SessionStore()


@pytest.fixture
def consultation_sessions():
    return SessionStore()


@pytest.fixture
def catalog():
    return get_character_catalog()
