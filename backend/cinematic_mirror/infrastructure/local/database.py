"""
SQLite database configuration and ORM models.

This module defines the SQLAlchemy ORM models and database initialization.
"""

from functools import lru_cache
from uuid import uuid4

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    String,
    Text,
    JSON,
)
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from cinematic_mirror.core.config import get_settings
from cinematic_mirror.utils.datetime_utils import now_utc


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


# ===========================================
# ORM Models
# ===========================================


class InterviewSessionORM(Base):
    """Interview shadow row ORM model."""

    __tablename__ = "interview_sessions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    user_id = Column(String(255), nullable=False, index=True)
    messages = Column(JSON, nullable=False, default=list)
    round = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default="active", index=True)
    profile_id = Column(String(36), nullable=True)
    language = Column(String(10), nullable=False, default="zh")
    created_at = Column(DateTime, default=now_utc)
    updated_at = Column(DateTime, default=now_utc, onupdate=now_utc)


class PersonalityProfileORM(Base):
    """Personality profile ORM model."""

    __tablename__ = "personality_profiles"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    user_id = Column(String(255), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    subtitle = Column(String(500), nullable=False, default="")
    analysis = Column(Text, nullable=False, default="")
    narrative = Column(Text, nullable=False, default="")
    angles = Column(JSON, nullable=False, default=list)
    visual_advice = Column(JSON, nullable=False, default=dict)
    matches = Column(JSON, nullable=False, default=list)
    styling_variants = Column(JSON, nullable=False, default=list)
    interview_history = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=now_utc, index=True)


# ===========================================
# Database Session Management
# ===========================================


@lru_cache()
def get_engine():
    """Get async engine instance."""
    settings = get_settings()
    return create_async_engine(settings.DATABASE_URL, echo=settings.DEBUG)


def get_session_factory():
    """Get async session factory."""
    engine = get_engine()
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine=None):
    """Initialize database tables."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine():
    """Close pooled connections on shutdown."""
    await get_engine().dispose()
