"""
SQLite implementation of the interview shadow-row repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from cinematic_mirror.infrastructure.local.database import InterviewSessionORM, get_session_factory
from cinematic_mirror.interfaces.interview_session_repository import IInterviewSessionRepository
from cinematic_mirror.models.chat import ChatMessage
from cinematic_mirror.models.enums import Locale, SessionStatus
from cinematic_mirror.models.session import InterviewSessionRecord
from cinematic_mirror.utils.datetime_utils import ensure_utc, now_utc


def _dump_messages(messages: list[ChatMessage]) -> list[dict]:
    return [message.model_dump(mode="json") for message in messages]


class SqliteInterviewSessionRepository(IInterviewSessionRepository):
    """SQLite implementation of interview shadow rows."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or get_session_factory()

    def _orm_to_model(self, orm: InterviewSessionORM) -> InterviewSessionRecord:
        """Convert ORM object to Pydantic model."""
        return InterviewSessionRecord(
            id=orm.id,
            user_id=orm.user_id,
            messages=[ChatMessage.model_validate(item) for item in (orm.messages or [])],
            round=orm.round or 0,
            status=SessionStatus(orm.status),
            profile_id=orm.profile_id,
            language=Locale.from_value(orm.language),
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def create(
        self,
        session_id: str,
        user_id: str,
        messages: list[ChatMessage],
        round: int,
        language: Locale,
    ) -> InterviewSessionRecord:
        async with self._session_factory() as session:
            orm = InterviewSessionORM(
                id=session_id,
                user_id=user_id,
                messages=_dump_messages(messages),
                round=round,
                status=SessionStatus.ACTIVE.value,
                language=language.value,
            )
            session.add(orm)
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def update_progress(
        self,
        session_id: str,
        messages: list[ChatMessage],
        round: int,
        status: SessionStatus,
    ) -> Optional[InterviewSessionRecord]:
        async with self._session_factory() as session:
            orm = await session.get(InterviewSessionORM, session_id)
            if not orm:
                return None
            orm.messages = _dump_messages(messages)
            orm.round = round
            orm.status = status.value
            orm.updated_at = now_utc()
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def mark_completed(
        self,
        session_id: str,
        profile_id: str,
    ) -> Optional[InterviewSessionRecord]:
        async with self._session_factory() as session:
            orm = await session.get(InterviewSessionORM, session_id)
            if not orm:
                return None
            orm.status = SessionStatus.COMPLETED.value
            orm.profile_id = profile_id
            orm.updated_at = now_utc()
            await session.commit()
            await session.refresh(orm)
            return self._orm_to_model(orm)

    async def get(self, session_id: str) -> Optional[InterviewSessionRecord]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(InterviewSessionORM).where(InterviewSessionORM.id == session_id)
            )
            orm = result.scalar_one_or_none()
            return self._orm_to_model(orm) if orm else None
