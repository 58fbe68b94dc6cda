"""
SQLite implementation of the personality profile repository.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from cinematic_mirror.core.exceptions import InfrastructureError
from cinematic_mirror.infrastructure.local.database import PersonalityProfileORM, get_session_factory
from cinematic_mirror.interfaces.profile_repository import IProfileRepository
from cinematic_mirror.models.profile import PersonalityProfile
from cinematic_mirror.utils.datetime_utils import ensure_utc


class SqliteProfileRepository(IProfileRepository):
    """SQLite implementation of profile repository."""

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or get_session_factory()

    def _orm_to_model(self, orm: PersonalityProfileORM) -> PersonalityProfile:
        """Convert ORM object to Pydantic model."""
        return PersonalityProfile.model_validate(
            {
                "id": orm.id,
                "user_id": orm.user_id,
                "title": orm.title,
                "subtitle": orm.subtitle or "",
                "analysis": orm.analysis or "",
                "narrative": orm.narrative or "",
                "angles": orm.angles or [],
                "visual_advice": orm.visual_advice or {},
                "matches": orm.matches or [],
                "styling_variants": orm.styling_variants or [],
                "interview_history": orm.interview_history or [],
                "created_at": ensure_utc(orm.created_at),
            }
        )

    async def create(self, profile: PersonalityProfile) -> PersonalityProfile:
        # Nested records are stored with their camelCase keys.
        data = profile.model_dump(mode="json", by_alias=True)
        try:
            async with self._session_factory() as session:
                orm = PersonalityProfileORM(
                    id=profile.id,
                    user_id=profile.user_id,
                    title=profile.title,
                    subtitle=profile.subtitle,
                    analysis=profile.analysis,
                    narrative=profile.narrative,
                    angles=data["angles"],
                    visual_advice=data["visual_advice"],
                    matches=data["matches"],
                    styling_variants=data["styling_variants"],
                    interview_history=data["interview_history"],
                    created_at=profile.created_at,
                )
                session.add(orm)
                await session.commit()
                await session.refresh(orm)
                return self._orm_to_model(orm)
        except SQLAlchemyError as e:
            raise InfrastructureError(f"Failed to save profile: {e}") from e

    async def list_for_user(
        self,
        user_id: str,
        limit: int = 100,
        offset: int = 0,
    ) -> list[PersonalityProfile]:
        async with self._session_factory() as session:
            query = (
                select(PersonalityProfileORM)
                .where(PersonalityProfileORM.user_id == user_id)
                .order_by(PersonalityProfileORM.created_at.desc())
                .limit(limit)
                .offset(offset)
            )
            result = await session.execute(query)
            return [self._orm_to_model(orm) for orm in result.scalars().all()]

    async def get(self, profile_id: str) -> Optional[PersonalityProfile]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(PersonalityProfileORM).where(PersonalityProfileORM.id == profile_id)
            )
            orm = result.scalar_one_or_none()
            return self._orm_to_model(orm) if orm else None
