"""
Unit tests for the SQLite repositories.
"""

from datetime import timedelta

import pytest

from cinematic_mirror.models.chat import ChatMessage
from cinematic_mirror.models.enums import Locale, SessionStatus
from cinematic_mirror.models.profile import (
    CharacterMatch,
    PaletteColor,
    PersonalityProfile,
    StyleVariant,
    VisualAdvice,
)
from cinematic_mirror.utils.datetime_utils import now_utc


def make_profile(profile_id, user_id="user-1", created_at=None):
    return PersonalityProfile(
        id=profile_id,
        user_id=user_id,
        title="Title",
        subtitle="Subtitle",
        visual_advice=VisualAdvice(camera="Close-up"),
        matches=[CharacterMatch(name="雪儿", movie="独领风骚", match_rate=85, image="https://img")],
        styling_variants=[
            StyleVariant(
                title="Look",
                palette=[PaletteColor(hex="#000000", name="黑", en_name="Black")],
                director_note="Hold still.",
            )
        ],
        interview_history=[ChatMessage.from_model("Sit."), ChatMessage.from_user("Hi")],
        created_at=created_at or now_utc(),
    )


class TestInterviewSessionRepository:
    @pytest.mark.asyncio
    async def test_create_and_get(self, session_repo):
        created = await session_repo.create(
            session_id="s1",
            user_id="user-1",
            messages=[ChatMessage.from_model("Sit.")],
            round=1,
            language=Locale.EN,
        )

        fetched = await session_repo.get("s1")
        assert fetched == created
        assert fetched.status == SessionStatus.ACTIVE
        assert fetched.language == Locale.EN
        assert fetched.messages[0].text == "Sit."
        assert fetched.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_update_progress(self, session_repo):
        await session_repo.create("s1", "user-1", [], 1, Locale.ZH)

        updated = await session_repo.update_progress(
            "s1",
            [ChatMessage.from_model("a"), ChatMessage.from_user("b")],
            2,
            SessionStatus.COMPLETED,
        )

        assert updated.round == 2
        assert updated.status == SessionStatus.COMPLETED
        assert [m.text for m in updated.messages] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_mark_completed_links_profile(self, session_repo):
        await session_repo.create("s1", "user-1", [], 9, Locale.ZH)

        record = await session_repo.mark_completed("s1", "profile-1")

        assert record.status == SessionStatus.COMPLETED
        assert record.profile_id == "profile-1"

    @pytest.mark.asyncio
    async def test_missing_rows(self, session_repo):
        assert await session_repo.get("missing") is None
        assert await session_repo.update_progress("missing", [], 2, SessionStatus.ACTIVE) is None
        assert await session_repo.mark_completed("missing", "p") is None


class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_round_trip_keeps_nested_records(self, profile_repo):
        profile = make_profile("p1")

        await profile_repo.create(profile)
        fetched = await profile_repo.get("p1")

        assert fetched.matches[0].match_rate == 85
        assert fetched.styling_variants[0].palette[0].en_name == "Black"
        assert fetched.styling_variants[0].director_note == "Hold still."
        assert fetched.visual_advice.camera == "Close-up"
        assert [m.role for m in fetched.interview_history] == [m.role for m in profile.interview_history]

    @pytest.mark.asyncio
    async def test_list_newest_first_and_scoped_to_owner(self, profile_repo):
        base = now_utc()
        await profile_repo.create(make_profile("old", created_at=base - timedelta(days=1)))
        await profile_repo.create(make_profile("new", created_at=base))
        await profile_repo.create(make_profile("other", user_id="user-2", created_at=base))

        profiles = await profile_repo.list_for_user("user-1")

        assert [p.id for p in profiles] == ["new", "old"]
        assert await profile_repo.list_for_user("nobody") == []

    @pytest.mark.asyncio
    async def test_get_missing(self, profile_repo):
        assert await profile_repo.get("missing") is None
