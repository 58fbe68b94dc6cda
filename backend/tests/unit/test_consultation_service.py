"""
Unit tests for styling consultations and the video-chat turn.
"""

import asyncio
import json

import pytest

from cinematic_mirror.core.exceptions import (
    LLMError,
    ProfileNotFoundError,
    SessionNotFoundError,
    ValidationError,
)
from cinematic_mirror.models.enums import Locale, MessageRole
from cinematic_mirror.models.profile import CharacterMatch, PersonalityProfile
from cinematic_mirror.prompts.consultation_prompt import (
    VIDEO_FALLBACK_SYSTEM_EN,
    WELCOME_REQUEST_EN,
    WELCOME_REQUEST_ZH,
)
from cinematic_mirror.services.consultation_service import (
    ConsultationService,
    render_profile_context,
)
from cinematic_mirror.utils.datetime_utils import now_utc

from fakes import DEFAULT_REPLY, GatedChatProvider


def make_profile(**overrides):
    fields = dict(
        id="profile-1",
        user_id="user-1",
        title="The Night Walker",
        subtitle="Quiet, exact, unhurried",
        analysis="A careful observer.",
        narrative="She arrives late.",
        matches=[
            CharacterMatch(name="莎莉", movie="当哈利遇到莎莉", match_rate=88),
            CharacterMatch(name="Amélie", movie="Amélie", match_rate=80),
        ],
        created_at=now_utc(),
    )
    fields.update(overrides)
    return PersonalityProfile(**fields)


@pytest.fixture
async def profile(profile_repo):
    return await profile_repo.create(make_profile())


@pytest.fixture
def service(llm, consultation_sessions, profile_repo):
    return ConsultationService(llm, consultation_sessions, profile_repo)


class TestProfileContext:
    def test_context_holds_summary_fields_only(self):
        context = json.loads(render_profile_context(make_profile()))

        assert set(context) == {"title", "subtitle", "narrative", "analysis", "matches", "styling_variants"}
        assert context["matches"][0]["matchRate"] == 88
        assert context["matches"][0]["name"] == "莎莉"


class TestConsultationSession:
    @pytest.mark.asyncio
    async def test_start_greets_with_profile_in_system_prompt(self, service, llm, profile, consultation_sessions):
        llm.queue("Ah, the night walker. Sit.")

        result = await service.start_consultation(profile.id, Locale.EN)

        call = llm.calls[0]
        assert call["temperature"] == 0.8
        assert call["max_tokens"] == 500
        assert "The Night Walker" in call["messages"][0]["content"]
        assert "{PROFILE}" not in call["messages"][0]["content"]
        assert call["messages"][1] == {"role": "user", "content": WELCOME_REQUEST_EN}
        assert result.welcome_message.role == MessageRole.MODEL
        assert result.welcome_message.text == "Ah, the night walker. Sit."
        assert consultation_sessions.get(result.session_id).profile_id == profile.id

    @pytest.mark.asyncio
    async def test_start_defaults_to_chinese(self, service, llm, profile):
        await service.start_consultation(profile.id)

        assert llm.calls[0]["messages"][1]["content"] == WELCOME_REQUEST_ZH

    @pytest.mark.asyncio
    async def test_start_requires_profile_id(self, service, llm):
        with pytest.raises(ValidationError):
            await service.start_consultation(None)
        assert llm.calls == []

    @pytest.mark.asyncio
    async def test_start_unknown_profile(self, service, llm):
        with pytest.raises(ProfileNotFoundError):
            await service.start_consultation("missing")
        assert llm.calls == []

    @pytest.mark.asyncio
    async def test_message_extends_transcript(self, service, llm, profile):
        result = await service.start_consultation(profile.id, Locale.EN)
        llm.queue("Lose the scarf.")

        reply = await service.send_message(result.session_id, "What about this scarf?")

        assert reply.text == "Lose the scarf."
        assert reply.role == MessageRole.MODEL
        assert len(llm.calls[1]["messages"]) == 4
        assert llm.calls[1]["messages"][-1] == {"role": "user", "content": "What about this scarf?"}

    @pytest.mark.asyncio
    async def test_no_round_ceiling(self, service, profile):
        result = await service.start_consultation(profile.id, Locale.EN)

        for i in range(15):
            await service.send_message(result.session_id, f"question {i}")

        assert len(service.get_history(result.session_id)) == 31

    @pytest.mark.asyncio
    async def test_message_unknown_session(self, service):
        with pytest.raises(SessionNotFoundError):
            await service.send_message("missing", "hello")

    @pytest.mark.asyncio
    async def test_message_empty(self, service, profile):
        result = await service.start_consultation(profile.id)
        with pytest.raises(ValidationError):
            await service.send_message(result.session_id, "")

    @pytest.mark.asyncio
    async def test_history_in_display_order(self, service, profile):
        result = await service.start_consultation(profile.id, Locale.EN)
        await service.send_message(result.session_id, "hello")

        history = service.get_history(result.session_id)

        assert [m.role for m in history] == [MessageRole.MODEL, MessageRole.USER, MessageRole.MODEL]
        assert history[1].text == "hello"
        assert history[2].text == DEFAULT_REPLY

    def test_history_unknown_session_is_empty(self, service):
        assert service.get_history("missing") == []

    @pytest.mark.asyncio
    async def test_end_removes_session(self, service, profile, consultation_sessions):
        result = await service.start_consultation(profile.id, Locale.EN)

        assert service.end_consultation(result.session_id) == Locale.EN
        assert result.session_id not in consultation_sessions
        assert service.get_history(result.session_id) == []
        with pytest.raises(SessionNotFoundError):
            await service.send_message(result.session_id, "still there?")

    def test_end_unknown_session(self, service):
        with pytest.raises(SessionNotFoundError):
            service.end_consultation("missing")


class TestVideoChat:
    @pytest.mark.asyncio
    async def test_vision_call_with_profile_prompt(self, service, llm, profile):
        llm.queue_image("That collar is working.")

        reply = await service.video_chat("How do I look?", "data:image/jpeg;base64,AAAA", profile.id, Locale.EN)

        assert reply == "That collar is working."
        call = llm.image_calls[0]
        assert call["text"] == "How do I look?"
        assert call["image_data"] == "data:image/jpeg;base64,AAAA"
        assert call["temperature"] == 0.8
        assert call["max_tokens"] == 300
        assert "The Night Walker" in call["system_prompt"]
        assert "莎莉(当哈利遇到莎莉), Amélie(Amélie)" in call["system_prompt"]
        assert llm.calls == []

    @pytest.mark.asyncio
    async def test_chinese_prompt_joins_matches(self, service, llm, profile):
        await service.video_chat("怎么样？", None, profile.id, Locale.ZH)

        assert "莎莉(当哈利遇到莎莉)、Amélie(Amélie)" in llm.image_calls[0]["system_prompt"]
        assert llm.image_calls[0]["image_data"] is None

    @pytest.mark.asyncio
    async def test_no_matches_rendered_as_none(self, service, llm, profile_repo):
        bare = await profile_repo.create(make_profile(id="bare", matches=[]))

        await service.video_chat("Thoughts?", None, bare.id, Locale.EN)

        assert "Matched Characters: None" in llm.image_calls[0]["system_prompt"]

    @pytest.mark.asyncio
    async def test_empty_vision_reply_uses_fallback_line(self, service, llm, profile):
        llm.queue_image("")

        assert await service.video_chat("Hm?", None, profile.id, Locale.EN) == "Let me take another look..."

    @pytest.mark.asyncio
    async def test_vision_failure_falls_back_to_text(self, service, llm, profile):
        llm.queue_image(LLMError("vision unavailable"))
        llm.queue("Wear the grey coat.")

        reply = await service.video_chat("What should I wear?", "data:image/png;base64,AA", profile.id, Locale.EN)

        assert reply == "Wear the grey coat."
        call = llm.calls[0]
        assert call["max_tokens"] == 200
        assert call["messages"][0] == {"role": "system", "content": VIDEO_FALLBACK_SYSTEM_EN}
        assert "What should I wear?" in call["messages"][1]["content"]
        assert "The Night Walker" in call["messages"][1]["content"]

    @pytest.mark.asyncio
    async def test_fallback_failure_propagates(self, service, llm, profile):
        llm.queue_image(LLMError("vision unavailable"))
        llm.queue(LLMError("text unavailable"))

        with pytest.raises(LLMError):
            await service.video_chat("Anything?", None, profile.id, Locale.EN)

    @pytest.mark.asyncio
    async def test_requires_message(self, service, llm, profile):
        with pytest.raises(ValidationError):
            await service.video_chat("", None, profile.id)
        assert llm.image_calls == []

    @pytest.mark.asyncio
    async def test_unknown_profile(self, service):
        with pytest.raises(ProfileNotFoundError):
            await service.video_chat("Hello", None, "missing")


class TestTurnDuringEnd:
    @pytest.fixture
    def llm(self):
        return GatedChatProvider()

    @pytest.mark.asyncio
    async def test_queued_turn_fails_after_consultation_ends(self, service, llm, profile, consultation_sessions):
        result = await service.start_consultation(profile.id)
        llm.hold()

        first = asyncio.create_task(service.send_message(result.session_id, "What should I wear?"))
        await llm.entered.wait()
        second = asyncio.create_task(service.send_message(result.session_id, "And shoes?"))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        service.end_consultation(result.session_id)
        llm.release.set()

        reply = await first
        with pytest.raises(SessionNotFoundError):
            await second

        assert reply.text == DEFAULT_REPLY
        assert len(llm.calls) == 2
        assert result.session_id not in consultation_sessions
