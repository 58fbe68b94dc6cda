"""
Styling consultation with Director Lu Ye about an existing profile.

Same turn shape as the interview but with no round ceiling and no
profile synthesis; a session lives until it is explicitly ended. The
one-shot video-chat turn is stateless.
"""

from __future__ import annotations

import json
from typing import Optional

from cinematic_mirror.core.exceptions import (
    LLMError,
    ProfileNotFoundError,
    ValidationError,
)
from cinematic_mirror.core.logger import logger
from cinematic_mirror.interfaces.llm_provider import IChatCompletionProvider
from cinematic_mirror.interfaces.profile_repository import IProfileRepository
from cinematic_mirror.models.api import StartConsultationResult
from cinematic_mirror.models.chat import ChatMessage, PromptMessage
from cinematic_mirror.models.enums import Locale, PromptRole
from cinematic_mirror.models.profile import PersonalityProfile
from cinematic_mirror.models.session import ConsultationSessionState
from cinematic_mirror.prompts import PromptSet, get_prompt_set
from cinematic_mirror.prompts.consultation_prompt import PROFILE_PLACEHOLDER
from cinematic_mirror.services.session_store import SessionStore

CONSULTATION_TEMPERATURE = 0.8
CONSULTATION_MAX_TOKENS = 500

VIDEO_TEMPERATURE = 0.8
VIDEO_MAX_TOKENS = 300
VIDEO_FALLBACK_MAX_TOKENS = 200


def render_profile_context(profile: PersonalityProfile) -> str:
    """Profile summary spliced into the consultation system prompt."""
    data = profile.model_dump(mode="json", by_alias=True)
    return json.dumps(
        {
            "title": data["title"],
            "subtitle": data["subtitle"],
            "narrative": data["narrative"],
            "analysis": data["analysis"],
            "matches": data["matches"],
            "styling_variants": data["styling_variants"],
        },
        ensure_ascii=False,
        indent=2,
    )


def _record_user_turn(state: ConsultationSessionState, text: str) -> ConsultationSessionState:
    state.transcript.append(PromptMessage(role=PromptRole.USER, content=text))
    state.display_messages.append(ChatMessage.from_user(text))
    return state


class ConsultationService:
    """Text consultation sessions and the video-chat turn."""

    def __init__(
        self,
        llm_provider: IChatCompletionProvider,
        session_store: SessionStore[ConsultationSessionState],
        profile_repo: IProfileRepository,
    ):
        self._llm = llm_provider
        self._sessions = session_store
        self._profile_repo = profile_repo

    async def _require_profile(self, profile_id: Optional[str]) -> PersonalityProfile:
        if not profile_id:
            raise ValidationError("profileId is required")
        profile = await self._profile_repo.get(profile_id)
        if not profile:
            raise ProfileNotFoundError(profile_id)
        return profile

    async def start_consultation(
        self,
        profile_id: Optional[str],
        locale: Locale = Locale.ZH,
    ) -> StartConsultationResult:
        """
        Open a consultation about one profile; the director greets first.

        Raises:
            ValidationError: No profile id
            ProfileNotFoundError: Profile does not exist
        """
        profile = await self._require_profile(profile_id)
        prompts = get_prompt_set(locale)

        system_prompt = prompts.consultation_prompt.replace(
            PROFILE_PLACEHOLDER, render_profile_context(profile)
        )
        transcript = [
            PromptMessage(role=PromptRole.SYSTEM, content=system_prompt),
            PromptMessage(role=PromptRole.USER, content=prompts.welcome_request),
        ]
        reply = await self._llm.complete(
            [message.to_provider() for message in transcript],
            temperature=CONSULTATION_TEMPERATURE,
            max_tokens=CONSULTATION_MAX_TOKENS,
        )
        transcript.append(PromptMessage(role=PromptRole.ASSISTANT, content=reply))
        welcome = ChatMessage.from_model(reply)

        session_id = self._sessions.create(
            ConsultationSessionState(
                profile_id=profile.id,
                locale=locale,
                transcript=transcript,
                display_messages=[welcome],
            )
        )
        logger.info(f"Consultation {session_id} started for profile {profile.id}")
        return StartConsultationResult(session_id=session_id, welcome_message=welcome)

    async def send_message(self, session_id: str, text: Optional[str]) -> ChatMessage:
        """
        Relay one user message and return the director's reply.

        Raises:
            ValidationError: Empty message
            SessionNotFoundError: Session not held in memory
        """
        if not text:
            raise ValidationError("Message must not be empty")

        self._sessions.get(session_id)
        async with self._sessions.lock(session_id):
            # The session may have been ended while this turn waited for the lock.
            state = self._sessions.mutate(session_id, lambda s: _record_user_turn(s, text))

            reply = await self._llm.complete(
                [message.to_provider() for message in state.transcript],
                temperature=CONSULTATION_TEMPERATURE,
                max_tokens=CONSULTATION_MAX_TOKENS,
            )
            state.transcript.append(PromptMessage(role=PromptRole.ASSISTANT, content=reply))
            response = ChatMessage.from_model(reply)
            state.display_messages.append(response)
            return response

    def end_consultation(self, session_id: str) -> Locale:
        """
        Close a consultation and return its locale.

        Raises:
            SessionNotFoundError: Session not held in memory
        """
        state = self._sessions.get(session_id)
        self._sessions.delete(session_id)
        logger.info(f"Consultation {session_id} ended")
        return state.locale

    def get_history(self, session_id: str) -> list[ChatMessage]:
        """Display messages so far; empty for an unknown session."""
        state = self._sessions.find(session_id)
        if state is None:
            return []
        return list(state.display_messages)

    # ===========================================
    # Video chat
    # ===========================================

    @staticmethod
    def build_video_prompt(prompts: PromptSet, profile: PersonalityProfile) -> str:
        matches = prompts.match_separator.join(f"{m.name}({m.movie})" for m in profile.matches)
        return prompts.video_chat_template.format(
            title=profile.title,
            subtitle=profile.subtitle,
            analysis=profile.analysis or "",
            matches=matches or prompts.no_matches,
        )

    async def video_chat(
        self,
        message: Optional[str],
        image_data: Optional[str],
        profile_id: Optional[str],
        locale: Locale = Locale.ZH,
    ) -> str:
        """
        One multimodal turn: the director looks at a camera frame.

        A failed vision call is retried once as a text-only request; a
        failure of that retry propagates.
        """
        if not message:
            raise ValidationError("message is required")
        profile = await self._require_profile(profile_id)
        prompts = get_prompt_set(locale)

        try:
            reply = await self._llm.complete_with_image(
                system_prompt=self.build_video_prompt(prompts, profile),
                text=message,
                image_data=image_data or None,
                temperature=VIDEO_TEMPERATURE,
                max_tokens=VIDEO_MAX_TOKENS,
            )
        except LLMError as e:
            logger.warning(f"Vision chat failed for profile {profile.id}, falling back to text: {e}")
            return await self._fallback_text_reply(prompts, message, profile)
        return reply or prompts.video_empty_reply

    async def _fallback_text_reply(self, prompts: PromptSet, message: str, profile: PersonalityProfile) -> str:
        return await self._llm.complete(
            [
                {"role": PromptRole.SYSTEM.value, "content": prompts.video_fallback_system},
                {
                    "role": PromptRole.USER.value,
                    "content": prompts.video_fallback_template.format(message=message, title=profile.title),
                },
            ],
            temperature=VIDEO_TEMPERATURE,
            max_tokens=VIDEO_FALLBACK_MAX_TOKENS,
        )
