"""
Interview turn controller.

Runs the audition conversation with Director Lu Ye: opens a session,
relays each user message through the chat-completion provider with the
full transcript, and decides when the interview is over. Every turn is
mirrored to a shadow row so a profile can still be generated after a
restart; mirroring is best-effort and never fails the turn.
"""

from __future__ import annotations

from typing import Optional

from cinematic_mirror.core.exceptions import ProfileNotFoundError, ValidationError
from cinematic_mirror.core.logger import logger
from cinematic_mirror.interfaces.interview_session_repository import IInterviewSessionRepository
from cinematic_mirror.interfaces.llm_provider import IChatCompletionProvider
from cinematic_mirror.interfaces.profile_repository import IProfileRepository
from cinematic_mirror.models.api import InterviewTurnResult, StartInterviewResult
from cinematic_mirror.models.chat import ChatMessage, PromptMessage
from cinematic_mirror.models.enums import Gender, Locale, PromptRole, SessionStatus
from cinematic_mirror.models.profile import PersonalityProfile
from cinematic_mirror.models.session import InterviewSessionState
from cinematic_mirror.prompts import get_prompt_set
from cinematic_mirror.services.session_store import SessionStore

# Substring match, case-sensitive, one list for every locale.
CLOSING_KEYWORDS = ("cut", "Cut", "CUT", "辛苦了", "今天就到这里", "试镜结束")
MIN_CLOSING_ROUND = 8
MAX_ROUNDS = 12

INTERVIEW_TEMPERATURE = 0.85
INTERVIEW_MAX_TOKENS = 500


def contains_closing_keyword(reply: str) -> bool:
    return any(keyword in reply for keyword in CLOSING_KEYWORDS)


def is_interview_finished(reply: str, round: int) -> bool:
    """Closing keyword from round 8 on, or unconditionally at round 12."""
    return (round >= MIN_CLOSING_ROUND and contains_closing_keyword(reply)) or round >= MAX_ROUNDS


def to_provider_messages(transcript: list[PromptMessage]) -> list[dict[str, str]]:
    return [message.to_provider() for message in transcript]


def _record_user_turn(state: InterviewSessionState, text: str) -> InterviewSessionState:
    state.transcript.append(PromptMessage(role=PromptRole.USER, content=text))
    state.display_messages.append(ChatMessage.from_user(text))
    state.turn_count += 1
    return state


class InterviewService:
    """Audition interview lifecycle up to (not including) profile synthesis."""

    def __init__(
        self,
        llm_provider: IChatCompletionProvider,
        session_store: SessionStore[InterviewSessionState],
        session_repo: IInterviewSessionRepository,
        profile_repo: IProfileRepository,
    ):
        self._llm = llm_provider
        self._sessions = session_store
        self._session_repo = session_repo
        self._profile_repo = profile_repo

    def build_system_prompt(
        self,
        locale: Locale,
        user_name: Optional[str] = None,
        user_gender: Optional[str] = None,
    ) -> str:
        prompts = get_prompt_set(locale)
        system_prompt = prompts.director_prompt
        if user_name or user_gender:
            system_prompt += prompts.subject_info(user_name, Gender.from_value(user_gender))
        return system_prompt

    async def start_interview(
        self,
        owner_id: str,
        user_name: Optional[str] = None,
        user_gender: Optional[str] = None,
        locale: Locale = Locale.ZH,
    ) -> StartInterviewResult:
        """
        Open a new audition session.

        The director speaks first: the system prompt plus the locale's
        "audition begins" line are sent once and the reply becomes the
        opening message at round 1.
        """
        prompts = get_prompt_set(locale)
        transcript = [
            PromptMessage(
                role=PromptRole.SYSTEM,
                content=self.build_system_prompt(locale, user_name, user_gender),
            ),
            PromptMessage(role=PromptRole.USER, content=prompts.audition_start),
        ]

        reply = await self._llm.complete(
            to_provider_messages(transcript),
            temperature=INTERVIEW_TEMPERATURE,
            max_tokens=INTERVIEW_MAX_TOKENS,
        )
        transcript.append(PromptMessage(role=PromptRole.ASSISTANT, content=reply))
        opening = ChatMessage.from_model(reply)

        state = InterviewSessionState(
            owner_id=owner_id,
            locale=locale,
            gender=Gender.from_value(user_gender),
            transcript=transcript,
            display_messages=[opening],
            turn_count=1,
        )
        session_id = self._sessions.create(state)
        logger.info(f"Interview {session_id} started for {owner_id} ({locale.value})")

        await self._mirror_created(session_id, state)
        return StartInterviewResult(session_id=session_id, initial_message=opening)

    async def send_message(self, session_id: str, text: Optional[str]) -> InterviewTurnResult:
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
            # Re-read under the lock: profile generation may have dropped the session meanwhile.
            state = self._sessions.mutate(session_id, lambda s: _record_user_turn(s, text))

            reply = await self._llm.complete(
                to_provider_messages(state.transcript),
                temperature=INTERVIEW_TEMPERATURE,
                max_tokens=INTERVIEW_MAX_TOKENS,
            )
            state.transcript.append(PromptMessage(role=PromptRole.ASSISTANT, content=reply))
            response = ChatMessage.from_model(reply)
            state.display_messages.append(response)

            finished = is_interview_finished(reply, state.turn_count)
            if finished:
                logger.info(f"Interview {session_id} finished at round {state.turn_count}")

            await self._mirror_progress(session_id, state, finished)
            return InterviewTurnResult(response=response, is_finished=finished, round=state.turn_count)

    async def list_profiles(self, owner_id: str) -> list[PersonalityProfile]:
        return await self._profile_repo.list_for_user(owner_id)

    async def get_profile(self, profile_id: str) -> PersonalityProfile:
        profile = await self._profile_repo.get(profile_id)
        if not profile:
            raise ProfileNotFoundError(profile_id)
        return profile

    # ===========================================
    # Shadow rows (best-effort)
    # ===========================================

    async def _mirror_created(self, session_id: str, state: InterviewSessionState) -> None:
        try:
            await self._session_repo.create(
                session_id=session_id,
                user_id=state.owner_id,
                messages=list(state.display_messages),
                round=state.turn_count,
                language=state.locale,
            )
        except Exception as e:
            logger.warning(f"Failed to create shadow row for interview {session_id}: {e}")

    async def _mirror_progress(self, session_id: str, state: InterviewSessionState, finished: bool) -> None:
        status = SessionStatus.COMPLETED if finished else SessionStatus.ACTIVE
        try:
            await self._session_repo.update_progress(
                session_id=session_id,
                messages=list(state.display_messages),
                round=state.turn_count,
                status=status,
            )
        except Exception as e:
            logger.warning(f"Failed to update shadow row for interview {session_id}: {e}")
