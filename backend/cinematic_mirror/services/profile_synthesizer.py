"""
Profile synthesizer.

Turns a finished interview transcript into a PersonalityProfile:

1. Load the session from memory, or from its shadow row after a restart.
2. Ask the LLM for a JSON profile, with the catalog summary as context.
3. Extract and parse the JSON; any failure is a ProfileFormatError and
   nothing is persisted.
4. Resolve matches against the catalog, assemble styling variants and
   default every missing field.
5. Persist the profile, mark the shadow row completed, drop the session.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union
from uuid import uuid4

from cinematic_mirror.core.exceptions import ProfileFormatError, SessionNotFoundError
from cinematic_mirror.core.logger import logger
from cinematic_mirror.interfaces.interview_session_repository import IInterviewSessionRepository
from cinematic_mirror.interfaces.llm_provider import IChatCompletionProvider
from cinematic_mirror.interfaces.profile_repository import IProfileRepository
from cinematic_mirror.models.chat import ChatMessage
from cinematic_mirror.models.enums import Gender, Locale, MessageRole, PromptRole
from cinematic_mirror.models.profile import (
    CharacterMatch,
    PaletteColor,
    PersonalityAngle,
    PersonalityProfile,
    StyleVariant,
    VisualAdvice,
)
from cinematic_mirror.models.session import InterviewSessionState
from cinematic_mirror.prompts import PromptSet, get_prompt_set
from cinematic_mirror.prompts.profile_prompt import CATALOG_PLACEHOLDER
from cinematic_mirror.services.character_catalog import CharacterCatalog
from cinematic_mirror.services.session_store import SessionStore
from cinematic_mirror.utils.datetime_utils import now_utc
from cinematic_mirror.utils.llm_json import JSONExtractionError, extract_json_object

PROFILE_TEMPERATURE = 0.7
PROFILE_MAX_TOKENS = 2000

CATALOG_MATCH_RATE = 85
UNKNOWN_MATCH_RATE = 80

PLACEHOLDER_IMAGE_TEMPLATE = "https://picsum.photos/seed/{seed}/800/1000"

_RAW_LOG_LIMIT = 500


def placeholder_image(seed: str) -> str:
    """Deterministic placeholder image URL for a name or title."""
    return PLACEHOLDER_IMAGE_TEMPLATE.format(seed=seed)


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _text_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [text for text in (_text(item) for item in value) if text]


def _match_rate(value: Any, default: int) -> Union[int, float]:
    """Coerce to a number in [0, 100]; missing, zero or non-numeric use `default`."""
    if isinstance(value, bool):
        return default
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return default
    if not isinstance(value, (int, float)) or not value or value != value:
        return default
    rate = min(max(value, 0), 100)
    return int(rate) if float(rate).is_integer() else rate


@dataclass
class _SynthesisSource:
    """What profile synthesis needs from a session, wherever it came from."""

    owner_id: str
    messages: list[ChatMessage]
    locale: Locale
    gender: Optional[Gender]


class ProfileSynthesizer:
    """Builds and persists personality profiles from interview transcripts."""

    def __init__(
        self,
        llm_provider: IChatCompletionProvider,
        session_store: SessionStore[InterviewSessionState],
        session_repo: IInterviewSessionRepository,
        profile_repo: IProfileRepository,
        catalog: CharacterCatalog,
    ):
        self._llm = llm_provider
        self._sessions = session_store
        self._session_repo = session_repo
        self._profile_repo = profile_repo
        self._catalog = catalog

    async def generate_profile(self, session_id: str) -> PersonalityProfile:
        """
        Synthesize, persist and return the profile for an interview.

        Raises:
            SessionNotFoundError: Neither an in-memory session nor a shadow row exists
            ProfileFormatError: The LLM reply held no parseable JSON object
            LLMError: The chat-completion call failed
        """
        if session_id in self._sessions:
            async with self._sessions.lock(session_id):
                source = await self._load_source(session_id)
                return await self._synthesize(session_id, source)

        source = await self._load_source(session_id)
        return await self._synthesize(session_id, source)

    async def _load_source(self, session_id: str) -> _SynthesisSource:
        state = self._sessions.find(session_id)
        if state is not None:
            return _SynthesisSource(
                owner_id=state.owner_id,
                messages=list(state.display_messages),
                locale=state.locale,
                gender=state.gender,
            )

        record = await self._session_repo.get(session_id)
        if record is None:
            raise SessionNotFoundError(session_id)
        logger.info(f"Interview {session_id} not in memory, recovered from shadow row")
        return _SynthesisSource(
            owner_id=record.user_id,
            messages=list(record.messages),
            locale=record.language,
            gender=None,
        )

    async def _synthesize(self, session_id: str, source: _SynthesisSource) -> PersonalityProfile:
        prompts = get_prompt_set(source.locale)
        catalog = self._catalog.for_gender(source.gender)

        raw = await self._llm.complete(
            [
                {"role": PromptRole.SYSTEM.value, "content": prompts.analyst_system},
                {"role": PromptRole.USER.value, "content": self.build_prompt(prompts, catalog, source.messages)},
            ],
            temperature=PROFILE_TEMPERATURE,
            max_tokens=PROFILE_MAX_TOKENS,
        )

        try:
            data = extract_json_object(raw)
        except JSONExtractionError as e:
            logger.error(
                f"Unparseable profile output for interview {session_id}: {e}; "
                f"raw={raw[:_RAW_LOG_LIMIT]!r}"
            )
            raise ProfileFormatError(prompts.profile_format_error, raw_output=raw) from e

        profile = self.assemble_profile(data, source.owner_id, source.messages, prompts, catalog)
        saved = await self._profile_repo.create(profile)
        logger.info(f"Profile {saved.id} generated from interview {session_id}")

        await self._mark_completed(session_id, saved.id)
        self._sessions.delete(session_id)
        return saved

    # ===========================================
    # Prompt
    # ===========================================

    @staticmethod
    def render_transcript(prompts: PromptSet, messages: list[ChatMessage]) -> str:
        lines = []
        for message in messages:
            speaker = prompts.subject_label if message.role == MessageRole.USER else prompts.director_label
            lines.append(f"{speaker}: {message.text}")
        return "\n\n".join(lines)

    def build_prompt(self, prompts: PromptSet, catalog: CharacterCatalog, messages: list[ChatMessage]) -> str:
        return (
            prompts.profile_prompt.replace(CATALOG_PLACEHOLDER, catalog.summaries_json())
            + prompts.transcript_header
            + self.render_transcript(prompts, messages)
        )

    # ===========================================
    # Assembly
    # ===========================================

    def assemble_profile(
        self,
        data: dict[str, Any],
        owner_id: str,
        messages: list[ChatMessage],
        prompts: PromptSet,
        catalog: Optional[CharacterCatalog] = None,
    ) -> PersonalityProfile:
        """Build a fully-defaulted profile from parsed LLM output."""
        catalog = catalog or self._catalog
        matches = self.resolve_matches(data.get("matches"), catalog, prompts)
        return PersonalityProfile(
            id=str(uuid4()),
            user_id=owner_id,
            title=_text(data.get("title")) or prompts.default_title,
            subtitle=_text(data.get("subtitle")) or prompts.default_subtitle,
            analysis=_text(data.get("analysis")),
            narrative=_text(data.get("narrative")),
            angles=self._angles(data.get("angles")),
            visual_advice=self._visual_advice(data.get("visualAdvice")),
            matches=matches,
            styling_variants=self.assemble_stylings(matches, data, catalog),
            interview_history=list(messages),
            created_at=now_utc(),
        )

    @staticmethod
    def resolve_matches(raw_matches: Any, catalog: CharacterCatalog, prompts: PromptSet) -> list[CharacterMatch]:
        """
        Resolve LLM match entries against the catalog by id or name.

        Unresolved entries keep the LLM's name and movie with a placeholder
        image. Entries that are not objects, or carry neither a name nor a
        character id, are dropped.
        """
        if not isinstance(raw_matches, list):
            return []

        resolved: list[CharacterMatch] = []
        for entry in raw_matches:
            if not isinstance(entry, dict):
                continue
            character_id = _text(entry.get("characterId"))
            name = _text(entry.get("name"))
            description = _text(entry.get("description"))

            character = catalog.find(character_id=character_id or None, name=name or None)
            if character is not None:
                styling = character.first_styling
                resolved.append(
                    CharacterMatch(
                        name=character.name,
                        movie=character.movie,
                        match_rate=_match_rate(entry.get("matchRate"), CATALOG_MATCH_RATE),
                        description=description,
                        image=styling.image if styling else "",
                    )
                )
                continue

            if not name and not character_id:
                continue
            name = name or prompts.unknown_role
            resolved.append(
                CharacterMatch(
                    name=name,
                    movie=_text(entry.get("movie")) or prompts.unknown_movie,
                    match_rate=_match_rate(entry.get("matchRate"), UNKNOWN_MATCH_RATE),
                    description=description,
                    image=placeholder_image(name),
                )
            )
        return resolved

    @staticmethod
    def assemble_stylings(
        matches: list[CharacterMatch],
        data: dict[str, Any],
        catalog: CharacterCatalog,
    ) -> list[StyleVariant]:
        """Catalog first-stylings in match order, then LLM custom styles. Never merged."""
        variants: list[StyleVariant] = []
        for match in matches:
            character = catalog.find_by_name(match.name)
            if character is not None and character.first_styling is not None:
                variants.append(character.first_styling.to_variant())

        extra = data.get("stylingVariants")
        if extra is None:
            extra = data.get("customStyles")
        if not isinstance(extra, list):
            return variants

        for entry in extra:
            if not isinstance(entry, dict):
                continue
            title = _text(entry.get("title"))
            if not title:
                continue
            variants.append(
                StyleVariant(
                    title=title,
                    subtitle=_text(entry.get("subtitle")),
                    image=_text(entry.get("image")) or placeholder_image(title),
                    palette=ProfileSynthesizer._palette(entry.get("palette")),
                    materials=_text_list(entry.get("materials")),
                    tailoring=_text_list(entry.get("tailoring")),
                    script_snippet=_text(entry.get("scriptSnippet")),
                    director_note=_text(entry.get("directorNote")),
                )
            )
        return variants

    @staticmethod
    def _palette(value: Any) -> list[PaletteColor]:
        if not isinstance(value, list):
            return []
        colors = []
        for item in value:
            if not isinstance(item, dict):
                continue
            colors.append(
                PaletteColor(
                    hex=_text(item.get("hex")),
                    name=_text(item.get("name")),
                    en_name=_text(item.get("enName")),
                )
            )
        return colors

    @staticmethod
    def _angles(value: Any) -> list[PersonalityAngle]:
        if not isinstance(value, list):
            return []
        return [
            PersonalityAngle(label=_text(item.get("label")), essence=_text(item.get("essence")))
            for item in value
            if isinstance(item, dict)
        ]

    @staticmethod
    def _visual_advice(value: Any) -> VisualAdvice:
        if not isinstance(value, dict):
            return VisualAdvice()
        return VisualAdvice(
            camera=_text(value.get("camera")),
            lighting=_text(value.get("lighting")),
            motion=_text(value.get("motion")),
        )

    async def _mark_completed(self, session_id: str, profile_id: str) -> None:
        try:
            await self._session_repo.mark_completed(session_id, profile_id)
        except Exception as e:
            logger.warning(f"Failed to mark shadow row for interview {session_id} completed: {e}")
