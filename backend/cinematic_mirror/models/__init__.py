"""Pydantic models (schemas) for the application."""

from cinematic_mirror.models.enums import (
    Gender,
    Locale,
    MessageRole,
    PromptRole,
    SessionStatus,
)
from cinematic_mirror.models.chat import ChatMessage, PromptMessage
from cinematic_mirror.models.character import CatalogCharacter, StylingOption
from cinematic_mirror.models.profile import (
    CharacterMatch,
    PaletteColor,
    PersonalityAngle,
    PersonalityProfile,
    StyleVariant,
    VisualAdvice,
)
from cinematic_mirror.models.session import (
    ConsultationSessionState,
    InterviewSessionRecord,
    InterviewSessionState,
)

__all__ = [
    # Enums
    "Gender",
    "Locale",
    "MessageRole",
    "PromptRole",
    "SessionStatus",
    # Chat
    "ChatMessage",
    "PromptMessage",
    # Catalog
    "CatalogCharacter",
    "StylingOption",
    # Profile
    "CharacterMatch",
    "PaletteColor",
    "PersonalityAngle",
    "PersonalityProfile",
    "StyleVariant",
    "VisualAdvice",
    # Sessions
    "ConsultationSessionState",
    "InterviewSessionRecord",
    "InterviewSessionState",
]
