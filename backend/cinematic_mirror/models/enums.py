"""
Enum definitions for the application.
"""

from enum import Enum
from typing import Optional


class Locale(str, Enum):
    """Interface language. Drives prompt content and default strings only."""

    ZH = "zh"
    EN = "en"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "Locale":
        """Normalize client input; anything unknown falls back to Chinese."""
        if not value:
            return cls.ZH
        normalized = value.strip().lower().replace("_", "-").split("-")[0]
        for candidate in cls:
            if candidate.value == normalized:
                return candidate
        return cls.ZH


class Gender(str, Enum):
    """Gender hint supplied at interview start."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["Gender"]:
        if not value:
            return None
        normalized = value.strip().lower()
        for candidate in cls:
            if candidate.value == normalized:
                return candidate
        return None


class SessionStatus(str, Enum):
    """Shadow row status."""

    ACTIVE = "active"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class MessageRole(str, Enum):
    """Role of a user-facing display message."""

    USER = "user"
    MODEL = "model"


class PromptRole(str, Enum):
    """Role of a transcript turn sent to the chat-completion provider."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
