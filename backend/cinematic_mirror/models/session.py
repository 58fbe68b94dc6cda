"""
Session state models.

In-memory state lives in plain dataclasses held by the session store.
The shadow row is the best-effort durable mirror of an interview.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from cinematic_mirror.models.chat import ChatMessage, PromptMessage
from cinematic_mirror.models.enums import Gender, Locale, SessionStatus


@dataclass
class InterviewSessionState:
    """An in-progress audition interview."""

    owner_id: str
    locale: Locale
    gender: Optional[Gender] = None
    transcript: list[PromptMessage] = field(default_factory=list)
    display_messages: list[ChatMessage] = field(default_factory=list)
    turn_count: int = 1


@dataclass
class ConsultationSessionState:
    """An in-progress styling consultation about one profile."""

    profile_id: str
    locale: Locale
    transcript: list[PromptMessage] = field(default_factory=list)
    display_messages: list[ChatMessage] = field(default_factory=list)


class InterviewSessionRecord(BaseModel):
    """Shadow row mirroring an interview in durable storage."""

    id: str
    user_id: str
    messages: list[ChatMessage] = Field(default_factory=list)
    round: int = 0
    status: SessionStatus = SessionStatus.ACTIVE
    profile_id: Optional[str] = None
    language: Locale = Locale.ZH
    created_at: datetime
    updated_at: datetime
