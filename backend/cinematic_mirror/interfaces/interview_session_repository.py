"""
Interview session repository interface.

Defines the contract for shadow rows: a best-effort durable mirror of
interview sessions, used to generate a profile after a process restart.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from cinematic_mirror.models.chat import ChatMessage
from cinematic_mirror.models.enums import Locale, SessionStatus
from cinematic_mirror.models.session import InterviewSessionRecord


class IInterviewSessionRepository(ABC):
    """Abstract interface for interview shadow rows."""

    @abstractmethod
    async def create(
        self,
        session_id: str,
        user_id: str,
        messages: list[ChatMessage],
        round: int,
        language: Locale,
    ) -> InterviewSessionRecord:
        """
        Insert a new active shadow row.

        Args:
            session_id: Session ID (also the row ID)
            user_id: Owner user ID
            messages: Display messages so far
            round: Current round
            language: Interview locale

        Returns:
            Created record
        """
        pass

    @abstractmethod
    async def update_progress(
        self,
        session_id: str,
        messages: list[ChatMessage],
        round: int,
        status: SessionStatus,
    ) -> Optional[InterviewSessionRecord]:
        """
        Mirror the latest transcript, round and status.

        Returns:
            Updated record, or None if the row does not exist
        """
        pass

    @abstractmethod
    async def mark_completed(
        self,
        session_id: str,
        profile_id: str,
    ) -> Optional[InterviewSessionRecord]:
        """
        Mark the row completed with a back-reference to its profile.

        Returns:
            Updated record, or None if the row does not exist
        """
        pass

    @abstractmethod
    async def get(self, session_id: str) -> Optional[InterviewSessionRecord]:
        """
        Get a shadow row by session ID.

        Returns:
            Record or None if not found
        """
        pass
