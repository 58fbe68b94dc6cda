"""
Personality profile repository interface.

Profiles are created once and read many times; there is no update path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from cinematic_mirror.models.profile import PersonalityProfile


class IProfileRepository(ABC):
    """Abstract interface for profile persistence."""

    @abstractmethod
    async def create(self, profile: PersonalityProfile) -> PersonalityProfile:
        """
        Persist a newly synthesized profile.

        Raises:
            InfrastructureError: The write failed
        """
        pass

    @abstractmethod
    async def list_for_user(
        self,
        user_id: str,
        limit: int = 100,
        offset: int = 0,
    ) -> list[PersonalityProfile]:
        """
        List a user's profiles, newest first.

        Args:
            user_id: Owner user ID
            limit: Max profiles
            offset: Pagination offset

        Returns:
            List of profiles
        """
        pass

    @abstractmethod
    async def get(self, profile_id: str) -> Optional[PersonalityProfile]:
        """
        Get a profile by ID.

        Returns:
            Profile or None if not found
        """
        pass
