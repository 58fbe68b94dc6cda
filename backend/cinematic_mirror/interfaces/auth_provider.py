"""
Authentication provider interface.
"""

from abc import ABC, abstractmethod

from pydantic import BaseModel


class User(BaseModel):
    """Authenticated caller."""

    id: str
    email: str = ""
    display_name: str = ""


class IAuthProvider(ABC):
    """Abstract interface for bearer-token verification."""

    @abstractmethod
    async def verify_token(self, token: str) -> User:
        """
        Verify a bearer token.

        Raises:
            AuthenticationError: Token is invalid or expired
        """
        pass

    @abstractmethod
    def is_enabled(self) -> bool:
        """Check if authentication is enforced."""
        pass
