"""
Custom exceptions for the application.
"""

from typing import Any, Optional


class MirrorError(Exception):
    """Base exception for Cinematic Mirror."""

    def __init__(self, message: str, details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(MirrorError):
    """Resource not found."""

    pass


class SessionNotFoundError(NotFoundError):
    """Interview or consultation session is not held in memory (or storage)."""

    def __init__(self, session_id: str):
        super().__init__("Session not found or expired", details={"session_id": session_id})
        self.session_id = session_id


class ProfileNotFoundError(NotFoundError):
    """Personality profile does not exist."""

    def __init__(self, profile_id: str):
        super().__init__("Profile not found", details={"profile_id": profile_id})
        self.profile_id = profile_id


class ValidationError(MirrorError):
    """Validation error."""

    pass


class LLMError(MirrorError):
    """Chat-completion provider failure."""

    pass


class ProfileFormatError(LLMError):
    """LLM output could not be parsed into a profile."""

    def __init__(self, message: str, raw_output: str):
        super().__init__(message, details={"raw_output": raw_output})
        self.raw_output = raw_output


class InfrastructureError(MirrorError):
    """Infrastructure-related error (DB, external services, etc.)."""

    pass


class AuthenticationError(MirrorError):
    """Authentication failed."""

    pass


class AuthorizationError(MirrorError):
    """Authorization failed."""

    pass
