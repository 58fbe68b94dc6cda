"""Abstract interfaces for infrastructure abstraction."""

from cinematic_mirror.interfaces.auth_provider import IAuthProvider, User
from cinematic_mirror.interfaces.interview_session_repository import IInterviewSessionRepository
from cinematic_mirror.interfaces.llm_provider import IChatCompletionProvider
from cinematic_mirror.interfaces.profile_repository import IProfileRepository

__all__ = [
    "IAuthProvider",
    "IChatCompletionProvider",
    "IInterviewSessionRepository",
    "IProfileRepository",
    "User",
]
