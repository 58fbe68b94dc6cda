"""
Dependency injection for API endpoints.

This module provides FastAPI dependencies that inject the correct
infrastructure implementations based on environment configuration.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from cinematic_mirror.core.config import get_settings
from cinematic_mirror.interfaces.auth_provider import IAuthProvider, User
from cinematic_mirror.interfaces.interview_session_repository import IInterviewSessionRepository
from cinematic_mirror.interfaces.llm_provider import IChatCompletionProvider
from cinematic_mirror.interfaces.profile_repository import IProfileRepository
from cinematic_mirror.models.session import ConsultationSessionState, InterviewSessionState
from cinematic_mirror.services.character_catalog import CharacterCatalog, get_character_catalog
from cinematic_mirror.services.consultation_service import ConsultationService
from cinematic_mirror.services.interview_service import InterviewService
from cinematic_mirror.services.profile_synthesizer import ProfileSynthesizer
from cinematic_mirror.services.session_store import SessionStore


# ===========================================
# Repository Dependencies
# ===========================================


@lru_cache()
def get_interview_session_repository() -> IInterviewSessionRepository:
    """Get interview shadow-row repository instance."""
    from cinematic_mirror.infrastructure.local.interview_session_repository import (
        SqliteInterviewSessionRepository,
    )
    return SqliteInterviewSessionRepository()


@lru_cache()
def get_profile_repository() -> IProfileRepository:
    """Get profile repository instance."""
    from cinematic_mirror.infrastructure.local.profile_repository import SqliteProfileRepository
    return SqliteProfileRepository()


# ===========================================
# Provider Dependencies
# ===========================================


@lru_cache()
def get_llm_provider() -> IChatCompletionProvider:
    """Get chat-completion provider instance."""
    settings = get_settings()
    if settings.LLM_PROVIDER == "gemini-api":
        from cinematic_mirror.infrastructure.local.gemini_api_provider import GeminiAPIProvider
        return GeminiAPIProvider(settings.GEMINI_MODEL)

    from cinematic_mirror.infrastructure.local.litellm_provider import LiteLLMProvider
    return LiteLLMProvider(settings.LITELLM_MODEL)


@lru_cache()
def get_auth_provider() -> IAuthProvider:
    """Get auth provider instance."""
    settings = get_settings()
    if settings.AUTH_PROVIDER == "local":
        from cinematic_mirror.infrastructure.auth.local_auth import LocalAuthProvider

        return LocalAuthProvider(settings)

    from cinematic_mirror.infrastructure.local.mock_auth import MockAuthProvider
    return MockAuthProvider(enabled=True)


# ===========================================
# Session Stores
# ===========================================


@lru_cache()
def get_interview_sessions() -> SessionStore[InterviewSessionState]:
    """Process-wide interview session registry."""
    return SessionStore()


@lru_cache()
def get_consultation_sessions() -> SessionStore[ConsultationSessionState]:
    """Process-wide consultation session registry."""
    return SessionStore()


def get_catalog() -> CharacterCatalog:
    return get_character_catalog()


# ===========================================
# Services
# ===========================================


def get_interview_service(
    llm_provider: Annotated[IChatCompletionProvider, Depends(get_llm_provider)],
    sessions: Annotated[SessionStore[InterviewSessionState], Depends(get_interview_sessions)],
    session_repo: Annotated[IInterviewSessionRepository, Depends(get_interview_session_repository)],
    profile_repo: Annotated[IProfileRepository, Depends(get_profile_repository)],
) -> InterviewService:
    return InterviewService(llm_provider, sessions, session_repo, profile_repo)


def get_profile_synthesizer(
    llm_provider: Annotated[IChatCompletionProvider, Depends(get_llm_provider)],
    sessions: Annotated[SessionStore[InterviewSessionState], Depends(get_interview_sessions)],
    session_repo: Annotated[IInterviewSessionRepository, Depends(get_interview_session_repository)],
    profile_repo: Annotated[IProfileRepository, Depends(get_profile_repository)],
    catalog: Annotated[CharacterCatalog, Depends(get_catalog)],
) -> ProfileSynthesizer:
    return ProfileSynthesizer(llm_provider, sessions, session_repo, profile_repo, catalog)


def get_consultation_service(
    llm_provider: Annotated[IChatCompletionProvider, Depends(get_llm_provider)],
    sessions: Annotated[SessionStore[ConsultationSessionState], Depends(get_consultation_sessions)],
    profile_repo: Annotated[IProfileRepository, Depends(get_profile_repository)],
) -> ConsultationService:
    return ConsultationService(llm_provider, sessions, profile_repo)


# ===========================================
# Authentication
# ===========================================


async def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> User:
    """
    Get current authenticated user.

    With auth disabled, returns the development user.
    """
    if not auth_provider.is_enabled():
        return User(id="dev_user", email="dev@example.com", display_name="Developer")

    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
        )

    # Extract token from "Bearer <token>"
    try:
        scheme, token = authorization.split()
        if scheme.lower() != "bearer":
            raise ValueError("Invalid scheme")
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
        )

    try:
        return await auth_provider.verify_token(token)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


# ===========================================
# Type Aliases for Dependency Injection
# ===========================================

InterviewSvc = Annotated[InterviewService, Depends(get_interview_service)]
ProfileSynth = Annotated[ProfileSynthesizer, Depends(get_profile_synthesizer)]
ConsultationSvc = Annotated[ConsultationService, Depends(get_consultation_service)]
CurrentUser = Annotated[User, Depends(get_current_user)]
