"""
Interview API endpoints.

Audition session lifecycle and personality profile retrieval.
"""

from typing import Optional

from fastapi import APIRouter, Query

from cinematic_mirror.api.deps import CurrentUser, InterviewSvc, ProfileSynth
from cinematic_mirror.models.api import SendMessageRequest, StartInterviewRequest, envelope
from cinematic_mirror.models.enums import Locale
from cinematic_mirror.prompts import get_prompt_set

router = APIRouter()


@router.post("/start")
async def start_interview(
    user: CurrentUser,
    service: InterviewSvc,
    payload: Optional[StartInterviewRequest] = None,
):
    """Open an audition; the director's opening line is returned."""
    payload = payload or StartInterviewRequest()
    locale = Locale.from_value(payload.language)
    result = await service.start_interview(
        owner_id=user.id,
        user_name=payload.user_name,
        user_gender=payload.user_gender,
        locale=locale,
    )
    return envelope(result, get_prompt_set(locale).audition_started)


@router.post("/session/{session_id}/message")
async def send_message(
    session_id: str,
    payload: SendMessageRequest,
    user: CurrentUser,
    service: InterviewSvc,
):
    """Advance the interview by one turn."""
    result = await service.send_message(session_id, payload.message)
    return envelope(result)


@router.post("/session/{session_id}/generate")
async def generate_profile(
    session_id: str,
    user: CurrentUser,
    synthesizer: ProfileSynth,
    language: Optional[str] = Query(None),
):
    """Synthesize and persist the personality profile for a finished interview."""
    profile = await synthesizer.generate_profile(session_id)
    return envelope(profile, get_prompt_set(Locale.from_value(language)).profile_generated)


@router.get("/profiles")
async def list_profiles(user: CurrentUser, service: InterviewSvc):
    """List the caller's profiles, newest first."""
    profiles = await service.list_profiles(user.id)
    return envelope(profiles)


@router.get("/profiles/{profile_id}")
async def get_profile(profile_id: str, user: CurrentUser, service: InterviewSvc):
    """Fetch one profile."""
    profile = await service.get_profile(profile_id)
    return envelope(profile)
