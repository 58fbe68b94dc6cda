"""
Consultation API endpoints.

Text styling consultation about a profile, plus the one-shot video-chat turn.
"""

from typing import Optional

from fastapi import APIRouter

from cinematic_mirror.api.deps import ConsultationSvc, CurrentUser
from cinematic_mirror.models.api import (
    SendMessageRequest,
    StartConsultationRequest,
    VideoChatRequest,
    VideoChatResult,
    envelope,
)
from cinematic_mirror.models.enums import Locale
from cinematic_mirror.prompts import get_prompt_set

router = APIRouter()


@router.post("/start")
async def start_consultation(
    user: CurrentUser,
    service: ConsultationSvc,
    payload: Optional[StartConsultationRequest] = None,
):
    payload = payload or StartConsultationRequest()
    locale = Locale.from_value(payload.language)
    result = await service.start_consultation(payload.profile_id, locale)
    return envelope(result, get_prompt_set(locale).consultation_started)


@router.post("/session/{session_id}/message")
async def send_message(
    session_id: str,
    payload: SendMessageRequest,
    user: CurrentUser,
    service: ConsultationSvc,
):
    response = await service.send_message(session_id, payload.message)
    return envelope(response)


@router.delete("/session/{session_id}")
async def end_consultation(session_id: str, user: CurrentUser, service: ConsultationSvc):
    locale = service.end_consultation(session_id)
    return envelope(None, get_prompt_set(locale).consultation_ended)


@router.get("/session/{session_id}/history")
async def get_history(session_id: str, user: CurrentUser, service: ConsultationSvc):
    return envelope(service.get_history(session_id))


@router.post("/video-chat")
async def video_chat(payload: VideoChatRequest, user: CurrentUser, service: ConsultationSvc):
    """One multimodal turn about the caller's current outfit."""
    response = await service.video_chat(
        message=payload.message,
        image_data=payload.image_data,
        profile_id=payload.profile_id,
        locale=Locale.from_value(payload.language),
    )
    return envelope(VideoChatResult(response=response))
