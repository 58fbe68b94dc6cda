"""
Request/response schemas for the HTTP layer.

Every response is wrapped in the `{success, data, message?}` envelope;
errors use `{success: false, error}`.
"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict, Field

from cinematic_mirror.models.chat import ChatMessage


class ApiError(BaseModel):
    """Error envelope."""

    success: bool = False
    error: str


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ===========================================
# Interview
# ===========================================


class StartInterviewRequest(_CamelModel):
    user_name: Optional[str] = Field(None, alias="userName")
    user_gender: Optional[str] = Field(None, alias="userGender")
    language: Optional[str] = None


class StartInterviewResult(_CamelModel):
    session_id: str = Field(..., alias="sessionId")
    initial_message: ChatMessage = Field(..., alias="initialMessage")


class SendMessageRequest(BaseModel):
    message: Optional[str] = None


class InterviewTurnResult(_CamelModel):
    response: ChatMessage
    is_finished: bool = Field(..., alias="isFinished")
    round: int


# ===========================================
# Consultation
# ===========================================


class StartConsultationRequest(_CamelModel):
    profile_id: Optional[str] = Field(None, alias="profileId")
    language: Optional[str] = None


class StartConsultationResult(_CamelModel):
    session_id: str = Field(..., alias="sessionId")
    welcome_message: ChatMessage = Field(..., alias="welcomeMessage")


class VideoChatRequest(_CamelModel):
    message: Optional[str] = None
    image_data: Optional[str] = Field(None, alias="imageData")
    profile_id: Optional[str] = Field(None, alias="profileId")
    language: Optional[str] = None


class VideoChatResult(BaseModel):
    response: str


def envelope(data: Any = None, message: Optional[str] = None) -> dict[str, Any]:
    """Build a success envelope with camelCase aliases applied."""
    payload: dict[str, Any] = {"success": True, "data": jsonable_encoder(data, by_alias=True)}
    if message is not None:
        payload["message"] = message
    return payload
