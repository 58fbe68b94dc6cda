"""
Chat message models.

Two shapes exist for the same conversation: prompt messages are the
role-tagged transcript sent verbatim to the chat-completion provider,
display messages are what the client renders and what a profile stores
as its interview history.
"""

from pydantic import BaseModel, Field

from cinematic_mirror.models.enums import MessageRole, PromptRole
from cinematic_mirror.utils.datetime_utils import iso_now


class PromptMessage(BaseModel):
    """A single transcript turn."""

    role: PromptRole
    content: str

    def to_provider(self) -> dict[str, str]:
        """Plain dict in OpenAI chat format."""
        return {"role": self.role.value, "content": self.content}


class ChatMessage(BaseModel):
    """A user-facing message record."""

    role: MessageRole
    text: str = ""
    timestamp: str = Field(default_factory=iso_now)

    @classmethod
    def from_user(cls, text: str) -> "ChatMessage":
        return cls(role=MessageRole.USER, text=text)

    @classmethod
    def from_model(cls, text: str) -> "ChatMessage":
        return cls(role=MessageRole.MODEL, text=text)
