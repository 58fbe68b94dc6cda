"""
Gemini API provider.

Uses Gemini API with API Key (no GCP project required).
"""

import base64
import binascii
import mimetypes
from typing import Any, Optional

from google import genai
from google.genai.types import Content, GenerateContentConfig, HttpOptions, Part

from cinematic_mirror.core.config import Settings, get_settings
from cinematic_mirror.core.exceptions import LLMError
from cinematic_mirror.core.logger import logger
from cinematic_mirror.interfaces.llm_provider import IChatCompletionProvider

# OpenAI-style roles to Gemini roles; system turns become the system instruction.
_ROLE_MAP = {"user": "user", "assistant": "model"}


def _image_part(image_data: str) -> Optional[Part]:
    """Build an image Part from a data URL or a remote URL."""
    if image_data.startswith("data:"):
        header, _, payload = image_data.partition(",")
        mime_type = header[len("data:"):].split(";")[0] or "image/jpeg"
        try:
            raw = base64.b64decode(payload)
        except (binascii.Error, ValueError):
            logger.warning("Discarding undecodable image data URL")
            return None
        return Part.from_bytes(data=raw, mime_type=mime_type)
    mime_type = mimetypes.guess_type(image_data)[0] or "image/jpeg"
    return Part.from_uri(file_uri=image_data, mime_type=mime_type)


class GeminiAPIProvider(IChatCompletionProvider):
    """Gemini API provider using API Key."""

    def __init__(self, model_name: str, settings: Optional[Settings] = None):
        """
        Initialize Gemini API provider.

        Args:
            model_name: Gemini model name (e.g., "gemini-2.0-flash")
        """
        self._model_name = model_name
        self._settings = settings or get_settings()

        if not self._settings.GOOGLE_API_KEY:
            raise ValueError(
                "GOOGLE_API_KEY is required for Gemini API provider. "
                "Get your API key from https://aistudio.google.com/apikey"
            )

        client_kwargs: dict[str, Any] = {"api_key": self._settings.GOOGLE_API_KEY}
        if self._settings.LLM_TIMEOUT_SECONDS:
            # HttpOptions.timeout is in milliseconds
            client_kwargs["http_options"] = HttpOptions(
                timeout=int(self._settings.LLM_TIMEOUT_SECONDS * 1000)
            )
        self._client = genai.Client(**client_kwargs)

    async def _generate(
        self,
        contents: list[Content],
        system_instruction: Optional[str],
        temperature: float,
        max_tokens: int,
    ) -> str:
        config_kwargs: dict[str, Any] = {
            "temperature": temperature,
            "max_output_tokens": max_tokens,
        }
        if system_instruction:
            config_kwargs["system_instruction"] = system_instruction

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=contents,
                config=GenerateContentConfig(**config_kwargs),
            )
        except Exception as e:
            logger.error(f"GenAI request failed ({self._model_name}): {e}")
            raise LLMError(f"Chat completion failed: {e}") from e
        return response.text or ""

    async def complete(
        self,
        messages: list[dict[str, str]],
        temperature: float = 0.8,
        max_tokens: int = 1000,
    ) -> str:
        system_parts = [m["content"] for m in messages if m.get("role") == "system"]
        contents = [
            Content(role=_ROLE_MAP.get(m["role"], "user"), parts=[Part(text=m["content"])])
            for m in messages
            if m.get("role") != "system"
        ]
        system_instruction = "\n\n".join(system_parts) or None
        return await self._generate(contents, system_instruction, temperature, max_tokens)

    async def complete_with_image(
        self,
        system_prompt: str,
        text: str,
        image_data: Optional[str] = None,
        temperature: float = 0.8,
        max_tokens: int = 300,
    ) -> str:
        parts = [Part(text=text)]
        if image_data:
            image = _image_part(image_data)
            if image is not None:
                parts.append(image)
        contents = [Content(role="user", parts=parts)]
        return await self._generate(contents, system_prompt, temperature, max_tokens)

    def get_model_name(self) -> str:
        """Get human-readable model name."""
        return f"Gemini API ({self._model_name})"

    def supports_vision(self) -> bool:
        """Gemini models support vision."""
        return True
