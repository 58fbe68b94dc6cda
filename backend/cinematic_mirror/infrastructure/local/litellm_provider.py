"""
LiteLLM provider implementation.

Talks to any OpenAI-compatible endpoint through LiteLLM (SiliconFlow by
default: DeepSeek for chat, Qwen-VL for the video-chat vision turn).
"""

import os
from typing import Any, Optional

import litellm

from cinematic_mirror.core.config import Settings, get_settings
from cinematic_mirror.core.exceptions import LLMError
from cinematic_mirror.core.logger import logger
from cinematic_mirror.interfaces.llm_provider import IChatCompletionProvider


class LiteLLMProvider(IChatCompletionProvider):
    """LiteLLM provider with custom endpoint support."""

    def __init__(
        self,
        model_name: str,
        api_base: Optional[str] = None,
        api_key: Optional[str] = None,
        vision_model: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize LiteLLM provider.

        Args:
            model_name: LiteLLM model identifier (e.g., "openai/deepseek-ai/DeepSeek-V3")
            api_base: Custom API endpoint URL (optional)
                     Note: Do NOT include /chat/completions - LiteLLM adds it automatically
            api_key: Custom API key (optional, overrides settings)
            vision_model: Model used for image turns (optional, overrides settings)
        """
        self._model_name = model_name
        self._settings = settings or get_settings()
        self._api_base = api_base or self._settings.LITELLM_API_BASE or None
        self._api_key = api_key or self._settings.LITELLM_API_KEY or None
        self._vision_model = vision_model or self._settings.LITELLM_VISION_MODEL or None
        self._timeout = self._settings.LLM_TIMEOUT_SECONDS

        # Enable debug logging if DEBUG is set
        if self._settings.DEBUG:
            os.environ["LITELLM_LOG"] = "DEBUG"

    def _request_kwargs(self, model: str, messages: list[dict[str, Any]], temperature: float, max_tokens: int) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        if self._api_base:
            kwargs["api_base"] = self._api_base
        if self._api_key:
            kwargs["api_key"] = self._api_key
        if self._timeout:
            kwargs["timeout"] = self._timeout
        return kwargs

    async def _call(self, kwargs: dict[str, Any]) -> str:
        try:
            response = await litellm.acompletion(**kwargs)
        except Exception as e:
            logger.error(f"LiteLLM request failed ({kwargs['model']}): {e}")
            raise LLMError(f"Chat completion failed: {e}") from e

        choices = getattr(response, "choices", None) or []
        if not choices:
            return ""
        return choices[0].message.content or ""

    async def complete(
        self,
        messages: list[dict[str, str]],
        temperature: float = 0.8,
        max_tokens: int = 1000,
    ) -> str:
        return await self._call(
            self._request_kwargs(self._model_name, list(messages), temperature, max_tokens)
        )

    async def complete_with_image(
        self,
        system_prompt: str,
        text: str,
        image_data: Optional[str] = None,
        temperature: float = 0.8,
        max_tokens: int = 300,
    ) -> str:
        content: list[dict[str, Any]] = [{"type": "text", "text": text}]
        if image_data:
            content.append({"type": "image_url", "image_url": {"url": image_data}})

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": content},
        ]
        model = self._vision_model or self._model_name
        logger.info(f"Calling vision model: {model}")
        return await self._call(self._request_kwargs(model, messages, temperature, max_tokens))

    def get_model_name(self) -> str:
        """Get human-readable model name."""
        if self._api_base:
            return f"LiteLLM ({self._model_name} @ {self._api_base})"
        return f"LiteLLM ({self._model_name})"

    def supports_vision(self) -> bool:
        """A separate vision model is configured."""
        return bool(self._vision_model)
