"""
Chat-completion provider interface.

Defines the contract for hosted LLM access.
Implementations: LiteLLM (SiliconFlow / any OpenAI-compatible endpoint), Gemini API.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IChatCompletionProvider(ABC):
    """Abstract interface for chat-completion providers."""

    @abstractmethod
    async def complete(
        self,
        messages: list[dict[str, str]],
        temperature: float = 0.8,
        max_tokens: int = 1000,
    ) -> str:
        """
        Run one chat completion over the full message list.

        Args:
            messages: OpenAI-style `{"role", "content"}` dicts, sent verbatim
            temperature: Sampling temperature
            max_tokens: Output token cap

        Returns:
            Reply text ("" when the provider returns no content)

        Raises:
            LLMError: The provider call failed
        """
        pass

    @abstractmethod
    async def complete_with_image(
        self,
        system_prompt: str,
        text: str,
        image_data: Optional[str] = None,
        temperature: float = 0.8,
        max_tokens: int = 300,
    ) -> str:
        """
        Run one multimodal completion with an optional image.

        Args:
            system_prompt: System instruction
            text: User text
            image_data: Image as a data URL or http(s) URL; omitted when empty
            temperature: Sampling temperature
            max_tokens: Output token cap

        Returns:
            Reply text ("" when the provider returns no content)

        Raises:
            LLMError: The provider call failed
        """
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """
        Get the human-readable model name.

        Returns:
            Model name string for logging/display
        """
        pass

    @abstractmethod
    def supports_vision(self) -> bool:
        """
        Check if the provider can accept image inputs.

        Returns:
            True if vision is supported
        """
        pass
