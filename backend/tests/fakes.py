"""
Scripted chat-completion provider for tests.
"""

import asyncio
from typing import Optional, Union

from cinematic_mirror.interfaces.llm_provider import IChatCompletionProvider

DEFAULT_REPLY = "Tell me more about that."


class FakeChatProvider(IChatCompletionProvider):
    """Returns queued replies in order, then DEFAULT_REPLY. Queued exceptions are raised."""

    def __init__(self, replies: Optional[list[Union[str, Exception]]] = None):
        self.replies: list[Union[str, Exception]] = list(replies or [])
        self.image_replies: list[Union[str, Exception]] = []
        self.calls: list[dict] = []
        self.image_calls: list[dict] = []

    def queue(self, *replies: Union[str, Exception]) -> None:
        self.replies.extend(replies)

    def queue_image(self, *replies: Union[str, Exception]) -> None:
        self.image_replies.extend(replies)

    @staticmethod
    def _next(queue: list[Union[str, Exception]]) -> str:
        if not queue:
            return DEFAULT_REPLY
        reply = queue.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def complete(self, messages, temperature=0.8, max_tokens=1000):
        self.calls.append(
            {
                "messages": [dict(m) for m in messages],
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        return self._next(self.replies)

    async def complete_with_image(
        self,
        system_prompt,
        text,
        image_data=None,
        temperature=0.8,
        max_tokens=300,
    ):
        self.image_calls.append(
            {
                "system_prompt": system_prompt,
                "text": text,
                "image_data": image_data,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        return self._next(self.image_replies)

    def get_model_name(self) -> str:
        return "fake"

    def supports_vision(self) -> bool:
        return True


class GatedChatProvider(FakeChatProvider):
    """FakeChatProvider whose text completions can be held open until released."""

    def __init__(self, replies: Optional[list[Union[str, Exception]]] = None):
        super().__init__(replies)
        self.entered = asyncio.Event()
        self.release = asyncio.Event()
        self.release.set()

    def hold(self) -> None:
        self.entered.clear()
        self.release.clear()

    async def complete(self, messages, temperature=0.8, max_tokens=1000):
        self.entered.set()
        await self.release.wait()
        return await super().complete(messages, temperature, max_tokens)
