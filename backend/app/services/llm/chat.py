"""
Chat Service Implementation

Proxies dashboard questions to the configured LLM provider.
"""

import logging
from typing import Any, Optional

from app.core.config import settings
from app.services.base import ConfigurationError, ExternalAPIError, ValidationError
from app.services.llm.client import LLMClient, get_llm_client
from app.services.llm.interface import ChatServiceInterface
from app.services.llm.prompts import CHAT_SYSTEM_PROMPT, EMPTY_RESPONSE_FALLBACK

logger = logging.getLogger(__name__)


class ChatService(ChatServiceInterface):
    """Single-turn chat with the StockSense persona."""

    def __init__(self, llm_client: Optional[LLMClient] = None):
        self._llm = llm_client

    @property
    def llm(self) -> LLMClient:
        if self._llm is None:
            self._llm = get_llm_client()
        return self._llm

    async def validate_input(self, input_data: Any) -> str:
        if not isinstance(input_data, str) or not input_data.strip():
            raise ValidationError(self.name, "Question is required")
        return input_data

    async def execute(self, input_data: Any) -> str:
        question = await self.validate_input(input_data)

        if not self.llm.is_configured:
            raise ConfigurationError(self.name, "LLM API key not configured")

        try:
            response = await self.llm.generate(
                system_prompt=CHAT_SYSTEM_PROMPT,
                user_prompt=question,
                max_tokens=settings.llm_max_tokens,
            )
        except Exception as e:
            logger.error(f"Chat completion failed: {e}")
            raise ExternalAPIError(self.name, "Failed to get AI response", {"error": str(e)}) from e

        logger.info(f"Chat answered by {response.provider.value}/{response.model}")
        return response.content or EMPTY_RESPONSE_FALLBACK

    async def health_check(self) -> bool:
        return self.llm.is_configured


# Singleton instance
_chat_service: Optional[ChatService] = None


def get_chat_service() -> ChatService:
    """Get the chat service singleton."""
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService()
    return _chat_service
