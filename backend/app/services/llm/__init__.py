"""
LLM Orchestration Service

CONTRACT:
    Chat:
        Input:  free-text question
        Output: free-text answer

RESPONSIBILITIES:
    - Provider selection (OpenAI / Anthropic / Gemini)
    - Fallback to a secondary configured provider
    - Fixed StockSense assistant persona

LLM USAGE:
    - Chat: GPT-4o by default

CRITICAL RULES:
    - LLM does NO math - indicator values come from the Indicator Engine
    - Missing API keys surface as a configuration error, never a crash
"""

from app.services.llm.interface import ChatServiceInterface
from app.services.llm.client import (
    LLMClient,
    LLMConfig,
    LLMProvider,
    LLMResponse,
    get_llm_client,
)
from app.services.llm.chat import ChatService, get_chat_service

__all__ = [
    # Interfaces
    "ChatServiceInterface",
    # Client
    "LLMClient",
    "LLMConfig",
    "LLMProvider",
    "LLMResponse",
    "get_llm_client",
    # Services
    "ChatService",
    "get_chat_service",
]
