"""
LLM Service Interfaces

Defines the contract for the chat assistant.
"""

from abc import abstractmethod

from app.services.base import BaseService


class ChatServiceInterface(BaseService[str, str]):
    """
    Chat Service Contract.

    INPUT: free-text question from the user

    OUTPUT: free-text answer from the LLM, using the fixed
        StockSense persona as system prompt

    ERRORS:
        - ValidationError: question missing or not a non-empty string
        - ConfigurationError: no LLM API key configured
        - ExternalAPIError: every configured provider failed

    No retries beyond the client's provider fallback, no streaming.
    """

    @property
    def name(self) -> str:
        return "ChatService"

    @abstractmethod
    async def execute(self, input_data: str) -> str:
        """Answer a stock question."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Whether any LLM provider is configured."""
        pass
