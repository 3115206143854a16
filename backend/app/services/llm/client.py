"""
LLM Client Abstraction

Provides unified interface for OpenAI, Anthropic Claude and Google Gemini.
Handles provider switching and fallback.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import asyncio
import logging

logger = logging.getLogger(__name__)


class LLMProvider(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GEMINI = "gemini"


@dataclass
class LLMConfig:
    """Configuration for LLM client."""

    provider: LLMProvider
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    openai_model: str = "gpt-4o"
    anthropic_model: str = "claude-3-5-sonnet-latest"
    gemini_model: str = "gemini-2.5-flash"
    max_tokens: int = 1024
    temperature: Optional[float] = None


@dataclass
class LLMResponse:
    """Response from LLM."""

    content: str
    model: str
    provider: LLMProvider
    usage: dict


class BaseLLMClient(ABC):
    """Abstract base class for LLM clients."""

    provider: LLMProvider

    @abstractmethod
    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Generate a response from the LLM."""
        pass


class OpenAIClient(BaseLLMClient):
    """OpenAI GPT client implementation."""

    provider = LLMProvider.OPENAI

    def __init__(self, config: LLMConfig):
        self.config = config
        self._client = None

    def _get_client(self):
        """Lazy initialization of OpenAI client."""
        if self._client is None:
            try:
                import openai

                self._client = openai.AsyncOpenAI(api_key=self.config.openai_api_key)
            except ImportError:
                raise RuntimeError(
                    "openai package not installed. Run: pip install openai"
                )
        return self._client

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Generate response using GPT."""
        client = self._get_client()
        model = self.config.openai_model

        kwargs = {
            "model": model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": max_tokens or self.config.max_tokens,
        }
        if self.config.temperature is not None:
            kwargs["temperature"] = self.config.temperature

        try:
            response = await client.chat.completions.create(**kwargs)
        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            raise

        usage = response.usage
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=model,
            provider=self.provider,
            usage={
                "prompt_tokens": usage.prompt_tokens if usage else 0,
                "completion_tokens": usage.completion_tokens if usage else 0,
            },
        )


class AnthropicClient(BaseLLMClient):
    """Anthropic Claude client implementation."""

    provider = LLMProvider.ANTHROPIC

    def __init__(self, config: LLMConfig):
        self.config = config
        self._client = None

    def _get_client(self):
        """Lazy initialization of Anthropic client."""
        if self._client is None:
            try:
                import anthropic

                self._client = anthropic.AsyncAnthropic(
                    api_key=self.config.anthropic_api_key
                )
            except ImportError:
                raise RuntimeError(
                    "anthropic package not installed. Run: pip install anthropic"
                )
        return self._client

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Generate response using Claude."""
        client = self._get_client()
        model = self.config.anthropic_model

        kwargs = {
            "model": model,
            "max_tokens": max_tokens or self.config.max_tokens,
            "system": system_prompt,
            "messages": [{"role": "user", "content": user_prompt}],
        }
        if self.config.temperature is not None:
            kwargs["temperature"] = self.config.temperature

        try:
            response = await client.messages.create(**kwargs)
        except Exception as e:
            logger.error(f"Anthropic API error: {e}")
            raise

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        return LLMResponse(
            content=text,
            model=model,
            provider=self.provider,
            usage={
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
            },
        )


class GeminiClient(BaseLLMClient):
    """Google Gemini client implementation."""

    provider = LLMProvider.GEMINI

    def __init__(self, config: LLMConfig):
        self.config = config
        self._model = None

    def _get_model(self):
        """Lazy initialization of the Gemini model."""
        if self._model is None:
            try:
                import google.generativeai as genai
            except ImportError:
                raise RuntimeError(
                    "google-generativeai package not installed. Run: pip install google-generativeai"
                )
            genai.configure(api_key=self.config.gemini_api_key)
            self._model = genai.GenerativeModel(self.config.gemini_model)
        return self._model

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Generate response using Gemini."""
        model = self._get_model()

        # Gemini takes a single prompt here
        full_prompt = f"{system_prompt}\n\n---\n\n{user_prompt}"
        generation_config = {"max_output_tokens": max_tokens or self.config.max_tokens}
        if self.config.temperature is not None:
            generation_config["temperature"] = self.config.temperature

        try:
            # generate_content is synchronous
            loop = asyncio.get_running_loop()
            response = await loop.run_in_executor(
                None,
                lambda: model.generate_content(full_prompt, generation_config=generation_config),
            )
        except Exception as e:
            logger.error(f"Gemini API error: {e}")
            raise

        usage = getattr(response, "usage_metadata", None)
        return LLMResponse(
            content=response.text,
            model=self.config.gemini_model,
            provider=self.provider,
            usage={
                "prompt_tokens": usage.prompt_token_count if usage else 0,
                "completion_tokens": usage.candidates_token_count if usage else 0,
            },
        )


CLIENT_CLASSES = {
    LLMProvider.OPENAI: OpenAIClient,
    LLMProvider.ANTHROPIC: AnthropicClient,
    LLMProvider.GEMINI: GeminiClient,
}


class LLMClient:
    """
    Unified LLM client with provider switching and fallback.

    Primary provider is tried first.
    Falls back to the next configured provider on failure.
    """

    def __init__(self, config: LLMConfig):
        self.config = config
        self._primary: Optional[BaseLLMClient] = None
        self._fallback: Optional[BaseLLMClient] = None
        self._setup_clients()

    def _has_key(self, provider: LLMProvider) -> bool:
        return bool(getattr(self.config, f"{provider.value}_api_key"))

    def _setup_clients(self):
        """Setup primary and fallback clients based on config."""
        if self._has_key(self.config.provider):
            self._primary = CLIENT_CLASSES[self.config.provider](self.config)

        for provider in LLMProvider:
            if provider != self.config.provider and self._has_key(provider):
                self._fallback = CLIENT_CLASSES[provider](self.config)
                break

        if not self.is_configured:
            logger.warning("No LLM API keys configured. Chat disabled.")

    @property
    def is_configured(self) -> bool:
        return self._primary is not None or self._fallback is not None

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """
        Generate LLM response with automatic fallback.

        Tries primary provider first, falls back to secondary on failure.
        """
        if not self.is_configured:
            raise RuntimeError("No LLM providers configured")

        if self._primary:
            try:
                return await self._primary.generate(system_prompt, user_prompt, max_tokens)
            except Exception as e:
                if self._fallback is None:
                    raise
                logger.warning(f"Primary LLM failed: {e}, trying fallback...")

        return await self._fallback.generate(system_prompt, user_prompt, max_tokens)

    def get_active_provider(self) -> Optional[LLMProvider]:
        """Get the provider that will be tried first."""
        if self._primary:
            return self._primary.provider
        if self._fallback:
            return self._fallback.provider
        return None


# Singleton instance management
_llm_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """Get or create LLM client singleton."""
    global _llm_client
    if _llm_client is None:
        from app.core.config import settings

        config = LLMConfig(
            provider=LLMProvider(settings.llm_primary_provider),
            openai_api_key=settings.openai_api_key,
            anthropic_api_key=settings.anthropic_api_key,
            gemini_api_key=settings.gemini_api_key,
            openai_model=settings.llm_chat_model,
            anthropic_model=settings.llm_anthropic_model,
            gemini_model=settings.llm_gemini_model,
            max_tokens=settings.llm_max_tokens,
            temperature=settings.llm_temperature,
        )
        _llm_client = LLMClient(config)
    return _llm_client
