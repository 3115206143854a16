"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "StockSense Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (Frontend URL)
    frontend_url: str = "http://localhost:5173"
    allowed_origins: list[str] = ["http://localhost:5173"]

    # Sessions
    session_secret_key: str = "change-me-in-production"
    session_cookie_name: str = "stocksense_session"
    session_max_age: int = 60 * 60 * 24 * 7  # 1 week
    password_hash_iterations: int = 390_000

    # LLM Providers
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    llm_primary_provider: str = "openai"  # Options: openai, anthropic, gemini
    llm_chat_model: str = "gpt-4o"
    llm_anthropic_model: str = "claude-3-5-sonnet-latest"
    llm_gemini_model: str = "gemini-2.5-flash"
    llm_max_tokens: int = 1024
    llm_temperature: Optional[float] = None  # provider default when unset

    # News API
    news_api_key: Optional[str] = None
    news_api_base_url: str = "https://newsapi.org/v2"
    news_query: str = "stocks business"
    news_page_size: int = 20
    news_max_articles: int = 6

    # Stock lookup
    benchmark_symbol: str = "SPY"
    history_months: int = 6
    benchmark_months: int = 1

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
