"""
StockSense Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from app.core.config import settings
from app.api.v1 import router as api_v1_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    from app.services.llm import get_llm_client
    provider = get_llm_client().get_active_provider()
    logger.info(f"Chat provider: {provider.value if provider else 'disabled'}")
    if not settings.news_api_key:
        logger.warning("NEWS_API_KEY not set - news endpoint will return errors")

    yield

    # Shutdown
    logger.info("Shutting down...")
    from app.services.news import get_news_service
    await get_news_service().close()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    StockSense Financial Dashboard API

    ## Architecture
    - **Market Data**: Quotes and daily history from Yahoo Finance
    - **Indicator Engine**: SMA 50/200, volatility, ROC, relative strength (pure Python/NumPy)
    - **News**: NewsAPI headlines with keyword sentiment
    - **AI Chat**: LLM-powered stock Q&A
    - **Reports**: PDF export of an analysis session

    ## Core Principles
    - Indicators are computed, never generated by the LLM
    - A null indicator means "not enough history", not "request failed"
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware - allow the dashboard dev servers
cors_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
# Add any additional origins from settings
if settings.allowed_origins:
    cors_origins.extend([o for o in settings.allowed_origins if o not in cors_origins])

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key,
    session_cookie=settings.session_cookie_name,
    max_age=settings.session_max_age,
    https_only=settings.environment == "production",
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "StockSense Backend API",
        "docs": "/docs",
        "health": "/health",
    }
