"""
API v1 Router

All API endpoints for the dashboard frontend.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, market, news, chat, report

router = APIRouter()

# Include all endpoint routers
router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
router.include_router(market.router, prefix="/market", tags=["Market Data"])
router.include_router(news.router, prefix="/news", tags=["News & Sentiment"])
router.include_router(chat.router, prefix="/chat", tags=["AI Chat"])
router.include_router(report.router, prefix="/report", tags=["Reports"])
