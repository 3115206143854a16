"""
CONTRACT 3: AI Chat and Analysis Report

Chat question/answer and the payload used to export an analysis
session as PDF.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field

from app.schemas.market import CamelModel
from app.schemas.indicators import TechnicalIndicators


class ChatRequest(BaseModel):
    """Question for the assistant. Type is checked by the chat service."""

    question: Any = None


class ChatResponse(BaseModel):
    response: str


class PdfReportRequest(CamelModel):
    """Everything needed to render one analysis report."""

    ticker: Optional[str] = None
    question: Optional[str] = None
    ai_analysis: Optional[str] = Field(None, description="Answer previously returned by /chat")
    indicators: Optional[TechnicalIndicators] = None

    def is_complete(self) -> bool:
        return bool(self.ticker and self.question and self.ai_analysis and self.indicators)
