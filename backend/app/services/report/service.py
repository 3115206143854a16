"""
Report Service Implementation

Validates an analysis session and renders it as PDF.
"""

import asyncio
import logging
import re
from typing import Optional

from app.schemas.report import PdfReportRequest
from app.services.base import BaseService, ValidationError
from app.services.report.pdf import render_analysis_report

logger = logging.getLogger(__name__)

# Yahoo-style symbols: AAPL, BRK.B, ^GSPC, BTC-USD, GC=F
TICKER_PATTERN = re.compile(r"^[A-Z0-9.^=-]{1,20}$")


class ReportService(BaseService[PdfReportRequest, bytes]):
    """PDF export of ticker + question + AI answer + indicators."""

    @property
    def name(self) -> str:
        return "ReportService"

    async def validate_input(self, input_data: PdfReportRequest) -> PdfReportRequest:
        if input_data is None or not input_data.is_complete():
            raise ValidationError(self.name, "Missing required fields")

        ticker = input_data.ticker.strip().upper()
        if not TICKER_PATTERN.match(ticker):
            raise ValidationError(self.name, "Invalid ticker", {"ticker": input_data.ticker})
        return input_data.model_copy(update={"ticker": ticker})

    async def execute(self, input_data: PdfReportRequest) -> bytes:
        request = await self.validate_input(input_data)

        # reportlab is CPU bound, keep it off the event loop
        loop = asyncio.get_running_loop()
        pdf = await loop.run_in_executor(
            None,
            lambda: render_analysis_report(
                ticker=request.ticker,
                question=request.question,
                ai_analysis=request.ai_analysis,
                indicators=request.indicators,
            ),
        )
        logger.info(f"Rendered report for {request.ticker} ({len(pdf)} bytes)")
        return pdf

    async def health_check(self) -> bool:
        return True


# Singleton instance
_report_service: Optional[ReportService] = None


def get_report_service() -> ReportService:
    """Get the report service singleton."""
    global _report_service
    if _report_service is None:
        _report_service = ReportService()
    return _report_service
