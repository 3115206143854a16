"""
Analysis Report Renderer

Lays out a fixed-format PDF from an analysis session with reportlab.
"""

import io
from datetime import datetime, timezone
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer

from app.schemas.indicators import TechnicalIndicators

REPORT_TITLE = "StockSense AI — Analysis Report"
DISCLAIMER = "Data provided for informational purposes only. Not financial advice."
NOT_AVAILABLE = "N/A"


def report_filename(ticker: str) -> str:
    return f"stocksense_{ticker.strip().upper()}_report.pdf"


def _price(value: Optional[float]) -> str:
    return f"${value}" if value is not None else NOT_AVAILABLE


def _percent(value: Optional[float]) -> str:
    return f"{value}%" if value is not None else NOT_AVAILABLE


def indicator_lines(indicators: TechnicalIndicators) -> list[str]:
    """Indicator rows as printed in the report."""
    return [
        f"SMA 50: {_price(indicators.sma50)}",
        f"SMA 200: {_price(indicators.sma200)}",
        f"Volatility (30d): {_percent(indicators.volatility)}",
        f"Momentum (ROC 14): {_percent(indicators.roc)}",
        f"Relative Strength vs S&P500: {_percent(indicators.relative_strength)}",
    ]


def _paragraphs(text: str, style: ParagraphStyle) -> list[Paragraph]:
    """One Paragraph per non-empty line, markup-escaped."""
    return [Paragraph(escape(line), style) for line in text.splitlines() if line.strip()]


def render_analysis_report(
    ticker: str,
    question: str,
    ai_analysis: str,
    indicators: TechnicalIndicators,
    generated_at: Optional[datetime] = None,
) -> bytes:
    """Render the report and return the PDF bytes."""
    generated_at = generated_at or datetime.now(timezone.utc)

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=letter,
                            rightMargin=50, leftMargin=50,
                            topMargin=50, bottomMargin=50,
                            title=REPORT_TITLE)

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle('ReportTitle', parent=styles['Heading1'],
                                 fontSize=20, fontName='Helvetica-Bold',
                                 alignment=TA_CENTER, spaceAfter=12)
    ticker_style = ParagraphStyle('Ticker', parent=styles['Heading2'],
                                  fontSize=14, fontName='Helvetica-Bold', spaceAfter=6)
    heading_style = ParagraphStyle('SectionHeading', parent=styles['Heading3'],
                                   fontSize=12, fontName='Helvetica-Bold',
                                   spaceBefore=10, spaceAfter=4)
    body_style = ParagraphStyle('Body', parent=styles['Normal'],
                                fontSize=10, fontName='Helvetica', leading=14)
    footer_style = ParagraphStyle('Footer', parent=styles['Normal'],
                                  fontSize=8, textColor=colors.gray, alignment=TA_CENTER)

    story = [
        Paragraph(escape(REPORT_TITLE), title_style),
        Paragraph(escape(f"Ticker: {ticker}"), ticker_style),
        Paragraph("User Question:", heading_style),
        *_paragraphs(question, body_style),
        Spacer(1, 0.15 * inch),
        Paragraph("Technical Indicators:", heading_style),
        *(Paragraph(escape(line), body_style) for line in indicator_lines(indicators)),
        Spacer(1, 0.15 * inch),
        Paragraph("AI Analysis:", heading_style),
        *_paragraphs(ai_analysis, body_style),
        Spacer(1, 0.3 * inch),
        Paragraph(escape(f"Generated on {generated_at.isoformat()}"), footer_style),
        Paragraph(escape(DISCLAIMER), footer_style),
    ]

    doc.build(story)
    return buffer.getvalue()
