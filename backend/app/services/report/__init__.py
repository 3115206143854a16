"""
Report Service

CONTRACT:
    Input:  PdfReportRequest (ticker, question, AI analysis, indicators)
    Output: PDF bytes
"""

from app.services.report.pdf import render_analysis_report, report_filename
from app.services.report.service import ReportService, get_report_service

__all__ = [
    "render_analysis_report",
    "report_filename",
    "ReportService",
    "get_report_service",
]
