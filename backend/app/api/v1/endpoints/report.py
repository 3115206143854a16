"""
Report API Endpoints

Export an analysis session as PDF.
"""

import logging
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from app.schemas.report import PdfReportRequest
from app.services.base import ValidationError
from app.services.report import get_report_service, report_filename

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/pdf")
async def generate_pdf(request: PdfReportRequest):
    """
    Render ticker, question, AI answer and indicators as a PDF download.
    """
    service = get_report_service()

    try:
        pdf = await service.execute(request)
        return Response(
            content=pdf,
            media_type="application/pdf",
            headers={"Content-Disposition": f"attachment; filename={report_filename(request.ticker)}"},
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"PDF generation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate PDF")
