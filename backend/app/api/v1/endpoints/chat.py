"""
Chat API Endpoints

Natural-language stock questions answered by the LLM.
"""

import logging
from fastapi import APIRouter, HTTPException

from app.schemas.report import ChatRequest, ChatResponse
from app.services.base import ConfigurationError, ServiceError, ValidationError
from app.services.llm import get_chat_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ChatResponse)
async def chat(request: ChatRequest):
    """Ask the StockSense assistant a question."""
    service = get_chat_service()

    try:
        answer = await service.execute(request.question)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=e.message)
    except ServiceError as e:
        logger.error(f"Chat error: {e}")
        raise HTTPException(status_code=500, detail="Failed to get AI response")

    return ChatResponse(response=answer)
