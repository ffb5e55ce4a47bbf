import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from app.analysis.ai_providers.base import AIService
from app.analysis.quotes import QuoteClient
from app.chat.schemas import ChatRequest, ChatResponse, MoodFAQsResponse
from app.chat.service import MOOD_FAQS, mood_chat
from app.core.config import CHAT_RATE_LIMIT
from app.core.dependency import get_ai_service, get_quote_client
from app.core.rate_limit import limiter

router = APIRouter(prefix="/api/chat", tags=["Chat"])
logger = logging.getLogger(__name__)


@router.get(
    "/faqs",
    response_model=MoodFAQsResponse,
    summary="Get FAQs for every chat mood",
    responses={
        200: {"description": "Mood FAQs retrieved."},
        429: {"description": "Too many requests from this IP."},
        500: {"description": "Failed to get mood FAQs."},
    },
)
@limiter.limit(CHAT_RATE_LIMIT)
def get_mood_faqs_route(request: Request) -> MoodFAQsResponse:
    try:
        return MoodFAQsResponse(mood_faqs=MOOD_FAQS)
    except Exception as e:
        logger.error(f"Failed to get mood FAQs: {e}")
        raise HTTPException(status_code=500, detail="Failed to get mood FAQs")


@router.post(
    "/{mood}",
    response_model=ChatResponse,
    response_model_exclude_none=True,
    summary="Chat with the mood companion",
    description="""
                Reply to a message in a tone matched to `mood` (happy, sad, frustrated, study),
                together with a quote and mood FAQs. Falls back to canned replies when the AI or
                quote service fails.
                """,
    responses={
        200: {"description": "Reply generated (possibly a fallback)."},
        400: {"description": "Missing message or invalid mood."},
        429: {"description": "Too many requests from this IP."},
    },
)
@limiter.limit(CHAT_RATE_LIMIT)
def mood_chat_route(
    request: Request,
    mood: str,
    payload: ChatRequest,
    ai_service: AIService = Depends(get_ai_service),
    quote_client: QuoteClient = Depends(get_quote_client),
) -> ChatResponse:
    return ChatResponse(**mood_chat(mood, payload.message, ai_service, quote_client))
