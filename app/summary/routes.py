import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.analysis.ai_providers.base import AIService
from app.analysis.quotes import QuoteClient
from app.core.database import get_db
from app.core.dependency import get_ai_service, get_quote_client
from app.summary.schemas import TextSummaryRequest, TextSummaryResponse, WeeklySummaryResponse
from app.summary.service import build_weekly_summary

router = APIRouter(prefix="/api/summary", tags=["Summary"])
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=TextSummaryResponse,
    summary="Summarize text",
    responses={
        200: {"description": "Summary generated."},
        400: {"description": "Text is required."},
        500: {"description": "Failed to generate summary."},
    },
)
def summarize_text_route(
    request: TextSummaryRequest,
    ai_service: AIService = Depends(get_ai_service),
) -> TextSummaryResponse:
    if not request.text:
        raise HTTPException(status_code=400, detail="Text is required")
    try:
        return TextSummaryResponse(summary=ai_service.generate_summary(request.text))
    except Exception as e:
        logger.error(f"Error summarizing text: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate summary")


@router.get(
    "/{user_id}",
    response_model=WeeklySummaryResponse,
    summary="Get a user's weekly summary",
    description="""
                Mood counts and trend, keyword cloud, focus-timer totals per subject, a motivational
                quote and an achievement line over the last 7 days.
                """,
    responses={
        200: {"description": "Weekly summary generated."},
        500: {"description": "Failed to generate weekly summary."},
    },
)
def weekly_summary_route(
    user_id: str,
    db: Session = Depends(get_db),
    quote_client: QuoteClient = Depends(get_quote_client),
) -> WeeklySummaryResponse:
    try:
        return WeeklySummaryResponse(**build_weekly_summary(db, user_id, quote_client))
    except Exception as e:
        logger.error(f"Error generating weekly summary for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate weekly summary")
