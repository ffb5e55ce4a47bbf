import datetime
import logging
import time
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from app.analysis.ai_providers.base import AIService
from app.core.dependency import get_ai_service

router = APIRouter(prefix="/api/status", tags=["Status"])
logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()

TEST_TYPES = ("chat", "sentiment", "summary", "emotions", "prompts")
SAMPLE_TEXT = "I had a great day today. The weather was beautiful and I accomplished all my tasks."


def _now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


def run_probe(test_type: str, ai_service: AIService) -> Any:
    if test_type == "chat":
        return ai_service.get_chat_response("happy", "How can I maintain this positive feeling?")
    if test_type == "sentiment":
        return ai_service.analyze_sentiment(SAMPLE_TEXT)
    if test_type == "summary":
        return ai_service.generate_summary(SAMPLE_TEXT + " " + SAMPLE_TEXT * 5)
    if test_type == "emotions":
        return ai_service.analyze_emotions(SAMPLE_TEXT)
    return ai_service.get_journal_prompts("happy")


@router.get(
    "",
    summary="Check API service status",
    description="Probe the configured AI engine and report its configuration and server uptime.",
    responses={
        200: {"description": "Status report."},
        500: {"description": "Status check failed."},
    },
)
def status_route(ai_service: AIService = Depends(get_ai_service)) -> Dict[str, Any]:
    try:
        return {
            "aiApi": ai_service.check_status(),
            "config": {
                "provider": ai_service.model_tag,
                "hasToken": ai_service.has_token,
                "defaultModel": ai_service.default_model,
                "flashModel": ai_service.flash_model,
            },
            "server": {
                "status": "ok",
                "timestamp": _now_iso(),
                "uptime": time.monotonic() - STARTED_AT,
            },
        }
    except Exception as e:
        logger.error(f"Status check failed: {e}")
        raise HTTPException(status_code=500, detail={"status": "error", "message": str(e)})


@router.get(
    "/test/{test_type}",
    summary="Exercise one AI operation",
    description=f"Run one of {', '.join(TEST_TYPES)} against a fixed sample text.",
    responses={
        200: {"description": "Operation succeeded."},
        400: {"description": "Invalid test type."},
        500: {"description": "Operation failed."},
    },
)
def test_route(test_type: str, ai_service: AIService = Depends(get_ai_service)) -> Dict[str, Any]:
    if test_type not in TEST_TYPES:
        raise HTTPException(
            status_code=400, detail=f"Invalid test type. Valid types are: {', '.join(TEST_TYPES)}"
        )
    try:
        return {
            "type": test_type,
            "status": "success",
            "result": run_probe(test_type, ai_service),
            "timestamp": _now_iso(),
        }
    except Exception as e:
        logger.error(f"Status test '{test_type}' failed: {e}")
        raise HTTPException(
            status_code=500,
            detail={"type": test_type, "status": "error", "message": str(e), "timestamp": _now_iso()},
        )
