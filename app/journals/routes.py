from typing import List
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.analysis.ai_providers.base import AIService
from app.core.database import get_db
from app.core.dependency import get_ai_service
from app.journals.db import get_user_journals
from app.journals.schemas import (
    JournalAnalysisResponse,
    JournalAnalyzeRequest,
    JournalCreatedResponse,
    JournalEntryBase,
    JournalEntryCreate,
    JournalEntryDetail,
    JournalPromptsResponse,
)
from app.journals.service import analyze_journal, create_journal_entry, get_journal_with_content

router = APIRouter(prefix="/api/journal", tags=["Journal"])
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=JournalCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new journal entry",
    description="Store a journal entry. Only a short preview is kept in plain text; the full text is encrypted.",
    responses={
        201: {"description": "Journal entry created successfully."},
        400: {"description": "Missing content or invalid mood."},
        500: {"description": "Failed to create journal entry."},
    },
)
def create_journal_route(
    journal: JournalEntryCreate,
    db: Session = Depends(get_db),
) -> JournalCreatedResponse:
    try:
        created = create_journal_entry(db, journal)
        return JournalCreatedResponse(message="Journal entry created successfully", journal_id=created.id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating journal entry: {e}")
        raise HTTPException(status_code=500, detail="Failed to create journal entry")


@router.post(
    "/analyze",
    response_model=JournalAnalysisResponse,
    summary="Analyze a journal entry",
    description="""
                Run sentiment, emotion and keyword analysis over a stored entry (by `journalId`) or ad-hoc `content`.
                Stored entries get their sentiment and keywords updated.
                """,
    responses={
        200: {"description": "Analysis completed."},
        400: {"description": "Neither journalId nor content given."},
        404: {"description": "Journal entry not found."},
        500: {"description": "Failed to analyze journal entry."},
    },
)
def analyze_journal_route(
    request: JournalAnalyzeRequest,
    db: Session = Depends(get_db),
    ai_service: AIService = Depends(get_ai_service),
) -> JournalAnalysisResponse:
    try:
        return JournalAnalysisResponse(**analyze_journal(db, request, ai_service))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error analyzing journal entry: {e}")
        raise HTTPException(status_code=500, detail="Failed to analyze journal entry")


@router.get(
    "/prompts/{mood}",
    response_model=JournalPromptsResponse,
    summary="Get journaling prompts for a mood",
    responses={
        200: {"description": "Prompts generated."},
    },
)
def get_journal_prompts_route(
    mood: str,
    ai_service: AIService = Depends(get_ai_service),
) -> JournalPromptsResponse:
    return JournalPromptsResponse(mood=mood, prompts=ai_service.get_journal_prompts(mood))


@router.get(
    "/entry/{journal_id}",
    response_model=JournalEntryDetail,
    summary="Get a journal entry",
    description="Retrieve a single journal entry with its decrypted content.",
    responses={
        200: {"description": "Journal entry retrieved."},
        404: {"description": "Journal entry not found."},
        500: {"description": "Failed to fetch journal entry."},
    },
)
def read_journal_route(
    journal_id: str,
    db: Session = Depends(get_db),
) -> JournalEntryDetail:
    try:
        return get_journal_with_content(db, journal_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching journal entry {journal_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch journal entry")


@router.get(
    "/{user_id}",
    response_model=List[JournalEntryBase],
    summary="Get all journal entries for a user",
    description="Retrieve a user's journal entries, newest first, without encrypted content.",
    responses={
        200: {"description": "Journal entries retrieved successfully."},
        500: {"description": "Failed to fetch journal entries."},
    },
)
def get_journals_route(
    user_id: str,
    db: Session = Depends(get_db),
) -> List[JournalEntryBase]:
    try:
        return get_user_journals(db, user_id)
    except Exception as e:
        logger.error(f"Error fetching journals for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch journal entries")
