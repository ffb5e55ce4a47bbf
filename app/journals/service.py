import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.analysis.ai_providers.base import AIService
from app.analysis.service import analyze_text
from app.core.encryption import decrypt_text, encrypt_text
from app.core.utils import parse_id
from app.journals.db import create_journal, get_journal, update_journal_analysis
from app.journals.models import JOURNAL_MOODS, JournalEntry
from app.journals.schemas import JournalAnalyzeRequest, JournalEntryCreate, JournalEntryDetail

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 200
DEFAULT_USER_ID = "local"


def make_preview(content: str) -> str:
    return content[:PREVIEW_LENGTH] + "..."


def create_journal_entry(db: Session, payload: JournalEntryCreate) -> JournalEntry:
    """
    Validates and stores a journal entry with its full text encrypted.

    Raises:
        HTTPException: 400 when content is missing or the mood is unknown.
    """
    if not payload.content:
        raise HTTPException(status_code=400, detail="Journal content is required")

    mood = payload.mood or "neutral"
    if mood not in JOURNAL_MOODS:
        raise HTTPException(
            status_code=400, detail=f"Invalid mood. Valid moods are: {', '.join(JOURNAL_MOODS)}"
        )

    return create_journal(
        db,
        user_id=payload.user_id or DEFAULT_USER_ID,
        preview=make_preview(payload.content),
        encrypted_content=encrypt_text(payload.content),
        mood=mood,
    )


def find_journal(db: Session, journal_id: Optional[str]) -> Optional[JournalEntry]:
    parsed = parse_id(journal_id)
    if parsed is None:
        return None
    return get_journal(db, parsed)


def get_journal_with_content(db: Session, journal_id: str) -> JournalEntryDetail:
    """
    Loads an entry and swaps the preview for the decrypted full text.

    Raises:
        HTTPException: 404 when the entry does not exist.
    """
    journal = find_journal(db, journal_id)
    if journal is None:
        raise HTTPException(status_code=404, detail="Journal entry not found")

    detail = JournalEntryDetail.model_validate(journal)
    return detail.model_copy(update={"content": decrypt_text(journal.encrypted_content)})


def analyze_journal(db: Session, request: JournalAnalyzeRequest, ai_service: AIService) -> Dict[str, Any]:
    """
    Analyzes a stored entry or ad-hoc content.

    When a stored entry is analyzed, its sentiment and keywords are written back.
    """
    if not request.journal_id and not request.content:
        raise HTTPException(status_code=400, detail="Either journalId or content is required")

    journal = None
    if request.journal_id:
        journal = find_journal(db, request.journal_id)
        if journal is None:
            raise HTTPException(status_code=404, detail="Journal entry not found")
        text = decrypt_text(journal.encrypted_content)
    else:
        text = request.content

    result = analyze_text(text, ai_service)

    if journal is not None:
        update_journal_analysis(db, journal, result["sentiment"], result["keywords"])
        logger.info(f"Stored analysis for journal {journal.id}: {result['sentiment']}")

    return result
