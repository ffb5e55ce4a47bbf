import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from fastapi import HTTPException, UploadFile
from sqlalchemy.orm import Session

from app.analysis.ai_providers.base import AIService
from app.core.config import MAX_UPLOAD_BYTES
from app.core.utils import as_utc, parse_id
from app.study.db import add_focus_session, create_study_session, get_study_session, update_study_session
from app.study.file_parser import extract_text_from_file
from app.study.models import FOCUS_TYPES, FocusSession, StudySession
from app.study.schemas import QuizQuestion, QuizRequest, SummarizeRequest, TimerRequest

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES = (
    "application/pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "text/plain",
)
STORED_TEXT_LIMIT = 10000
PREVIEW_LENGTH = 200

FOCUS_SESSION_TITLE = "Focus Session"
FOCUS_SESSION_SUBJECT = "General Study"
TIMER_RECORDED_MESSAGE = "Timer session recorded successfully"


def mime_type(content_type: Optional[str]) -> str:
    """Strips parameters such as `; charset=utf-8` from a Content-Type value."""
    return (content_type or "").split(";")[0].strip().lower()


def file_type_from_name(filename: Optional[str]) -> str:
    extension = os.path.splitext(filename or "")[1].lower()
    if extension == ".pdf":
        return "pdf"
    if extension == ".docx":
        return "docx"
    return "txt"


def find_study_session(db: Session, study_session_id: Optional[str]) -> Optional[StudySession]:
    parsed = parse_id(study_session_id)
    if parsed is None:
        return None
    return get_study_session(db, parsed)


def require_study_session(db: Session, study_session_id: str) -> StudySession:
    study_session = find_study_session(db, study_session_id)
    if study_session is None:
        raise HTTPException(status_code=404, detail="Study session not found")
    return study_session


def upload_study_material(
    db: Session,
    file: Optional[UploadFile],
    user_id: Optional[str],
    title: Optional[str],
    subject: Optional[str],
) -> Tuple[StudySession, str]:
    """
    Validates an uploaded document, extracts its text in memory and opens a study session for it.

    Args:
        db (Session): SQLAlchemy session.
        file (Optional[UploadFile]): The uploaded document.
        user_id, title, subject: Form fields describing the session.

    Returns:
        Tuple[StudySession, str]: The new session and a short text preview.

    Raises:
        HTTPException: 400 for missing or invalid input, 500 when extraction fails.
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")
    if not user_id or not title or not subject:
        raise HTTPException(status_code=400, detail="userId, title, and subject are required")
    if mime_type(file.content_type) not in ALLOWED_MIME_TYPES:
        raise HTTPException(status_code=400, detail="Invalid file type. Only PDF, DOCX, and TXT files are allowed.")

    data = file.file.read(MAX_UPLOAD_BYTES + 1)
    if len(data) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=400, detail=f"File too large. Maximum size is {MAX_UPLOAD_BYTES // (1024 * 1024)}MB."
        )

    file_type = file_type_from_name(file.filename)
    try:
        text = extract_text_from_file(data, file_type)
    except ValueError as e:
        logger.error(f"Failed to extract text from {file.filename}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to process uploaded file: {e}")

    study_session = create_study_session(
        db,
        user_id=user_id,
        title=title,
        subject=subject,
        file_type=file_type,
        original_text=text[:STORED_TEXT_LIMIT],
    )
    return study_session, text[:PREVIEW_LENGTH] + "..."


def summarize(db: Session, request: SummarizeRequest, ai_service: AIService) -> str:
    if not request.study_session_id and not request.text:
        raise HTTPException(status_code=400, detail="Either studySessionId or text is required")

    study_session = None
    if request.study_session_id:
        study_session = require_study_session(db, request.study_session_id)
        text = study_session.original_text or ""
    else:
        text = request.text

    summary = ai_service.generate_summary(text)

    if study_session is not None:
        update_study_session(db, study_session, summary=summary)
    return summary


def generate_quiz(db: Session, request: QuizRequest, ai_service: AIService) -> List[QuizQuestion]:
    """
    Builds multiple-choice questions from a session's summary (or its original text) or from raw text.

    Questions generated for a stored session replace the ones kept on it.
    """
    if not request.study_session_id and not request.text:
        raise HTTPException(status_code=400, detail="Either studySessionId or text is required")

    study_session = None
    if request.study_session_id:
        study_session = require_study_session(db, request.study_session_id)
        text = study_session.summary or study_session.original_text or ""
    else:
        text = request.text

    questions = ai_service.generate_quiz_questions(text, request.num_questions)

    if study_session is not None:
        update_study_session(db, study_session, quiz_questions=[q.model_dump() for q in questions])
    return questions


def record_focus_session(db: Session, request: TimerRequest) -> Dict[str, Any]:
    """
    Stores a timed focus interval.

    With a `study_session_id` the interval is appended to that session; otherwise a
    generic "Focus Session" is opened for the user to hold it.

    Returns:
        Dict[str, Any]: message, session_id and (for a new session) study_session_id.
    """
    if not request.user_id:
        raise HTTPException(status_code=400, detail="userId is required")
    missing_duration = request.duration is None or request.duration <= 0
    if not request.start_time or not request.end_time or missing_duration or not request.type:
        raise HTTPException(status_code=400, detail="startTime, endTime, duration, and type are required")
    if request.type not in FOCUS_TYPES:
        raise HTTPException(status_code=400, detail="Invalid session type")

    data = {
        "start_time": as_utc(request.start_time),
        "end_time": as_utc(request.end_time),
        "duration": request.duration,
        "type": request.type,
    }

    if request.study_session_id:
        study_session = require_study_session(db, request.study_session_id)
        focus = add_focus_session(db, study_session, data)
        return {"message": TIMER_RECORDED_MESSAGE, "session_id": focus.id}

    study_session = create_study_session(
        db,
        user_id=request.user_id,
        title=FOCUS_SESSION_TITLE,
        subject=FOCUS_SESSION_SUBJECT,
        file_type="none",
    )
    focus = add_focus_session(db, study_session, data)
    return {
        "message": TIMER_RECORDED_MESSAGE,
        "study_session_id": study_session.id,
        "session_id": focus.id,
    }


def study_minutes(focus_sessions: List[FocusSession]) -> Tuple[float, float]:
    """Splits focus intervals into (study minutes, break minutes)."""
    study = sum(f.duration for f in focus_sessions if f.type == "study")
    breaks = sum(f.duration for f in focus_sessions if f.type != "study")
    return study, breaks
