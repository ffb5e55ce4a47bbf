from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status
from sqlalchemy.orm import Session

from app.analysis.ai_providers.base import AIService
from app.core.database import get_db
from app.core.dependency import get_ai_service
from app.study.db import get_user_study_sessions
from app.study.schemas import (
    QuizRequest,
    QuizResponse,
    StudySessionBase,
    SummarizeRequest,
    SummarizeResponse,
    TimerRequest,
    TimerResponse,
    UploadResponse,
)
from app.study.service import generate_quiz, record_focus_session, summarize, upload_study_material

router = APIRouter(prefix="/api/study", tags=["Study"])
logger = logging.getLogger(__name__)


@router.post(
    "/upload",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload study material",
    description="Upload a PDF, DOCX or TXT file. Its text is extracted and stored on a new study session.",
    responses={
        201: {"description": "File uploaded and processed successfully."},
        400: {"description": "Missing file or fields, invalid type, or file too large."},
        500: {"description": "Failed to process uploaded file."},
    },
)
def upload_route(
    file: Optional[UploadFile] = File(None),
    user_id: Optional[str] = Form(None, alias="userId"),
    title: Optional[str] = Form(None),
    subject: Optional[str] = Form(None),
    db: Session = Depends(get_db),
) -> UploadResponse:
    try:
        study_session, preview = upload_study_material(db, file, user_id, title, subject)
        return UploadResponse(
            message="File uploaded and processed successfully",
            study_session_id=study_session.id,
            text_preview=preview,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error uploading study material: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to process uploaded file: {e}")


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    summary="Summarize study material",
    description="Summarize a stored study session (by `studySessionId`) or ad-hoc `text`.",
    responses={
        200: {"description": "Summary generated."},
        400: {"description": "Neither studySessionId nor text given."},
        404: {"description": "Study session not found."},
        500: {"description": "Failed to generate summary."},
    },
)
def summarize_route(
    request: SummarizeRequest,
    db: Session = Depends(get_db),
    ai_service: AIService = Depends(get_ai_service),
) -> SummarizeResponse:
    try:
        return SummarizeResponse(summary=summarize(db, request, ai_service))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error generating summary: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate summary")


@router.post(
    "/quiz",
    response_model=QuizResponse,
    summary="Generate a quiz",
    responses={
        200: {"description": "Quiz generated."},
        400: {"description": "Neither studySessionId nor text given, or numQuestions out of range."},
        404: {"description": "Study session not found."},
        500: {"description": "Failed to generate quiz."},
    },
)
def quiz_route(
    request: QuizRequest,
    db: Session = Depends(get_db),
    ai_service: AIService = Depends(get_ai_service),
) -> QuizResponse:
    try:
        return QuizResponse(questions=generate_quiz(db, request, ai_service))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error generating quiz: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate quiz")


@router.post(
    "/timer",
    response_model=TimerResponse,
    response_model_exclude_none=True,
    summary="Record a focus session",
    description="""
                Record a timed study or break interval. Without `studySessionId` a new
                "Focus Session" study session is created to hold it (201).
                """,
    responses={
        200: {"description": "Focus session appended to an existing study session."},
        201: {"description": "New study session created with the focus session."},
        400: {"description": "Missing or invalid fields."},
        404: {"description": "Study session not found."},
        500: {"description": "Failed to record focus session."},
    },
)
def timer_route(
    request: TimerRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> TimerResponse:
    try:
        result = record_focus_session(db, request)
        if "study_session_id" in result:
            response.status_code = status.HTTP_201_CREATED
        return TimerResponse(**result)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error recording focus session: {e}")
        raise HTTPException(status_code=500, detail="Failed to record focus session")


@router.get(
    "/{user_id}",
    response_model=List[StudySessionBase],
    summary="Get all study sessions for a user",
    description="Retrieve a user's study sessions, newest first, without the extracted document text.",
    responses={
        200: {"description": "Study sessions retrieved successfully."},
        500: {"description": "Failed to fetch study sessions."},
    },
)
def get_study_sessions_route(
    user_id: str,
    db: Session = Depends(get_db),
) -> List[StudySessionBase]:
    try:
        return get_user_study_sessions(db, user_id)
    except Exception as e:
        logger.error(f"Error fetching study sessions for user {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch study sessions")
