from datetime import datetime
from uuid import UUID
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session
from app.study.models import FocusSession, StudySession


def get_study_session(db: Session, study_session_id: UUID) -> Optional[StudySession]:
    """
    Retrieves a study session by ID.

    Args:
        db (Session): SQLAlchemy session.
        study_session_id (UUID): ID of the study session.

    Returns:
        Optional[StudySession]: The session if found, else None.
    """
    return db.query(StudySession).filter(StudySession.id == study_session_id).first()


def get_user_study_sessions(db: Session, user_id: str) -> List[StudySession]:
    return (
        db.query(StudySession)
        .filter(StudySession.user_id == user_id)
        .order_by(StudySession.created_at.desc())
        .all()
    )


def get_user_study_sessions_since(db: Session, user_id: str, since: datetime) -> List[StudySession]:
    return (
        db.query(StudySession)
        .filter(StudySession.user_id == user_id, StudySession.created_at >= since)
        .order_by(StudySession.created_at.asc())
        .all()
    )


def create_study_session(
    db: Session,
    user_id: str,
    title: str,
    subject: str,
    file_type: str = "none",
    original_text: Optional[str] = None,
) -> StudySession:
    """
    Creates a new study session.

    Returns:
        StudySession: The created session.
    """
    session = StudySession(
        user_id=user_id,
        title=title,
        subject=subject,
        file_type=file_type,
        original_text=original_text,
        quiz_questions=[],
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def update_study_session(db: Session, study_session: StudySession, **fields: Any) -> StudySession:
    """
    Sets the given fields (e.g. summary, quiz_questions) and commits.
    """
    for field, value in fields.items():
        setattr(study_session, field, value)
    db.commit()
    db.refresh(study_session)
    return study_session


def add_focus_session(db: Session, study_session: StudySession, data: Dict[str, Any]) -> FocusSession:
    """
    Appends a timed focus interval to a study session.

    Args:
        db (Session): SQLAlchemy session.
        study_session (StudySession): Parent session.
        data (Dict[str, Any]): start_time, end_time, duration and type.

    Returns:
        FocusSession: The stored interval.
    """
    focus = FocusSession(position=len(study_session.focus_sessions), **data)
    study_session.focus_sessions.append(focus)
    db.commit()
    db.refresh(focus)
    return focus
