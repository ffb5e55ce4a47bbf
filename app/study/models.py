import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, Integer, DateTime, ForeignKey, JSON, Uuid
from sqlalchemy.orm import relationship
from app.core.database import Base

FOCUS_TYPES = ("study", "short-break", "long-break")


class StudySession(Base):
    __tablename__ = "study_sessions"

    id = Column(Uuid(as_uuid=True), primary_key=True, index=True, default=uuid.uuid4)
    user_id = Column(String, index=True, nullable=False)

    title = Column(String, nullable=False)
    subject = Column(String, nullable=False)
    file_type = Column(String, nullable=False, default="none")  # pdf, docx, txt, none

    original_text = Column(String, nullable=True)
    summary = Column(String, nullable=True)
    quiz_questions = Column(JSON, nullable=False, default=list)  # [{question, options, correct_answer}]

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    focus_sessions = relationship(
        "FocusSession",
        back_populates="study_session",
        cascade="all, delete-orphan",
        order_by="FocusSession.position",
        lazy="selectin",
    )


class FocusSession(Base):
    __tablename__ = "focus_sessions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    study_session_id = Column(Uuid(as_uuid=True), ForeignKey("study_sessions.id"), index=True, nullable=False)
    position = Column(Integer, nullable=False, default=0)

    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True), nullable=False)
    duration = Column(Float, nullable=False)  # minutes
    type = Column(String, nullable=False, default="study")  # study, short-break, long-break

    study_session = relationship("StudySession", back_populates="focus_sessions")
