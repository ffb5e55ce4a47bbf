from typing import Optional, List
from uuid import UUID
from datetime import datetime
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


class QuizQuestion(BaseSchema):
    question: str
    options: List[str]
    correct_answer: int = Field(ge=0, le=3)


class FocusSessionBase(BaseSchema):
    id: UUID
    start_time: datetime
    end_time: datetime
    duration: float
    type: str


class StudySessionBase(BaseSchema):
    id: UUID
    user_id: str
    title: str
    subject: str
    file_type: str
    summary: Optional[str] = None
    quiz_questions: List[QuizQuestion] = []
    focus_sessions: List[FocusSessionBase] = []
    created_at: datetime


class UploadResponse(BaseSchema):
    message: str
    study_session_id: UUID
    text_preview: str


class SummarizeRequest(BaseSchema):
    study_session_id: Optional[str] = None
    text: Optional[str] = None


class SummarizeResponse(BaseSchema):
    summary: str


class QuizRequest(BaseSchema):
    study_session_id: Optional[str] = None
    text: Optional[str] = None
    num_questions: int = Field(default=5, ge=1, le=20)


class QuizResponse(BaseSchema):
    questions: List[QuizQuestion]


class TimerRequest(BaseSchema):
    study_session_id: Optional[str] = None
    user_id: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[float] = None
    type: Optional[str] = None


class TimerResponse(BaseSchema):
    message: str
    session_id: UUID
    study_session_id: Optional[UUID] = None
