from typing import Optional, List
from uuid import UUID
from datetime import datetime
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


class JournalEntryBase(BaseSchema):
    id: UUID
    user_id: str
    content: str
    sentiment: str = "neutral"
    keywords: List[str] = []
    mood: str = "neutral"
    created_at: datetime


class JournalEntryDetail(JournalEntryBase):
    """Entry with the decrypted full text in `content`."""


class JournalEntryCreate(BaseSchema):
    user_id: Optional[str] = None
    content: Optional[str] = None
    mood: Optional[str] = None


class JournalCreatedResponse(BaseSchema):
    message: str
    journal_id: UUID


class JournalAnalyzeRequest(BaseSchema):
    journal_id: Optional[str] = None
    content: Optional[str] = None


class EmotionScore(BaseSchema):
    emotion: str
    intensity: float


class JournalAnalysisResponse(BaseSchema):
    sentiment: str
    sentiment_score: float
    emotions: List[EmotionScore]
    dominant_emotion: str
    keywords: List[str]
    recommendations: List[str]
    timestamp: datetime


class JournalPromptsResponse(BaseSchema):
    mood: str
    prompts: List[str]
