from typing import Dict, List, Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    class Config:
        populate_by_name = True
        alias_generator = to_camel


class StudyStats(BaseSchema):
    total_sessions: int = 0
    total_study_minutes: float = 0
    total_break_minutes: float = 0
    subject_breakdown: Dict[str, float] = {}


class WeeklySummaryResponse(BaseSchema):
    mood_stats: Dict[str, int]
    mood_trend: List[str]
    word_cloud: Dict[str, int]
    study_stats: StudyStats
    journal_count: int
    message: str
    achievement: str


class TextSummaryRequest(BaseSchema):
    text: Optional[str] = None


class TextSummaryResponse(BaseSchema):
    summary: str
