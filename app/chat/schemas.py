from typing import Dict, List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    class Config:
        populate_by_name = True
        alias_generator = to_camel


class ChatRequest(BaseSchema):
    message: Optional[str] = None
    user_id: Optional[str] = None


class ChatResponse(BaseSchema):
    bot_message: str
    quote: str
    faq: List[str]
    error: Optional[str] = None
    timestamp: str


class MoodFAQsResponse(BaseSchema):
    mood_faqs: Dict[str, List[str]] = Field(alias="moodFAQs")
