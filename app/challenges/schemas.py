from typing import Optional
from uuid import UUID
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


class ChallengeBase(BaseSchema):
    id: UUID
    title: str
    description: str
    type: str


class DailyChallengeResponse(BaseSchema):
    challenge: ChallengeBase
    completed: bool


class ChallengeCompleteRequest(BaseSchema):
    challenge_id: Optional[str] = None
    user_id: Optional[str] = None


class MessageResponse(BaseSchema):
    message: str
