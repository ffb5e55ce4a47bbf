import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.core.database import Base


class Challenge(Base):
    __tablename__ = "challenges"

    id = Column(Uuid(as_uuid=True), primary_key=True, index=True, default=uuid.uuid4)

    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    type = Column(String, nullable=False)  # gratitude, mindfulness, productivity, creativity, social, wellness
    active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    completions = relationship(
        "ChallengeCompletion",
        back_populates="challenge",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class ChallengeCompletion(Base):
    __tablename__ = "challenge_completions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    challenge_id = Column(Uuid(as_uuid=True), ForeignKey("challenges.id"), index=True, nullable=False)
    user_id = Column(String, index=True, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    challenge = relationship("Challenge", back_populates="completions")
