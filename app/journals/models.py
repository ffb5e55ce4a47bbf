import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, JSON, Uuid
from app.core.database import Base

JOURNAL_MOODS = ("happy", "sad", "frustrated", "neutral", "focused")


class JournalEntry(Base):
    __tablename__ = "journal_entries"

    id = Column(Uuid(as_uuid=True), primary_key=True, index=True, default=uuid.uuid4)
    user_id = Column(String, index=True, nullable=False)

    content = Column(String, nullable=False)  # plaintext preview only
    encrypted_content = Column(String, nullable=False)

    sentiment = Column(String, nullable=False, default="neutral")  # positive, negative, neutral
    keywords = Column(JSON, nullable=False, default=list)
    mood = Column(String, nullable=False, default="neutral")

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
