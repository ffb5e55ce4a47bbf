from datetime import datetime
from uuid import UUID
from typing import List, Optional

from sqlalchemy.orm import Session
from app.journals.models import JournalEntry


def get_journal(db: Session, journal_id: UUID) -> Optional[JournalEntry]:
    """
    Retrieves a journal entry by ID.

    Args:
        db (Session): SQLAlchemy session.
        journal_id (UUID): ID of the journal entry.

    Returns:
        Optional[JournalEntry]: The entry if found, else None.
    """
    return db.query(JournalEntry).filter(JournalEntry.id == journal_id).first()


def get_user_journals(db: Session, user_id: str) -> List[JournalEntry]:
    """
    Retrieves all journal entries for a user, newest first.
    """
    return (
        db.query(JournalEntry)
        .filter(JournalEntry.user_id == user_id)
        .order_by(JournalEntry.created_at.desc())
        .all()
    )


def get_user_journals_since(db: Session, user_id: str, since: datetime) -> List[JournalEntry]:
    """
    Retrieves a user's journal entries created at or after `since`, oldest first.
    """
    return (
        db.query(JournalEntry)
        .filter(JournalEntry.user_id == user_id, JournalEntry.created_at >= since)
        .order_by(JournalEntry.created_at.asc())
        .all()
    )


def create_journal(
    db: Session, user_id: str, preview: str, encrypted_content: str, mood: str
) -> JournalEntry:
    """
    Creates a new journal entry.

    Args:
        db (Session): SQLAlchemy session.
        user_id (str): Owner reference.
        preview (str): Plaintext preview stored alongside the ciphertext.
        encrypted_content (str): Full encrypted text.
        mood (str): Mood tag.

    Returns:
        JournalEntry: The created entry.
    """
    new_journal = JournalEntry(
        user_id=user_id,
        content=preview,
        encrypted_content=encrypted_content,
        mood=mood,
        sentiment="neutral",
        keywords=[],
    )
    db.add(new_journal)
    db.commit()
    db.refresh(new_journal)
    return new_journal


def update_journal_analysis(
    db: Session, journal: JournalEntry, sentiment: str, keywords: List[str]
) -> JournalEntry:
    """
    Stores the sentiment label and keywords produced by an analysis.
    """
    journal.sentiment = sentiment
    journal.keywords = list(keywords)
    db.commit()
    db.refresh(journal)
    return journal
