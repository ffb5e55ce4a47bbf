from datetime import datetime
from uuid import UUID
from typing import Dict, List, Optional

from sqlalchemy.orm import Session
from app.challenges.models import Challenge, ChallengeCompletion


def count_challenges(db: Session) -> int:
    return db.query(Challenge).count()


def create_challenges(db: Session, challenges: List[Dict[str, str]]) -> List[Challenge]:
    """
    Inserts challenges in one transaction.

    Args:
        db (Session): SQLAlchemy session.
        challenges (List[Dict[str, str]]): title, description and type for each.

    Returns:
        List[Challenge]: The created challenges.
    """
    created = [Challenge(**data) for data in challenges]
    db.add_all(created)
    db.commit()
    return created


def get_challenge(db: Session, challenge_id: UUID) -> Optional[Challenge]:
    return db.query(Challenge).filter(Challenge.id == challenge_id).first()


def get_active_challenges(db: Session) -> List[Challenge]:
    return db.query(Challenge).filter(Challenge.active.is_(True)).order_by(Challenge.created_at.asc()).all()


def get_user_completions_since(db: Session, user_id: str, since: datetime) -> List[ChallengeCompletion]:
    """
    Retrieves a user's completions at or after `since`, newest first.

    Args:
        db (Session): SQLAlchemy session.
        user_id (str): Owner reference.
        since (datetime): Inclusive lower bound.

    Returns:
        List[ChallengeCompletion]: Matching completion records.
    """
    return (
        db.query(ChallengeCompletion)
        .filter(ChallengeCompletion.user_id == user_id, ChallengeCompletion.completed_at >= since)
        .order_by(ChallengeCompletion.completed_at.desc())
        .all()
    )


def add_completion(db: Session, challenge: Challenge, user_id: str) -> ChallengeCompletion:
    completion = ChallengeCompletion(user_id=user_id)
    challenge.completions.append(completion)
    db.commit()
    db.refresh(completion)
    return completion
