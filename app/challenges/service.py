import logging
import random
from datetime import timedelta
from typing import Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.challenges.db import (
    add_completion,
    count_challenges,
    create_challenges,
    get_active_challenges,
    get_challenge,
    get_user_completions_since,
)
from app.challenges.models import Challenge
from app.challenges.schemas import ChallengeCompleteRequest
from app.core.utils import parse_id, start_of_today, utcnow

logger = logging.getLogger(__name__)

RECENT_DAYS = 7

DEFAULT_CHALLENGES: List[Dict[str, str]] = [
    {
        "title": "Gratitude Journal",
        "description": "Write down 3 things you are grateful for today.",
        "type": "gratitude",
    },
    {
        "title": "5-Minute Meditation",
        "description": "Take 5 minutes to practice mindful breathing.",
        "type": "mindfulness",
    },
    {
        "title": "Digital Detox",
        "description": "Spend 30 minutes away from all screens.",
        "type": "wellness",
    },
    {
        "title": "Random Act of Kindness",
        "description": "Do something nice for someone without expectation of return.",
        "type": "social",
    },
    {
        "title": "Nature Time",
        "description": "Spend 15 minutes outside in nature.",
        "type": "wellness",
    },
    {
        "title": "Learn Something New",
        "description": "Spend 10 minutes learning about a new topic.",
        "type": "productivity",
    },
    {
        "title": "Creative Expression",
        "description": "Spend 15 minutes drawing, writing, or creating something.",
        "type": "creativity",
    },
    {
        "title": "Positive Affirmations",
        "description": "Write down 3 positive affirmations and repeat them to yourself.",
        "type": "mindfulness",
    },
    {
        "title": "Reach Out",
        "description": "Send a message to a friend or family member you haven't spoken to in a while.",
        "type": "social",
    },
    {
        "title": "Declutter",
        "description": "Spend 10 minutes decluttering a small area of your living space.",
        "type": "productivity",
    },
]


def seed_default_challenges(db: Session) -> int:
    """
    Inserts the default challenges when the table is empty.

    Returns:
        int: Number of challenges inserted (0 when already seeded).
    """
    if count_challenges(db) > 0:
        return 0
    created = create_challenges(db, DEFAULT_CHALLENGES)
    logger.info(f"Seeded {len(created)} default challenges")
    return len(created)


def find_challenge(db: Session, challenge_id: Optional[str]) -> Optional[Challenge]:
    parsed = parse_id(challenge_id)
    if parsed is None:
        return None
    return get_challenge(db, parsed)


def get_daily_challenge(db: Session, user_id: str) -> Dict[str, object]:
    """
    Picks today's challenge for a user.

    A challenge completed since UTC midnight is returned as completed. Otherwise one
    is drawn at random from active challenges not completed in the last week, or
    from all active challenges when every one was done recently.

    Raises:
        HTTPException: 404 when no challenge is active.
    """
    completed_today = get_user_completions_since(db, user_id, start_of_today())
    if completed_today:
        return {"challenge": completed_today[0].challenge, "completed": True}

    active = get_active_challenges(db)
    if not active:
        raise HTTPException(status_code=404, detail="No challenges available")

    recent_ids = {c.challenge_id for c in get_user_completions_since(db, user_id, utcnow() - timedelta(days=RECENT_DAYS))}
    candidates = [c for c in active if c.id not in recent_ids] or active
    return {"challenge": random.choice(candidates), "completed": False}


def complete_challenge(db: Session, request: ChallengeCompleteRequest) -> str:
    if not request.challenge_id or not request.user_id:
        raise HTTPException(status_code=400, detail="challengeId and userId are required")

    challenge = find_challenge(db, request.challenge_id)
    if challenge is None:
        raise HTTPException(status_code=404, detail="Challenge not found")

    today = start_of_today()
    if any(c.challenge_id == challenge.id for c in get_user_completions_since(db, request.user_id, today)):
        return "Challenge already completed today"

    add_completion(db, challenge, request.user_id)
    return "Challenge completed successfully"
