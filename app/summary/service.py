import logging
from collections import Counter
from datetime import timedelta
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.analysis.quotes import QuoteClient, format_quote
from app.core.utils import utcnow
from app.journals.db import get_user_journals_since
from app.journals.models import JOURNAL_MOODS, JournalEntry
from app.study.db import get_user_study_sessions_since
from app.study.models import StudySession
from app.study.service import study_minutes

logger = logging.getLogger(__name__)

SUMMARY_DAYS = 7
STUDY_ACHIEVEMENT_MINUTES = 300
JOURNAL_ACHIEVEMENT_COUNT = 5
FALLBACK_MESSAGE = "Keep up the good work! Consistency is key to success."


def mood_statistics(journals: List[JournalEntry]) -> Dict[str, int]:
    stats = {mood: 0 for mood in JOURNAL_MOODS}
    for journal in journals:
        if journal.mood in stats:
            stats[journal.mood] += 1
    return stats


def word_cloud(journals: List[JournalEntry]) -> Dict[str, int]:
    counts: Counter = Counter()
    for journal in journals:
        counts.update(journal.keywords or [])
    return dict(counts)


def study_statistics(sessions: List[StudySession]) -> Dict[str, Any]:
    """
    Totals focus intervals across study sessions.

    Returns:
        Dict[str, Any]: total_sessions (number of focus intervals), total_study_minutes,
        total_break_minutes and subject_breakdown (study minutes per subject).
    """
    stats: Dict[str, Any] = {
        "total_sessions": 0,
        "total_study_minutes": 0.0,
        "total_break_minutes": 0.0,
        "subject_breakdown": {},
    }
    for session in sessions:
        study, breaks = study_minutes(session.focus_sessions)
        stats["total_sessions"] += len(session.focus_sessions)
        stats["total_study_minutes"] += study
        stats["total_break_minutes"] += breaks
        if session.subject:
            breakdown = stats["subject_breakdown"]
            breakdown[session.subject] = breakdown.get(session.subject, 0.0) + study
    return stats


def pick_achievement(study_minutes_total: float, journal_count: int, mood_stats: Dict[str, int]) -> str:
    if study_minutes_total > STUDY_ACHIEVEMENT_MINUTES:
        return "Great study dedication this week!"
    if journal_count >= JOURNAL_ACHIEVEMENT_COUNT:
        return "You're building a great journaling habit!"
    if mood_stats["happy"] > mood_stats["sad"] and mood_stats["happy"] > mood_stats["frustrated"]:
        return "You've maintained a positive outlook this week!"
    return "Keep going, every step counts!"


def motivational_message(quote_client: QuoteClient) -> str:
    try:
        return format_quote(quote_client.get_random_quote()) or FALLBACK_MESSAGE
    except Exception as e:
        logger.warning(f"Error fetching motivational quote: {e}")
        return FALLBACK_MESSAGE


def build_weekly_summary(db: Session, user_id: str, quote_client: QuoteClient) -> Dict[str, Any]:
    """
    Aggregates a user's last seven days of journaling and studying.

    Args:
        db (Session): SQLAlchemy session.
        user_id (str): Owner reference.
        quote_client (QuoteClient): Source of the motivational message.

    Returns:
        Dict[str, Any]: Fields of WeeklySummaryResponse in snake_case.
    """
    since = utcnow() - timedelta(days=SUMMARY_DAYS)
    journals = get_user_journals_since(db, user_id, since)
    sessions = get_user_study_sessions_since(db, user_id, since)

    moods = mood_statistics(journals)
    study_stats = study_statistics(sessions)

    return {
        "mood_stats": moods,
        "mood_trend": [journal.mood or "neutral" for journal in journals],
        "word_cloud": word_cloud(journals),
        "study_stats": study_stats,
        "journal_count": len(journals),
        "message": motivational_message(quote_client),
        "achievement": pick_achievement(study_stats["total_study_minutes"], len(journals), moods),
    }
