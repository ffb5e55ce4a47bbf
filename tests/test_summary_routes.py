from datetime import timedelta

from app.core.utils import utcnow
from app.journals.models import JournalEntry
from app.study.models import FocusSession, StudySession


def add_journal(db, mood, days_ago=1, keywords=None, user_id="student-1"):
    db.add(
        JournalEntry(
            user_id=user_id,
            content="preview...",
            encrypted_content="token",
            mood=mood,
            keywords=keywords or [],
            created_at=utcnow() - timedelta(days=days_ago),
        )
    )
    db.commit()


def add_study(db, subject, intervals, days_ago=1, user_id="student-1"):
    created = utcnow() - timedelta(days=days_ago)
    session = StudySession(user_id=user_id, title=subject, subject=subject, created_at=created, quiz_questions=[])
    for position, (kind, minutes) in enumerate(intervals):
        session.focus_sessions.append(
            FocusSession(
                position=position,
                start_time=created,
                end_time=created + timedelta(minutes=minutes),
                duration=minutes,
                type=kind,
            )
        )
    db.add(session)
    db.commit()


def test_weekly_summary(client, db_session):
    add_journal(db_session, "sad", days_ago=3, keywords=["exam", "stress"])
    add_journal(db_session, "happy", days_ago=2, keywords=["exam"])
    add_journal(db_session, "happy", days_ago=1)
    add_journal(db_session, "happy", days_ago=0)
    add_journal(db_session, "happy", days_ago=10, keywords=["old"])
    add_journal(db_session, "frustrated", days_ago=1, user_id="someone-else")
    add_study(db_session, "Math", [("study", 30), ("short-break", 5)])
    add_study(db_session, "Physics", [("study", 20)])
    add_study(db_session, "History", [("study", 600)], days_ago=9)

    response = client.get("/api/summary/student-1")

    assert response.status_code == 200
    body = response.json()
    assert body["moodStats"] == {"happy": 3, "sad": 1, "frustrated": 0, "neutral": 0, "focused": 0}
    assert body["moodTrend"] == ["sad", "happy", "happy", "happy"]
    assert body["wordCloud"] == {"exam": 2, "stress": 1}
    assert body["studyStats"] == {
        "totalSessions": 3,
        "totalStudyMinutes": 50,
        "totalBreakMinutes": 5,
        "subjectBreakdown": {"Math": 30, "Physics": 20},
    }
    assert body["journalCount"] == 4
    assert body["message"] == "Stay curious. - Someone Wise"
    assert body["achievement"] == "You've maintained a positive outlook this week!"


def test_weekly_summary_study_achievement(client, db_session):
    add_study(db_session, "Math", [("study", 200), ("study", 150)])
    for _ in range(5):
        add_journal(db_session, "neutral")

    body = client.get("/api/summary/student-1").json()
    assert body["achievement"] == "Great study dedication this week!"


def test_weekly_summary_journaling_achievement(client, db_session):
    for _ in range(5):
        add_journal(db_session, "sad")

    body = client.get("/api/summary/student-1").json()
    assert body["achievement"] == "You're building a great journaling habit!"


def test_weekly_summary_empty_with_quote_outage(client, quote_client):
    quote_client.error = True

    response = client.get("/api/summary/nobody")
    assert response.status_code == 200
    body = response.json()
    assert body["journalCount"] == 0
    assert body["studyStats"]["totalSessions"] == 0
    assert body["message"] == "Keep up the good work! Consistency is key to success."
    assert body["achievement"] == "Keep going, every step counts!"


def test_summarize_text(client, ai_service):
    ai_service.default = "Short and sweet."
    response = client.post("/api/summary", json={"text": "A very long article"})
    assert response.status_code == 200
    assert response.json() == {"summary": "Short and sweet."}


def test_summarize_text_requires_text(client):
    response = client.post("/api/summary", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Text is required"}
