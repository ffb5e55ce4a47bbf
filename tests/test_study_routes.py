import pytest

from app.study.models import StudySession

QUIZ_REPLY = """Q1: What do mitochondria produce?
A) Proteins
B) ATP
C) DNA
D) Lipids
Answer: B
"""


def upload(client, content=b"Cells are the basic unit of life.", filename="notes.txt", mime="text/plain", **fields):
    data = {"userId": "student-1", "title": "Cell Biology", "subject": "Biology"}
    data.update(fields)
    return client.post("/api/study/upload", files={"file": (filename, content, mime)}, data=data)


def test_upload_txt(client, db_session):
    response = upload(client)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "File uploaded and processed successfully"
    assert body["textPreview"] == "Cells are the basic unit of life...."

    session = db_session.query(StudySession).one()
    assert str(session.id) == body["studySessionId"]
    assert session.file_type == "txt"
    assert session.original_text == "Cells are the basic unit of life."


def test_upload_truncates_stored_text(client, db_session):
    response = upload(client, content=b"x" * 12000, filename="long.md")
    assert response.status_code == 201
    assert response.json()["textPreview"] == "x" * 200 + "..."

    session = db_session.query(StudySession).one()
    assert len(session.original_text) == 10000
    assert session.file_type == "txt"


def test_upload_latin1_text(client, db_session):
    response = upload(client, content="café notes".encode("latin-1"))
    assert response.status_code == 201
    assert db_session.query(StudySession).one().original_text == "caf\ufffd notes"


def test_upload_accepts_mime_type_parameters(client, db_session):
    response = upload(client, mime="text/plain; charset=utf-8")
    assert response.status_code == 201
    assert db_session.query(StudySession).one().file_type == "txt"


def test_upload_requires_file(client):
    response = client.post("/api/study/upload", data={"userId": "student-1", "title": "T", "subject": "S"})
    assert response.status_code == 400
    assert response.json() == {"error": "No file uploaded"}


def test_upload_requires_fields(client):
    response = upload(client, title="")
    assert response.status_code == 400
    assert response.json() == {"error": "userId, title, and subject are required"}


def test_upload_rejects_mime_type(client):
    response = upload(client, content=b"\x89PNG", filename="diagram.png", mime="image/png")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid file type. Only PDF, DOCX, and TXT files are allowed."}


def test_upload_rejects_large_files(client, monkeypatch):
    monkeypatch.setattr("app.study.service.MAX_UPLOAD_BYTES", 16)
    response = upload(client, content=b"y" * 17)
    assert response.status_code == 400
    assert response.json()["error"].startswith("File too large")


def test_upload_extraction_failure(client, db_session):
    response = upload(client, content=b"definitely not a pdf", filename="broken.pdf", mime="application/pdf")
    assert response.status_code == 500
    assert response.json()["error"].startswith("Failed to process uploaded file: Error extracting text from PDF")
    assert db_session.query(StudySession).count() == 0


def test_summarize_text(client, ai_service):
    ai_service.default = "Cells make up living things."
    response = client.post("/api/study/summarize", json={"text": "Long chapter about cells"})
    assert response.status_code == 200
    assert response.json() == {"summary": "Cells make up living things."}


def test_summarize_session_stores_summary(client, ai_service, db_session):
    ai_service.default = "Cells make up living things."
    session_id = upload(client).json()["studySessionId"]

    response = client.post("/api/study/summarize", json={"studySessionId": session_id})
    assert response.status_code == 200
    assert db_session.query(StudySession).one().summary == "Cells make up living things."
    assert "Cells are the basic unit of life." in ai_service.prompts[0]


def test_summarize_errors(client):
    assert client.post("/api/study/summarize", json={}).status_code == 400
    response = client.post("/api/study/summarize", json={"studySessionId": "unknown"})
    assert response.status_code == 404
    assert response.json() == {"error": "Study session not found"}


def test_quiz_from_text(client, ai_service):
    ai_service.default = QUIZ_REPLY
    response = client.post("/api/study/quiz", json={"text": "Mitochondria notes", "numQuestions": 2})
    assert response.status_code == 200
    assert response.json() == {
        "questions": [
            {"question": "What do mitochondria produce?", "options": ["Proteins", "ATP", "DNA", "Lipids"], "correctAnswer": 1}
        ]
    }


def test_quiz_prefers_session_summary_and_stores_questions(client, ai_service, db_session):
    session_id = upload(client).json()["studySessionId"]
    session = db_session.query(StudySession).one()
    session.summary = "Summary about mitochondria"
    db_session.commit()

    ai_service.default = QUIZ_REPLY
    response = client.post("/api/study/quiz", json={"studySessionId": session_id})
    assert response.status_code == 200
    assert "Summary about mitochondria" in ai_service.prompts[0]
    assert "Generate exactly 5" in ai_service.prompts[0]

    stored = db_session.query(StudySession).one().quiz_questions
    assert stored == [
        {"question": "What do mitochondria produce?", "options": ["Proteins", "ATP", "DNA", "Lipids"], "correct_answer": 1}
    ]


@pytest.mark.parametrize("num_questions", [0, 21])
def test_quiz_question_count_bounds(client, num_questions):
    response = client.post("/api/study/quiz", json={"text": "notes", "numQuestions": num_questions})
    assert response.status_code == 400


def test_quiz_fallback_question_when_model_fails(client, ai_service):
    ai_service.default = RuntimeError("timeout")
    response = client.post("/api/study/quiz", json={"text": "notes"})
    assert response.status_code == 200
    assert response.json()["questions"][0]["correctAnswer"] == 3


TIMER = {
    "userId": "student-1",
    "startTime": "2024-05-01T10:00:00Z",
    "endTime": "2024-05-01T10:25:00Z",
    "duration": 25,
    "type": "study",
}


def test_timer_creates_focus_session(client, db_session):
    response = client.post("/api/study/timer", json=TIMER)
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Timer session recorded successfully"

    session = db_session.query(StudySession).one()
    assert str(session.id) == body["studySessionId"]
    assert session.title == "Focus Session"
    assert session.subject == "General Study"
    assert session.file_type == "none"
    assert str(session.focus_sessions[0].id) == body["sessionId"]


def test_timer_appends_to_existing_session(client, db_session):
    session_id = upload(client).json()["studySessionId"]

    first = client.post("/api/study/timer", json={**TIMER, "studySessionId": session_id})
    second = client.post("/api/study/timer", json={**TIMER, "studySessionId": session_id, "type": "short-break", "duration": 5})

    assert first.status_code == 200
    assert first.json()["message"] == "Timer session recorded successfully"
    assert set(first.json()) == {"message", "sessionId"}
    assert second.status_code == 200

    session = db_session.query(StudySession).one()
    assert [f.type for f in session.focus_sessions] == ["study", "short-break"]
    assert [f.position for f in session.focus_sessions] == [0, 1]


def test_timer_validation(client):
    response = client.post("/api/study/timer", json={**TIMER, "userId": None})
    assert response.json() == {"error": "userId is required"}

    response = client.post("/api/study/timer", json={"userId": "student-1", "type": "study"})
    assert response.status_code == 400
    assert response.json() == {"error": "startTime, endTime, duration, and type are required"}

    for duration in (0, -5):
        response = client.post("/api/study/timer", json={**TIMER, "duration": duration})
        assert response.status_code == 400
        assert response.json() == {"error": "startTime, endTime, duration, and type are required"}

    response = client.post("/api/study/timer", json={**TIMER, "type": "nap"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid session type"}

    response = client.post("/api/study/timer", json={**TIMER, "studySessionId": "00000000-0000-0000-0000-000000000000"})
    assert response.status_code == 404


def test_list_study_sessions(client):
    upload(client)
    client.post("/api/study/timer", json=TIMER)
    upload(client, userId="someone-else")

    response = client.get("/api/study/student-1")
    assert response.status_code == 200
    sessions = response.json()
    assert len(sessions) == 2
    assert all("originalText" not in s for s in sessions)
    focus = next(s for s in sessions if s["title"] == "Focus Session")
    assert focus["focusSessions"][0]["duration"] == 25
    assert focus["fileType"] == "none"
