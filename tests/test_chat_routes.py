from app.chat.service import FALLBACK_MESSAGES, FALLBACK_QUOTE, MOOD_FAQS


def test_mood_chat(client, ai_service):
    ai_service.default = "That is wonderful news!"
    response = client.post("/api/chat/happy", json={"message": "I aced my exam", "userId": "student-1"})

    assert response.status_code == 200
    body = response.json()
    assert body["botMessage"] == "That is wonderful news!"
    assert body["quote"] == "Stay curious. - Someone Wise"
    assert body["faq"] == MOOD_FAQS["happy"]
    assert "timestamp" in body
    assert "error" not in body
    assert "I aced my exam" in ai_service.prompts[0]


def test_mood_chat_validation(client):
    response = client.post("/api/chat/happy", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Message is required"}

    response = client.post("/api/chat/bored", json={"message": "hi"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid mood type"}


def test_mood_chat_incomplete_quote(client, quote_client):
    quote_client.quote = {"q": "Anonymous wisdom"}
    response = client.post("/api/chat/study", json={"message": "How do I focus?"})
    assert response.json()["quote"] == "Enjoy the present moment."


def test_mood_chat_falls_back_when_quotes_fail(client, quote_client):
    quote_client.error = True
    response = client.post("/api/chat/sad", json={"message": "Rough week"})

    assert response.status_code == 200
    body = response.json()
    assert body["botMessage"] == FALLBACK_MESSAGES["sad"]
    assert body["quote"] == FALLBACK_QUOTE
    assert body["faq"] == MOOD_FAQS["sad"]
    assert "error" not in body


def test_mood_chat_fallback_exposes_error_in_development(client, quote_client, monkeypatch):
    monkeypatch.setattr("app.chat.service.is_development", lambda: True)
    quote_client.error = True
    body = client.post("/api/chat/frustrated", json={"message": "Ugh"}).json()
    assert body["error"] == "ZenQuotes API error: offline"


def test_mood_chat_model_failure_uses_mood_reply(client, ai_service):
    ai_service.default = RuntimeError("model offline")
    body = client.post("/api/chat/study", json={"message": "Help"}).json()
    assert body["botMessage"].startswith("For effective studying")
    assert body["quote"] == "Stay curious. - Someone Wise"


def test_mood_faqs(client):
    response = client.get("/api/chat/faqs")
    assert response.status_code == 200
    faqs = response.json()["moodFAQs"]
    assert set(faqs) == {"happy", "sad", "frustrated", "study"}
    assert all(len(questions) == 5 for questions in faqs.values())


def test_mood_chat_rate_limit(client):
    for _ in range(100):
        assert client.post("/api/chat/happy", json={"message": "hi"}).status_code == 200

    response = client.post("/api/chat/happy", json={"message": "hi"})
    assert response.status_code == 429
    assert response.json() == {"error": "Too many requests from this IP, please try again after 15 minutes"}


def test_mood_faqs_rate_limit(client):
    for _ in range(100):
        assert client.get("/api/chat/faqs").status_code == 200

    response = client.get("/api/chat/faqs")
    assert response.status_code == 429
    assert response.json() == {"error": "Too many requests from this IP, please try again after 15 minutes"}
