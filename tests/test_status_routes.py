from app.core.dependency import get_ai_service
from main import app
from tests.fakes import FailingAIService


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "EchoOrb API is running"


def test_status(client, ai_service):
    ai_service.default = "Statistics over lots of data"
    response = client.get("/api/status")

    assert response.status_code == 200
    body = response.json()
    assert body["aiApi"]["status"] == "ok"
    assert body["config"] == {
        "provider": "fake",
        "hasToken": True,
        "defaultModel": "fake-pro",
        "flashModel": "fake-flash",
    }
    assert body["server"]["status"] == "ok"
    assert body["server"]["uptime"] >= 0


def test_status_reports_unreachable_model(client):
    app.dependency_overrides[get_ai_service] = FailingAIService
    body = client.get("/api/status").json()
    assert body["aiApi"]["status"] == "error"


def test_status_probe(client, ai_service):
    ai_service.default = "POSITIVE\n0.9"
    response = client.get("/api/status/test/sentiment")

    assert response.status_code == 200
    body = response.json()
    assert body["type"] == "sentiment"
    assert body["status"] == "success"
    assert body["result"] == {"label": "POSITIVE", "score": 0.9}


def test_status_probe_invalid_type(client):
    response = client.get("/api/status/test/everything")
    assert response.status_code == 400
    assert response.json() == {
        "error": "Invalid test type. Valid types are: chat, sentiment, summary, emotions, prompts"
    }


def test_status_probe_failure(client, ai_service, monkeypatch):
    def boom(mood):
        raise RuntimeError("prompt service exploded")

    monkeypatch.setattr(ai_service, "get_journal_prompts", boom)
    response = client.get("/api/status/test/prompts")

    assert response.status_code == 500
    body = response.json()
    assert body["type"] == "prompts"
    assert body["status"] == "error"
    assert body["message"] == "prompt service exploded"
