import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app


@pytest.fixture
def client(monkeypatch):
    """Create a test client with the Redis bridge disabled."""
    monkeypatch.setattr(settings, "redis_enabled", False)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def document():
    return {
        "summary": "Electricity bill for March.",
        "keyInformation": ["Total amount due: Rs 1,250"],
        "deadlines": ["Pay by 5 April"],
        "documentType": "bill",
    }


def create_session(client, **body):
    response = client.post("/sessions", json=body)
    assert response.status_code == 200
    return response.json()


class TestSessions:
    """Test cases for session endpoints."""

    def test_create_session(self, client):
        data = create_session(client)
        assert data["mode"] == "IDLE"
        assert data["command_locale"] == "en-IN"
        assert data["is_listening"] is False
        assert data["has_document"] is False

    def test_create_with_camel_case_document(self, client, document):
        data = create_session(client, session_id="s1", command_locale="te-IN", document=document)
        assert data["session_id"] == "s1"
        assert data["command_locale"] == "te-IN"
        assert data["has_document"] is True

    def test_duplicate_session(self, client):
        create_session(client, session_id="s1")
        assert client.post("/sessions", json={"session_id": "s1"}).status_code == 409

    def test_unknown_session(self, client):
        assert client.get("/sessions/missing").status_code == 404
        assert client.delete("/sessions/missing").status_code == 404
        assert client.post("/sessions/missing/command", json={"text": "stop"}).status_code == 404

    def test_delete_session(self, client):
        create_session(client, session_id="s1")
        assert client.delete("/sessions/s1").status_code == 200
        assert client.get("/sessions/s1").status_code == 404

    def test_update_document(self, client, document):
        create_session(client, session_id="s1")
        response = client.put("/sessions/s1/document", json=document)
        assert response.status_code == 200
        assert response.json()["has_document"] is True

        result = client.post("/sessions/s1/command", json={"text": "type"}).json()
        assert result["intent"] == "GET_TYPE"
        assert result["response"] == "This appears to be a bill document."

    def test_start_and_stop_listening(self, client):
        create_session(client, session_id="s1")

        data = client.post("/sessions/s1/start", json={"locale": "hi-IN"}).json()
        assert data["mode"] == "LISTENING"
        assert data["is_listening"] is True
        assert data["command_locale"] == "hi-IN"

        data = client.post("/sessions/s1/stop").json()
        assert data["mode"] == "IDLE"
        assert data["is_listening"] is False

    def test_start_without_body(self, client):
        create_session(client, session_id="s1")
        data = client.post("/sessions/s1/start").json()
        assert data["mode"] == "LISTENING"
        assert data["command_locale"] == "en-IN"


class TestCommands:
    """Test cases for command processing over HTTP."""

    def test_deadline_command(self, client, document):
        create_session(client, session_id="s1", document=document)
        response = client.post("/sessions/s1/command", json={"text": "deadline"})

        assert response.status_code == 200
        result = response.json()
        assert result["intent"] == "GET_DEADLINES"
        assert result["transcript"] == "deadline"
        assert result["response"] == "I found 1 deadline in this document. Pay by 5 April"

        state = client.get("/sessions/s1").json()
        assert state["last_command"]["intent"] == "GET_DEADLINES"

    def test_telugu_stop(self, client):
        create_session(client, session_id="s1")
        assert client.put("/sessions/s1/language", json={"locale": "te-IN"}).status_code == 200

        result = client.post("/sessions/s1/command", json={"text": "ఆపు"}).json()
        assert result["intent"] == "STOP"
        assert result["response"] == "సరే, ఆపుతున్నాను."

    def test_translate_command(self, client):
        create_session(client, session_id="s1")
        result = client.post("/sessions/s1/command", json={"text": "translate to tamil"}).json()
        assert result["intent"] == "TRANSLATE"
        assert result["params"] == {"language": "tamil", "language_code": "ta-IN"}

    def test_blank_command(self, client):
        create_session(client, session_id="s1")
        assert client.post("/sessions/s1/command", json={"text": "   "}).status_code == 400
        assert client.post("/sessions/s1/command", json={"text": ""}).status_code == 422


class TestService:
    """Test cases for stateless endpoints."""

    def test_detect_intent(self, client):
        response = client.post("/detect-intent", json={"text": "xyz gibberish"})
        assert response.status_code == 200
        data = response.json()
        assert data["intent"] == "UNKNOWN"
        assert data["tier"] == "none"

    def test_intents(self, client):
        data = client.get("/intents").json()
        assert "READ_SUMMARY" in data["intents"]
        assert data["intents"][-1] == "UNKNOWN"
        assert [language["code"] for language in data["languages"]][:2] == ["en-IN", "te-IN"]
        assert "bn-IN" in data["quick_hints"]

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["redis_enabled"] is False

    def test_metrics(self, client):
        client.post("/detect-intent", json={"text": "stop"})
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "voice_active_sessions" in response.text
