from datetime import datetime, timedelta, timezone

import pytest
from unittest.mock import Mock, AsyncMock

from app.models import DocumentAnalysisSnapshot
from app.session_registry import SessionExistsError, SessionNotFoundError, SessionRegistry


@pytest.fixture
def registry():
    def collaborators(session_id):
        capture = Mock()
        capture.transcript = ""
        capture.is_listening = False
        capture.error = None
        synthesizer = Mock()
        synthesizer.speak = AsyncMock()
        return capture, synthesizer, Mock()

    return SessionRegistry(collaborators)


def test_create_with_generated_id(registry):
    controller = registry.create()
    assert controller.session_id in registry
    assert len(registry) == 1
    assert controller.command_locale == "en-IN"


def test_create_with_locale_and_document(registry):
    document = DocumentAnalysisSnapshot(summary="A bill.")
    controller = registry.create("s1", command_locale="te-IN", snapshot=document)
    assert controller.command_locale == "te-IN"
    assert controller.snapshot == document


def test_sessions_share_matcher(registry):
    first = registry.create("s1")
    second = registry.create("s2")
    assert first.matcher is second.matcher


def test_duplicate_session(registry):
    registry.create("s1")
    with pytest.raises(SessionExistsError):
        registry.create("s1")


def test_unknown_session(registry):
    with pytest.raises(SessionNotFoundError):
        registry.get("missing")
    with pytest.raises(KeyError):
        registry.remove("missing")


def test_update_document(registry):
    registry.create("s1")
    document = DocumentAnalysisSnapshot(deadlines=["Pay by 5 April"])
    registry.update_document("s1", document)
    assert registry.get("s1").snapshot == document


def test_remove_closes_session(registry):
    controller = registry.create("s1")
    registry.remove("s1")
    assert "s1" not in registry
    controller.capture.stop.assert_called_once()


@pytest.mark.asyncio
async def test_cleanup_expired_sessions(registry):
    registry.create("old")
    registry.create("fresh")
    registry.last_activity["old"] = datetime.now(timezone.utc) - timedelta(hours=2)

    await registry.cleanup_expired_sessions(timeout=60)

    assert "old" not in registry
    assert "fresh" in registry


def test_close_all(registry):
    registry.create("s1")
    registry.create("s2")
    registry.close_all()
    assert len(registry) == 0
