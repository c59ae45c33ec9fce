"""
Pytest configuration for the voice command service tests.

Provides mock speech collaborators and a sample document analysis.
"""
import pytest
from unittest.mock import Mock, AsyncMock

from app.models import DocumentAnalysisSnapshot
from app.session_controller import CommandSessionController

pytest_plugins = ["pytest_asyncio"]


@pytest.fixture
def capture():
    """Create a mock speech capture."""
    capture = Mock()
    capture.start = Mock()
    capture.stop = Mock()
    capture.transcript = ""
    capture.is_listening = False
    capture.error = None
    return capture


@pytest.fixture
def synthesizer():
    """Create a mock speech synthesizer."""
    synthesizer = Mock()
    synthesizer.speak = AsyncMock()
    synthesizer.stop = Mock()
    return synthesizer


@pytest.fixture
def translator():
    """Create a mock translator."""
    translator = Mock()
    translator.on_translate = Mock()
    return translator


@pytest.fixture
def snapshot():
    """Document analysis of a sample electricity bill."""
    return DocumentAnalysisSnapshot(
        summary="Electricity bill for March.",
        speakable_summary="This is your electricity bill for March.",
        key_information=["Account number 12345", "Total amount due: Rs 1,250"],
        warnings=["Late payment attracts a penalty."],
        suggested_actions=["Pay before the due date."],
        deadlines=["Pay by 5 April"],
        document_type="bill",
        extracted_text="ELECTRICITY BILL. Account 12345.",
    )


@pytest.fixture
def controller(capture, synthesizer, translator, snapshot):
    """Command session controller with a short processing debounce."""
    return CommandSessionController(
        capture=capture,
        synthesizer=synthesizer,
        translator=translator,
        snapshot=snapshot,
        command_locale="en-IN",
        processing_debounce_ms=10,
        session_id="test-session",
    )
