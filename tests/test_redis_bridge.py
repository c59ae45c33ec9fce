import asyncio
import json

import pytest
from unittest.mock import AsyncMock, Mock

from app.collaborators import capture_error_message
from app.models import Intent, SessionMode
from app.redis_bridge import (
    EventPublisher,
    RedisSpeechCapture,
    RedisSpeechSynthesizer,
    RedisTranslator,
    handle_transcript_message,
)
from app.session_registry import SessionRegistry


@pytest.fixture
def redis_client():
    client = Mock()
    client.publish = AsyncMock()
    return client


@pytest.fixture
def publisher(redis_client):
    return EventPublisher(redis_client, "voice_command_events")


@pytest.fixture
def registry():
    publisher = EventPublisher(None)

    def collaborators(session_id):
        return (
            RedisSpeechCapture(session_id, publisher),
            RedisSpeechSynthesizer(session_id, publisher),
            RedisTranslator(session_id, publisher),
        )

    return SessionRegistry(collaborators)


def published(redis_client):
    return [json.loads(call.args[1]) for call in redis_client.publish.await_args_list]


class TestCaptureErrors:
    """Test cases for capture error messages."""

    def test_known_codes(self):
        assert capture_error_message("no-speech") == "No speech detected. Please try again."
        assert capture_error_message("not-allowed") == "Microphone permission denied. Please allow microphone access."

    def test_aborted_clears_error(self):
        assert capture_error_message("aborted") is None

    def test_unknown_code(self):
        assert capture_error_message("bad-grammar") == "Speech recognition error: bad-grammar"


class TestEventPublisher:
    """Test cases for session events on Redis."""

    @pytest.mark.asyncio
    async def test_publish(self, publisher, redis_client):
        await publisher.publish("speak", "s1", text="नमस्ते", language_code="hi-IN")

        redis_client.publish.assert_awaited_once()
        channel = redis_client.publish.await_args.args[0]
        assert channel == "voice_command_events"
        assert published(redis_client) == [
            {"type": "speak", "session_id": "s1", "text": "नमस्ते", "language_code": "hi-IN"}
        ]

    @pytest.mark.asyncio
    async def test_publish_without_redis(self):
        await EventPublisher(None).publish("speak", "s1", text="hello")

    @pytest.mark.asyncio
    async def test_fire_logs_failures(self, publisher, redis_client):
        redis_client.publish = AsyncMock(side_effect=ConnectionError("redis down"))
        publisher.fire("capture_stop", "s1")
        await asyncio.sleep(0)
        redis_client.publish.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_collaborator_events(self, publisher, redis_client):
        capture = RedisSpeechCapture("s1", publisher)
        capture.start("te-IN")
        capture.stop()
        await RedisSpeechSynthesizer("s1", publisher).speak("hello", "en-IN")
        RedisTranslator("s1", publisher).on_translate("ta-IN")
        await asyncio.sleep(0)

        events = {event["type"]: event for event in published(redis_client)}
        assert events["capture_start"]["locale"] == "te-IN"
        assert events["capture_start"]["continuous"] is False
        assert "capture_stop" in events
        assert events["speak"]["text"] == "hello"
        assert events["translate"]["target_language_code"] == "ta-IN"


class TestTranscriptMessages:
    """Test cases for routing speech pipeline messages to sessions."""

    @pytest.mark.asyncio
    async def test_interim_transcript_is_not_a_command(self, registry):
        controller = registry.create("s1")
        controller.start_command_mode()

        await handle_transcript_message({"session_id": "s1", "text": "dead", "is_final": False}, registry)

        assert controller.capture.interim_transcript == "dead"
        assert controller.state.last_command is None
        assert controller.mode == SessionMode.LISTENING

    @pytest.mark.asyncio
    async def test_final_transcript_runs_command(self, registry):
        controller = registry.create("s1")
        controller.start_command_mode()

        await handle_transcript_message({"session_id": "s1", "text": "deadline", "is_final": True}, registry)

        assert controller.transcript == "deadline"
        assert not controller.is_listening
        assert controller.state.last_command.intent == Intent.GET_DEADLINES

    @pytest.mark.asyncio
    async def test_capture_error(self, registry):
        controller = registry.create("s1")
        controller.start_command_mode()

        await handle_transcript_message(
            {"session_id": "s1", "type": "capture_error", "error": "audio-capture"}, registry
        )

        assert controller.speech_error == "No microphone found. Please check your microphone."
        assert not controller.is_listening
        assert controller.state.last_command is None

    @pytest.mark.asyncio
    async def test_unknown_session_is_ignored(self, registry):
        await handle_transcript_message({"session_id": "nope", "text": "stop", "is_final": True}, registry)
        assert len(registry) == 0
