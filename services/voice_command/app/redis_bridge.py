"""
Redis bridge to the speech pipeline
Speech capture, synthesis and translation run in other services; a command
session talks to them through pub/sub events.
"""

import asyncio
import json
from typing import Any, Dict, Optional, Set

import redis.asyncio as redis
import structlog

from .collaborators import capture_error_message
from .config import settings
from .metrics import record_capture_error

logger = structlog.get_logger(__name__)


class EventPublisher:
    """Publishes session events; only logs them when Redis is not configured"""

    def __init__(self, redis_client: Optional[redis.Redis] = None, channel: Optional[str] = None):
        self.redis_client = redis_client
        self.channel = channel or settings.event_channel
        self._pending: Set[asyncio.Task] = set()

    async def publish(self, event_type: str, session_id: str, **payload: Any):
        """Publish one event to the event channel"""
        event = {"type": event_type, "session_id": session_id, **payload}

        if self.redis_client is None:
            logger.debug("Redis disabled, event not published", event_type=event_type, session_id=session_id)
            return

        await self.redis_client.publish(self.channel, json.dumps(event, ensure_ascii=False))

    def fire(self, event_type: str, session_id: str, **payload: Any):
        """Publish without waiting, for callers that are not coroutines"""
        task = asyncio.create_task(self._publish_logged(event_type, session_id, payload))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _publish_logged(self, event_type: str, session_id: str, payload: Dict[str, Any]):
        try:
            await self.publish(event_type, session_id, **payload)
        except Exception as e:
            logger.error("Failed to publish event", event_type=event_type, session_id=session_id, error=str(e))


class RedisSpeechCapture:
    """Speech capture driven by the speech service.

    ``start`` and ``stop`` are requests; results come back through the
    transcript channel and are fed in with ``on_interim``, ``on_final`` and
    ``on_error``.
    """

    def __init__(self, session_id: str, publisher: EventPublisher):
        self.session_id = session_id
        self.publisher = publisher
        self.transcript = ""
        self.interim_transcript = ""
        self.is_listening = False
        self.error: Optional[str] = None

    def start(self, locale: str, continuous: bool = False, interim_results: bool = True):
        self.transcript = ""
        self.interim_transcript = ""
        self.error = None
        self.is_listening = True
        self.publisher.fire(
            "capture_start",
            self.session_id,
            locale=locale,
            continuous=continuous,
            interim_results=interim_results,
        )

    def stop(self):
        if not self.is_listening:
            return
        self.is_listening = False
        self.publisher.fire("capture_stop", self.session_id)

    def on_interim(self, text: str):
        self.interim_transcript = text

    def on_final(self, text: str):
        # Single-shot capture ends with its final result
        self.transcript = text
        self.interim_transcript = ""
        self.is_listening = False

    def on_error(self, code: str):
        record_capture_error(code)
        self.error = capture_error_message(code)
        self.is_listening = False
        logger.warning("Speech capture error", session_id=self.session_id, code=code)


class RedisSpeechSynthesizer:
    """Speech synthesis handed to the TTS service"""

    def __init__(self, session_id: str, publisher: EventPublisher):
        self.session_id = session_id
        self.publisher = publisher

    async def speak(self, text: str, language_code: str):
        # Resolves once the request is on the channel, playback is remote
        await self.publisher.publish("speak", self.session_id, text=text, language_code=language_code)

    def stop(self):
        self.publisher.fire("speech_stop", self.session_id)


class RedisTranslator:
    """Forwards translate requests to the document translation flow"""

    def __init__(self, session_id: str, publisher: EventPublisher):
        self.session_id = session_id
        self.publisher = publisher

    def on_translate(self, target_language_code: str):
        self.publisher.fire("translate", self.session_id, target_language_code=target_language_code)


async def transcript_subscriber(redis_client: redis.Redis, registry, channel: Optional[str] = None):
    """Subscribe to speech results and route them to command sessions"""
    pubsub = redis_client.pubsub()
    await pubsub.subscribe(channel or settings.transcript_channel)

    async for message in pubsub.listen():
        if message["type"] == "message":
            try:
                data = json.loads(message["data"])
                await handle_transcript_message(data, registry)
            except Exception as e:
                logger.error("Error processing transcript", error=str(e))


async def handle_transcript_message(data: Dict[str, Any], registry):
    """Apply one speech pipeline message to its session"""
    session_id = data.get("session_id")
    if not session_id or session_id not in registry:
        return

    controller = registry.get(session_id)
    capture = controller.capture

    if data.get("type") == "capture_error":
        capture.on_error(data.get("error", ""))
        return

    text = data.get("text", "")
    if not data.get("is_final", False):
        capture.on_interim(text)
        return

    capture.on_final(text)
    await controller.on_transcript(text)
