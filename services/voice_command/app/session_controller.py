"""
Command session controller
Drives one voice command cycle: listen, interpret, answer
"""

import asyncio
import time
from typing import Optional, Set

import structlog

from .collaborators import SpeechCapture, SpeechSynthesizer, Translator
from .config import settings
from .intent_matcher import IntentMatcher
from .metrics import record_command, record_synthesis_failure
from .models import (
    CONTROL_INTENTS,
    DocumentAnalysisSnapshot,
    Intent,
    IntentMatch,
    SessionMode,
    SessionState,
    VoiceCommandResult,
)
from .response_composer import ResponseComposer

logger = structlog.get_logger(__name__)


class CommandSessionController:
    """Owns the state of one command session.

    Everything runs on the event loop thread. Speech is fired as a task and
    never awaited, so a STOP can always be handled while an answer is still
    playing. The PROCESSING flag only guards against re-entrant transcripts
    and is dropped by a short timer, not by synthesis completing.
    """

    def __init__(
        self,
        capture: SpeechCapture,
        synthesizer: SpeechSynthesizer,
        translator: Optional[Translator] = None,
        matcher: Optional[IntentMatcher] = None,
        composer: Optional[ResponseComposer] = None,
        snapshot: Optional[DocumentAnalysisSnapshot] = None,
        command_locale: Optional[str] = None,
        processing_debounce_ms: Optional[int] = None,
        session_id: Optional[str] = None,
    ):
        self.capture = capture
        self.synthesizer = synthesizer
        self.translator = translator
        self.matcher = matcher or IntentMatcher()
        self.composer = composer or ResponseComposer()
        self.snapshot = snapshot
        self.session_id = session_id
        self.state = SessionState(command_locale=command_locale or settings.default_command_locale)

        if processing_debounce_ms is None:
            processing_debounce_ms = settings.processing_debounce_ms
        self.processing_debounce = processing_debounce_ms / 1000

        # Set whenever the PROCESSING flag has been dropped
        self.processing_done = asyncio.Event()
        self.processing_done.set()

        self._debounce_handle: Optional[asyncio.TimerHandle] = None
        self._speech_tasks: Set[asyncio.Task] = set()

    @property
    def mode(self) -> SessionMode:
        return self.state.mode

    @property
    def command_locale(self) -> str:
        return self.state.command_locale

    @property
    def is_processing(self) -> bool:
        return self.state.mode == SessionMode.PROCESSING

    @property
    def is_listening(self) -> bool:
        return bool(self.capture.is_listening)

    @property
    def transcript(self) -> str:
        return self.capture.transcript or ""

    @property
    def speech_error(self) -> Optional[str]:
        return self.capture.error

    def start_command_mode(self, locale: Optional[str] = None):
        """Start listening for a single command"""
        if locale:
            self.state.command_locale = locale
        self.state.mode = SessionMode.LISTENING

        logger.info(
            "Starting voice commands",
            session_id=self.session_id,
            locale=self.state.command_locale,
        )
        self.capture.start(self.state.command_locale, continuous=False, interim_results=True)

    def stop_command_mode(self):
        """Stop listening; a command being processed keeps its flag"""
        if self.state.mode != SessionMode.PROCESSING:
            self.state.mode = SessionMode.IDLE
        self.capture.stop()

    def set_voice_language(self, locale: str):
        """Change the language commands are heard and answered in"""
        self.state.command_locale = locale
        logger.info("Voice command language set", session_id=self.session_id, locale=locale)

    def detect_intent(self, text: str) -> IntentMatch:
        """Run intent detection without touching the session"""
        return self.matcher.detect_intent(text)

    async def on_transcript(self, text: str) -> Optional[VoiceCommandResult]:
        """Handle a final transcript from speech capture"""
        if self.state.mode != SessionMode.LISTENING:
            logger.debug(
                "Ignoring transcript outside command mode",
                session_id=self.session_id,
                mode=self.state.mode.value,
            )
            return None

        self.stop_command_mode()
        return await self.process_command(text)

    async def process_command(self, text: str) -> Optional[VoiceCommandResult]:
        """Interpret a command transcript and dispatch the answer"""
        if not text or not text.strip():
            return None

        start_time = time.perf_counter()
        self.state.mode = SessionMode.PROCESSING
        self.processing_done.clear()

        try:
            match = self.matcher.detect_intent(text)
            response = self.composer.compose(
                match.intent,
                match.params,
                self.state.command_locale,
                self.snapshot,
                self.state.last_non_control_response,
            )

            result = VoiceCommandResult(
                intent=match.intent,
                params=match.params,
                transcript=text,
                response=response,
            )
            self.state.last_command = result

            if match.intent not in CONTROL_INTENTS:
                self.state.last_non_control_response = response

            logger.info(
                "Voice command processed",
                session_id=self.session_id,
                intent=match.intent.value,
                tier=match.tier.value,
                locale=self.state.command_locale,
            )

            if match.intent == Intent.STOP:
                self.synthesizer.stop()
                self._cancel_debounce()
                self.state.mode = SessionMode.IDLE
                self.processing_done.set()
            elif match.intent == Intent.TRANSLATE and self.translator is not None:
                self.translator.on_translate(match.params.get("language_code", "hi-IN"))
                self._speak(response)
            else:
                self._speak(response)

            record_command(match.intent.value, match.tier.value, time.perf_counter() - start_time)
            return result
        finally:
            if self.state.mode == SessionMode.PROCESSING:
                self._schedule_debounce()

    def close(self):
        """Release timers, pending speech and capture"""
        self._cancel_debounce()
        for task in list(self._speech_tasks):
            task.cancel()
        self.capture.stop()
        self.state.mode = SessionMode.IDLE
        self.processing_done.set()

    def _speak(self, text: str):
        task = asyncio.create_task(self._run_speech(text, self.state.command_locale))
        self._speech_tasks.add(task)
        task.add_done_callback(self._speech_tasks.discard)

    async def _run_speech(self, text: str, language_code: str):
        try:
            await self.synthesizer.speak(text, language_code)
        except Exception as e:
            record_synthesis_failure()
            logger.error(
                "Speech synthesis failed",
                session_id=self.session_id,
                language_code=language_code,
                error=str(e),
            )

    def _schedule_debounce(self):
        self._cancel_debounce()
        loop = asyncio.get_running_loop()
        self._debounce_handle = loop.call_later(self.processing_debounce, self._clear_processing)

    def _cancel_debounce(self):
        if self._debounce_handle is not None:
            self._debounce_handle.cancel()
            self._debounce_handle = None

    def _clear_processing(self):
        self._debounce_handle = None
        if self.state.mode == SessionMode.PROCESSING:
            self.state.mode = SessionMode.IDLE
        self.processing_done.set()
