"""Command sessions held in memory, keyed by session id"""

import asyncio
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional, Tuple

import structlog

from .collaborators import SpeechCapture, SpeechSynthesizer, Translator
from .config import settings
from .intent_matcher import IntentMatcher
from .metrics import voice_active_sessions
from .models import DocumentAnalysisSnapshot
from .response_composer import ResponseComposer
from .session_controller import CommandSessionController

logger = structlog.get_logger(__name__)

CollaboratorFactory = Callable[[str], Tuple[SpeechCapture, SpeechSynthesizer, Optional[Translator]]]


class SessionNotFoundError(KeyError):
    """No command session with the given id"""


class SessionExistsError(ValueError):
    """A command session with the given id is already open"""


class SessionRegistry:
    """Creates, looks up and expires command sessions"""

    def __init__(
        self,
        collaborator_factory: CollaboratorFactory,
        matcher: Optional[IntentMatcher] = None,
        composer: Optional[ResponseComposer] = None,
    ):
        self.collaborator_factory = collaborator_factory
        # Matching and composition hold no session state, so sessions share them
        self.matcher = matcher or IntentMatcher()
        self.composer = composer or ResponseComposer()
        self.sessions: Dict[str, CommandSessionController] = {}
        self.last_activity: Dict[str, datetime] = {}

    def __contains__(self, session_id: str) -> bool:
        return session_id in self.sessions

    def __len__(self) -> int:
        return len(self.sessions)

    def create(
        self,
        session_id: Optional[str] = None,
        command_locale: Optional[str] = None,
        snapshot: Optional[DocumentAnalysisSnapshot] = None,
    ) -> CommandSessionController:
        """Open a new command session"""
        session_id = session_id or str(uuid.uuid4())
        if session_id in self.sessions:
            raise SessionExistsError(session_id)

        capture, synthesizer, translator = self.collaborator_factory(session_id)
        controller = CommandSessionController(
            capture=capture,
            synthesizer=synthesizer,
            translator=translator,
            matcher=self.matcher,
            composer=self.composer,
            snapshot=snapshot,
            command_locale=command_locale,
            session_id=session_id,
        )
        self.sessions[session_id] = controller
        self._touch(session_id)
        voice_active_sessions.set(len(self.sessions))

        logger.info("Session created", session_id=session_id, locale=controller.command_locale)
        return controller

    def get(self, session_id: str) -> CommandSessionController:
        """Get a session, refreshing its activity time"""
        controller = self.sessions.get(session_id)
        if controller is None:
            raise SessionNotFoundError(session_id)
        self._touch(session_id)
        return controller

    def update_document(self, session_id: str, snapshot: Optional[DocumentAnalysisSnapshot]):
        """Replace the document analysis a session answers from"""
        controller = self.get(session_id)
        controller.snapshot = snapshot
        logger.info("Session document updated", session_id=session_id, has_document=snapshot is not None)

    def remove(self, session_id: str):
        """Close and forget a session"""
        controller = self.sessions.pop(session_id, None)
        if controller is None:
            raise SessionNotFoundError(session_id)
        self.last_activity.pop(session_id, None)
        controller.close()
        voice_active_sessions.set(len(self.sessions))
        logger.info("Session cleaned up", session_id=session_id)

    def close_all(self):
        for session_id in list(self.sessions):
            self.remove(session_id)

    async def cleanup_expired_sessions(self, timeout: Optional[int] = None):
        """Drop sessions idle for longer than the session timeout"""
        timeout = settings.session_timeout if timeout is None else timeout
        cutoff_time = datetime.now(timezone.utc) - timedelta(seconds=timeout)
        expired_sessions = [
            sid for sid, last_seen in self.last_activity.items()
            if last_seen < cutoff_time
        ]

        for session_id in expired_sessions:
            self.remove(session_id)

        if expired_sessions:
            logger.info("Cleaned up expired sessions", count=len(expired_sessions))

    async def run_cleanup(self, interval: Optional[int] = None):
        """Periodically expire idle sessions until cancelled"""
        interval = interval or settings.session_cleanup_interval
        while True:
            try:
                await asyncio.sleep(interval)
                await self.cleanup_expired_sessions()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error("Error in session cleanup", error=str(e))

    def _touch(self, session_id: str):
        self.last_activity[session_id] = datetime.now(timezone.utc)
