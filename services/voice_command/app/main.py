"""
Voice Command Service
Recognizes spoken document-assistant commands and answers them from the
cached document analysis, in the user's command language
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Optional

import redis.asyncio as redis
import structlog
from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .config import settings
from .intent_matcher import IntentMatcher
from .logging import setup_logging
from .metrics import voice_active_sessions
from .models import (
    CommandRequest,
    DetectIntentRequest,
    DocumentAnalysisSnapshot,
    IntentMatch,
    SessionCreateRequest,
    SessionResponse,
    StartCommandModeRequest,
    VoiceCommandResult,
    VoiceLanguageRequest,
)
from .patterns import COMMAND_LANGUAGES, QUICK_HINTS, VOICE_LANGUAGES, supported_intents
from .redis_bridge import (
    EventPublisher,
    RedisSpeechCapture,
    RedisSpeechSynthesizer,
    RedisTranslator,
    transcript_subscriber,
)
from .response_composer import ResponseComposer
from .session_controller import CommandSessionController
from .session_registry import SessionExistsError, SessionNotFoundError, SessionRegistry

# Setup structured logging
setup_logging()
logger = structlog.get_logger(__name__)


def build_registry(publisher: EventPublisher) -> SessionRegistry:
    """Create the session registry wired to the speech pipeline bridge"""

    def collaborators(session_id: str):
        return (
            RedisSpeechCapture(session_id, publisher),
            RedisSpeechSynthesizer(session_id, publisher),
            RedisTranslator(session_id, publisher),
        )

    return SessionRegistry(collaborators, matcher=IntentMatcher(), composer=ResponseComposer())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("🎙️ Starting Voice Command Service")

    app.state.redis = None
    if settings.redis_enabled:
        app.state.redis = redis.from_url(settings.redis_url, decode_responses=True)
        logger.info("✅ Redis connection configured", channel=settings.transcript_channel)
    else:
        logger.info("Redis disabled, speech pipeline events will only be logged")

    app.state.publisher = EventPublisher(app.state.redis, settings.event_channel)
    app.state.registry = build_registry(app.state.publisher)

    app.state.tasks = [asyncio.create_task(app.state.registry.run_cleanup())]
    if app.state.redis is not None:
        app.state.tasks.append(
            asyncio.create_task(
                transcript_subscriber(app.state.redis, app.state.registry, settings.transcript_channel)
            )
        )

    yield

    logger.info("🛑 Shutting down Voice Command Service")
    for task in app.state.tasks:
        task.cancel()
    await asyncio.gather(*app.state.tasks, return_exceptions=True)

    app.state.registry.close_all()
    if app.state.redis is not None:
        await app.state.redis.close()


app = FastAPI(
    title="Voice Command Service",
    description="Multilingual voice command recognition for document assistance",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_session(session_id: str) -> CommandSessionController:
    try:
        return app.state.registry.get(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


def session_response(session_id: str, controller: CommandSessionController) -> SessionResponse:
    return SessionResponse(
        session_id=session_id,
        mode=controller.mode,
        command_locale=controller.command_locale,
        is_listening=controller.is_listening,
        transcript=controller.transcript,
        speech_error=controller.speech_error,
        has_document=controller.snapshot is not None,
        last_command=controller.state.last_command,
    )


@app.post("/sessions", response_model=SessionResponse)
async def create_session(request: SessionCreateRequest):
    """Open a command session"""
    try:
        controller = app.state.registry.create(
            session_id=request.session_id,
            command_locale=request.command_locale,
            snapshot=request.document,
        )
    except SessionExistsError:
        raise HTTPException(status_code=409, detail="Session already exists")
    return session_response(controller.session_id, controller)


@app.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session_state(session_id: str):
    """Get command session state"""
    return session_response(session_id, get_session(session_id))


@app.delete("/sessions/{session_id}")
async def delete_session(session_id: str):
    """Close a command session"""
    try:
        app.state.registry.remove(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    return {"message": "Session deleted", "session_id": session_id}


@app.put("/sessions/{session_id}/document", response_model=SessionResponse)
async def update_document(session_id: str, document: DocumentAnalysisSnapshot):
    """Replace the document analysis a session answers from"""
    controller = get_session(session_id)
    app.state.registry.update_document(session_id, document)
    return session_response(session_id, controller)


@app.post("/sessions/{session_id}/start", response_model=SessionResponse)
async def start_command_mode(session_id: str, request: Optional[StartCommandModeRequest] = None):
    """Start listening for a command"""
    controller = get_session(session_id)
    try:
        controller.start_command_mode(request.locale if request else None)
    except Exception as e:
        logger.error("Failed to start command mode", session_id=session_id, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to start command mode")
    return session_response(session_id, controller)


@app.post("/sessions/{session_id}/stop", response_model=SessionResponse)
async def stop_command_mode(session_id: str):
    """Stop listening"""
    controller = get_session(session_id)
    controller.stop_command_mode()
    return session_response(session_id, controller)


@app.put("/sessions/{session_id}/language", response_model=SessionResponse)
async def set_voice_language(session_id: str, request: VoiceLanguageRequest):
    """Change the command language"""
    controller = get_session(session_id)
    controller.set_voice_language(request.locale)
    return session_response(session_id, controller)


@app.post("/sessions/{session_id}/command", response_model=VoiceCommandResult)
async def process_command(session_id: str, request: CommandRequest):
    """Process a command transcript as if it had been spoken"""
    controller = get_session(session_id)
    try:
        result = await controller.process_command(request.text)
    except Exception as e:
        logger.error("Voice command processing failed", session_id=session_id, error=str(e))
        raise HTTPException(status_code=500, detail="Voice command processing failed")

    if result is None:
        raise HTTPException(status_code=400, detail="Command text is blank")
    return result


@app.post("/detect-intent", response_model=IntentMatch)
async def detect_intent(request: DetectIntentRequest):
    """Detect the intent of a transcript without a session"""
    return app.state.registry.matcher.detect_intent(request.text)


@app.get("/intents")
async def get_supported_intents():
    """Get supported intents and command languages"""
    return {
        "intents": supported_intents(),
        "languages": COMMAND_LANGUAGES,
        "translate_languages": VOICE_LANGUAGES,
        "quick_hints": QUICK_HINTS,
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "voice_command",
        "redis_enabled": app.state.redis is not None,
        "active_sessions": len(app.state.registry),
    }


@app.get("/metrics")
async def get_metrics():
    """Get service metrics in Prometheus format"""
    voice_active_sessions.set(len(app.state.registry))
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
