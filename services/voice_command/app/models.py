"""Data models for voice command service"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Intent(str, Enum):
    """Document-assistant actions a voice command can resolve to"""
    READ_SUMMARY = "READ_SUMMARY"
    GET_DEADLINES = "GET_DEADLINES"
    GET_KEY_INFO = "GET_KEY_INFO"
    GET_TYPE = "GET_TYPE"
    GET_ACTIONS = "GET_ACTIONS"
    GET_AMOUNT = "GET_AMOUNT"
    WARNINGS = "WARNINGS"
    TRANSLATE = "TRANSLATE"
    STOP = "STOP"
    HELP = "HELP"
    REPEAT = "REPEAT"
    DOWNLOAD = "DOWNLOAD"
    SHARE = "SHARE"
    READ_FULL = "READ_FULL"
    UNKNOWN = "UNKNOWN"


# Responses to these are never remembered for REPEAT
CONTROL_INTENTS = frozenset({Intent.REPEAT, Intent.STOP, Intent.HELP})


class MatchTier(str, Enum):
    """Matching strategy that produced an intent"""
    EXACT = "exact"
    PHRASE = "phrase"
    FUZZY = "fuzzy"
    NONE = "none"


class SessionMode(str, Enum):
    """Command session state machine states"""
    IDLE = "IDLE"
    LISTENING = "LISTENING"
    PROCESSING = "PROCESSING"


class DocumentAnalysisSnapshot(BaseModel):
    """Read-only analysis of the active document, produced upstream"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    summary: Optional[str] = None
    speakable_summary: Optional[str] = None
    explanation: Optional[str] = None
    key_information: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    suggested_actions: List[str] = Field(default_factory=list)
    deadlines: List[str] = Field(default_factory=list)
    document_type: Optional[str] = None
    # Type assigned by the upload classifier; wins over document_type
    classified_type: Optional[str] = None
    extracted_text: Optional[str] = None


class IntentMatch(BaseModel):
    """Outcome of intent detection for one transcript"""
    intent: Intent
    params: Dict[str, str] = Field(default_factory=dict)
    tier: MatchTier = MatchTier.NONE
    matched_pattern: Optional[str] = None
    normalized: str = ""


class VoiceCommandResult(BaseModel):
    """Result of processing one voice command"""
    intent: Intent
    params: Dict[str, str] = Field(default_factory=dict)
    transcript: str
    response: str


class SessionState(BaseModel):
    """Mutable state of one command session, owned by its controller"""
    mode: SessionMode = SessionMode.IDLE
    command_locale: str = "en-IN"
    last_non_control_response: str = ""
    last_command: Optional[VoiceCommandResult] = None


class CommandRequest(BaseModel):
    """Voice command text submitted directly"""
    text: str = Field(min_length=1)


class DetectIntentRequest(BaseModel):
    """Stateless intent detection request"""
    text: str


class StartCommandModeRequest(BaseModel):
    """Start listening for a command"""
    locale: Optional[str] = None


class VoiceLanguageRequest(BaseModel):
    """Change the command language"""
    locale: str = Field(min_length=2)


class SessionCreateRequest(BaseModel):
    """Session creation request"""
    session_id: Optional[str] = None
    command_locale: Optional[str] = None
    document: Optional[DocumentAnalysisSnapshot] = None


class SessionResponse(BaseModel):
    """Session state as exposed over HTTP"""
    session_id: str
    mode: SessionMode
    command_locale: str
    is_listening: bool
    transcript: str = ""
    speech_error: Optional[str] = None
    has_document: bool
    last_command: Optional[VoiceCommandResult] = None
