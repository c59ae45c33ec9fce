"""Interfaces of the speech pipeline pieces a command session drives"""

from typing import Optional, Protocol

# Speech pipeline error codes -> what the user is told
CAPTURE_ERROR_MESSAGES = {
    "no-speech": "No speech detected. Please try again.",
    "audio-capture": "No microphone found. Please check your microphone.",
    "not-allowed": "Microphone permission denied. Please allow microphone access.",
    "network": "Network error. Please check your internet connection.",
}


def capture_error_message(code: str) -> Optional[str]:
    """Map a capture error code to a user-facing message.

    An aborted capture is not an error and clears any previous message.
    """
    if code == "aborted":
        return None
    return CAPTURE_ERROR_MESSAGES.get(code, f"Speech recognition error: {code}")


class SpeechCapture(Protocol):
    """Speech-to-text source for one session"""

    transcript: str
    is_listening: bool
    error: Optional[str]

    def start(self, locale: str, continuous: bool = False, interim_results: bool = True) -> None:
        ...

    def stop(self) -> None:
        ...


class SpeechSynthesizer(Protocol):
    """Text-to-speech sink; speak resolves when playback ends"""

    async def speak(self, text: str, language_code: str) -> None:
        ...

    def stop(self) -> None:
        ...


class Translator(Protocol):
    """Hands a translation request to the document translation flow"""

    def on_translate(self, target_language_code: str) -> None:
        ...
