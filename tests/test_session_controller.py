import asyncio

import pytest
from unittest.mock import AsyncMock

from app.models import Intent, SessionMode


async def settle():
    """Let fire-and-forget speech tasks run."""
    await asyncio.sleep(0)
    await asyncio.sleep(0)


class TestCommandMode:
    """Test cases for listening control."""

    def test_start_uses_session_locale(self, controller, capture):
        controller.start_command_mode()
        assert controller.mode == SessionMode.LISTENING
        capture.start.assert_called_once_with("en-IN", continuous=False, interim_results=True)

    def test_start_with_locale_changes_language(self, controller, capture):
        controller.start_command_mode("te-IN")
        assert controller.command_locale == "te-IN"
        capture.start.assert_called_once_with("te-IN", continuous=False, interim_results=True)

    def test_stop_returns_to_idle(self, controller, capture):
        controller.start_command_mode()
        controller.stop_command_mode()
        assert controller.mode == SessionMode.IDLE
        capture.stop.assert_called_once()

    def test_set_voice_language(self, controller):
        controller.set_voice_language("ta-IN")
        assert controller.command_locale == "ta-IN"

    def test_detect_intent_leaves_state_alone(self, controller):
        match = controller.detect_intent("deadline")
        assert match.intent == Intent.GET_DEADLINES
        assert controller.state.last_command is None
        assert controller.mode == SessionMode.IDLE


class TestProcessCommand:
    """Test cases for command processing and dispatch."""

    @pytest.mark.asyncio
    async def test_blank_text(self, controller, synthesizer):
        assert await controller.process_command("   ") is None
        assert controller.mode == SessionMode.IDLE
        synthesizer.speak.assert_not_called()

    @pytest.mark.asyncio
    async def test_speaks_response_in_command_locale(self, controller, synthesizer):
        result = await controller.process_command("deadline")

        assert result.intent == Intent.GET_DEADLINES
        assert result.transcript == "deadline"
        assert result.response == "I found 1 deadline in this document. Pay by 5 April"
        assert controller.state.last_command == result

        await settle()
        synthesizer.speak.assert_awaited_once_with(result.response, "en-IN")

    @pytest.mark.asyncio
    async def test_processing_flag_clears_after_debounce(self, controller):
        await controller.process_command("deadline")
        assert controller.mode == SessionMode.PROCESSING

        await asyncio.wait_for(controller.processing_done.wait(), timeout=1)
        assert controller.mode == SessionMode.IDLE

    @pytest.mark.asyncio
    async def test_stop_halts_speech_without_speaking(self, controller, synthesizer):
        result = await controller.process_command("stop")
        await settle()

        assert result.intent == Intent.STOP
        synthesizer.stop.assert_called_once()
        synthesizer.speak.assert_not_called()
        assert controller.mode == SessionMode.IDLE
        assert controller.processing_done.is_set()

    @pytest.mark.asyncio
    async def test_translate_calls_translator_then_speaks(self, controller, synthesizer, translator):
        result = await controller.process_command("translate to tamil")
        await settle()

        assert result.params["language_code"] == "ta-IN"
        translator.on_translate.assert_called_once_with("ta-IN")
        synthesizer.speak.assert_awaited_once_with(result.response, "en-IN")

    @pytest.mark.asyncio
    async def test_translate_without_translator_still_speaks(self, controller, synthesizer):
        controller.translator = None
        result = await controller.process_command("translate")
        await settle()

        assert result.intent == Intent.TRANSLATE
        synthesizer.speak.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_repeat_uses_last_non_control_response(self, controller):
        first = await controller.process_command("deadline")
        await controller.process_command("help")
        await controller.process_command("stop")

        repeated = await controller.process_command("repeat")
        assert repeated.intent == Intent.REPEAT
        assert repeated.response == first.response

    @pytest.mark.asyncio
    async def test_unknown_response_is_remembered(self, controller):
        unknown = await controller.process_command("xyz gibberish")
        assert unknown.intent == Intent.UNKNOWN
        assert controller.state.last_non_control_response == unknown.response

    @pytest.mark.asyncio
    async def test_synthesis_failure_is_not_raised(self, controller, synthesizer):
        synthesizer.speak = AsyncMock(side_effect=RuntimeError("tts down"))

        result = await controller.process_command("deadline")
        await settle()

        assert result.intent == Intent.GET_DEADLINES
        synthesizer.speak.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_speaks_in_new_language(self, controller, synthesizer):
        controller.set_voice_language("te-IN")
        result = await controller.process_command("ఆపు")
        assert result.response == "సరే, ఆపుతున్నాను."

        await controller.process_command("deadline")
        await settle()
        synthesizer.speak.assert_awaited_once_with("Pay by 5 April", "te-IN")


class TestTranscripts:
    """Test cases for transcripts arriving from speech capture."""

    @pytest.mark.asyncio
    async def test_ignored_when_not_listening(self, controller, synthesizer):
        assert await controller.on_transcript("deadline") is None
        await settle()
        synthesizer.speak.assert_not_called()

    @pytest.mark.asyncio
    async def test_stops_capture_and_processes(self, controller, capture):
        controller.start_command_mode()
        result = await controller.on_transcript("deadline")

        capture.stop.assert_called_once()
        assert result.intent == Intent.GET_DEADLINES
        assert controller.mode == SessionMode.PROCESSING

    @pytest.mark.asyncio
    async def test_ignored_while_processing(self, controller):
        await controller.process_command("deadline")
        assert await controller.on_transcript("help") is None
        assert controller.state.last_command.intent == Intent.GET_DEADLINES

    @pytest.mark.asyncio
    async def test_stop_command_mode_keeps_processing_flag(self, controller):
        await controller.process_command("deadline")
        controller.stop_command_mode()
        assert controller.mode == SessionMode.PROCESSING

    @pytest.mark.asyncio
    async def test_close_releases_session(self, controller, capture):
        await controller.process_command("deadline")
        controller.close()

        assert controller.mode == SessionMode.IDLE
        assert controller.processing_done.is_set()
        capture.stop.assert_called()
