"""
Response composition for recognized voice commands
Builds the spoken reply from cached document analysis, never calling out
"""

import re
from typing import Dict, Optional

import structlog

from .config import settings
from .models import DocumentAnalysisSnapshot, Intent
from .script_detector import detect_script, is_in_script, language_base
from .templates import (
    CONTINUATION_SUFFIXES,
    ENGLISH_RESPONSES,
    LANGUAGE_NAMES,
    LOCALIZED_TEMPLATES,
)

logger = structlog.get_logger(__name__)

AMOUNT_PATTERN = re.compile(r"₹|rs|rupee|dollar|\$|amount|payment|fee|cost", re.IGNORECASE)

_EMPTY_SNAPSHOT = DocumentAnalysisSnapshot()


class ResponseComposer:
    """Composes one localized utterance per intent.

    A locale with its own templates only gets them when there is no data to
    speak, or when the data is already written in that locale's script.
    Otherwise the data is returned alone so a reply never mixes scripts.
    Locales without templates get the English phrasing.
    """

    def __init__(
        self,
        preview_chars: Optional[int] = None,
        max_key_information: Optional[int] = None,
        max_suggested_actions: Optional[int] = None,
        max_warnings: Optional[int] = None,
    ):
        self.preview_chars = settings.read_full_preview_chars if preview_chars is None else preview_chars
        self.max_key_information = (
            settings.max_key_information if max_key_information is None else max_key_information
        )
        self.max_suggested_actions = (
            settings.max_suggested_actions if max_suggested_actions is None else max_suggested_actions
        )
        self.max_warnings = settings.max_warnings if max_warnings is None else max_warnings

    def compose(
        self,
        intent: Intent,
        params: Optional[Dict[str, str]],
        locale: str,
        snapshot: Optional[DocumentAnalysisSnapshot],
        last_response: str = "",
    ) -> str:
        """Compose the reply for a detected intent"""
        params = params or {}
        snapshot = snapshot or _EMPTY_SNAPSHOT
        base = language_base(locale)

        if intent == Intent.REPEAT:
            if last_response:
                return last_response
            return self._localize(base, intent) or ENGLISH_RESPONSES["repeat_no_data"]

        handler = getattr(self, f"_compose_{intent.value.lower()}", None)
        if handler is None:
            logger.warning("No composer for intent", intent=intent.value)
            return self._localize(base, Intent.UNKNOWN) or ENGLISH_RESPONSES["unknown"]
        return handler(base, snapshot, params)

    def _localize(self, base: str, intent: Intent, data: Optional[str] = None) -> Optional[str]:
        """Apply the anti-mixing rule; None means use the English phrasing"""
        templates = LOCALIZED_TEMPLATES.get(base)
        if templates is None or intent not in templates:
            return None

        template = templates[intent]
        if not data:
            return template.no_data
        if is_in_script(data, base) and template.with_data is not None:
            return template.with_data.format(data=data)
        return data

    def _compose_read_summary(self, base, snapshot, params) -> str:
        if snapshot.speakable_summary:
            return self._localize(base, Intent.READ_SUMMARY, snapshot.speakable_summary) or snapshot.speakable_summary
        if snapshot.summary:
            return (
                self._localize(base, Intent.READ_SUMMARY, snapshot.summary)
                or ENGLISH_RESPONSES["summary_with_data"].format(data=snapshot.summary)
            )
        return self._localize(base, Intent.READ_SUMMARY) or ENGLISH_RESPONSES["summary_no_data"]

    def _compose_get_deadlines(self, base, snapshot, params) -> str:
        if snapshot.deadlines:
            text = ". ".join(snapshot.deadlines)
            count = len(snapshot.deadlines)
            return self._localize(base, Intent.GET_DEADLINES, text) or ENGLISH_RESPONSES["deadlines_with_data"].format(
                count=count,
                plural="s" if count > 1 else "",
                data=text,
            )
        return self._localize(base, Intent.GET_DEADLINES) or ENGLISH_RESPONSES["deadlines_no_data"]

    def _compose_get_key_info(self, base, snapshot, params) -> str:
        if snapshot.key_information:
            text = ". ".join(snapshot.key_information[: self.max_key_information])
            return (
                self._localize(base, Intent.GET_KEY_INFO, text)
                or ENGLISH_RESPONSES["key_info_with_data"].format(data=text)
            )
        return self._localize(base, Intent.GET_KEY_INFO) or ENGLISH_RESPONSES["key_info_no_data"]

    def _compose_get_type(self, base, snapshot, params) -> str:
        # Classifier output wins over the analysis' own guess
        if snapshot.classified_type:
            return (
                self._localize(base, Intent.GET_TYPE, snapshot.classified_type)
                or ENGLISH_RESPONSES["type_classified"].format(data=snapshot.classified_type)
            )
        if snapshot.document_type:
            return (
                self._localize(base, Intent.GET_TYPE, snapshot.document_type)
                or ENGLISH_RESPONSES["type_analysed"].format(data=snapshot.document_type)
            )
        return self._localize(base, Intent.GET_TYPE) or ENGLISH_RESPONSES["type_no_data"]

    def _compose_get_actions(self, base, snapshot, params) -> str:
        if snapshot.suggested_actions:
            text = ". ".join(snapshot.suggested_actions[: self.max_suggested_actions])
            return (
                self._localize(base, Intent.GET_ACTIONS, text)
                or ENGLISH_RESPONSES["actions_with_data"].format(data=text)
            )
        return self._localize(base, Intent.GET_ACTIONS) or ENGLISH_RESPONSES["actions_no_data"]

    def _compose_get_amount(self, base, snapshot, params) -> str:
        amount = next(
            (info for info in snapshot.key_information if AMOUNT_PATTERN.search(info)),
            None,
        )
        if amount:
            return (
                self._localize(base, Intent.GET_AMOUNT, amount)
                or ENGLISH_RESPONSES["amount_with_data"].format(data=amount)
            )
        return self._localize(base, Intent.GET_AMOUNT) or ENGLISH_RESPONSES["amount_no_data"]

    def _compose_warnings(self, base, snapshot, params) -> str:
        if snapshot.warnings:
            text = ". ".join(snapshot.warnings[: self.max_warnings])
            return (
                self._localize(base, Intent.WARNINGS, text)
                or ENGLISH_RESPONSES["warnings_with_data"].format(data=text)
            )
        return self._localize(base, Intent.WARNINGS) or ENGLISH_RESPONSES["warnings_no_data"]

    def _compose_read_full(self, base, snapshot, params) -> str:
        text = snapshot.extracted_text
        if not text:
            return self._localize(base, Intent.READ_FULL) or ENGLISH_RESPONSES["full_no_data"]

        preview = text[: self.preview_chars]
        truncated = len(text) > self.preview_chars

        if base not in LOCALIZED_TEMPLATES:
            suffix = CONTINUATION_SUFFIXES["en"] if truncated else ""
            return ENGLISH_RESPONSES["full_with_data"].format(data=preview + suffix)

        # The suffix follows the script the reply ends up in
        if is_in_script(preview, base):
            suffix = CONTINUATION_SUFFIXES[base] if truncated else ""
            return self._localize(base, Intent.READ_FULL, preview + suffix)

        if not truncated:
            return preview
        return preview + CONTINUATION_SUFFIXES.get(detect_script(preview), CONTINUATION_SUFFIXES["en"])

    def _compose_translate(self, base, snapshot, params) -> str:
        language = params.get("language") or "hindi"
        native = LANGUAGE_NAMES.get(base, {}).get(language, language)
        return (
            self._localize(base, Intent.TRANSLATE, native)
            or ENGLISH_RESPONSES["translate"].format(data=language)
        )

    def _compose_stop(self, base, snapshot, params) -> str:
        return self._localize(base, Intent.STOP) or ENGLISH_RESPONSES["stop"]

    def _compose_help(self, base, snapshot, params) -> str:
        return self._localize(base, Intent.HELP) or ENGLISH_RESPONSES["help"]

    def _compose_download(self, base, snapshot, params) -> str:
        return self._localize(base, Intent.DOWNLOAD) or ENGLISH_RESPONSES["download"]

    def _compose_share(self, base, snapshot, params) -> str:
        return self._localize(base, Intent.SHARE) or ENGLISH_RESPONSES["share"]

    def _compose_unknown(self, base, snapshot, params) -> str:
        return self._localize(base, Intent.UNKNOWN) or ENGLISH_RESPONSES["unknown"]
