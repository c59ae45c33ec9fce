"""Transcript normalization ahead of intent matching"""

import re
from typing import Dict, List, Optional, Pattern, Tuple

from .corrections import SPEECH_CORRECTIONS


class TranscriptNormalizer:
    """Lowercases a transcript and applies the speech correction table"""

    def __init__(self, corrections: Optional[Dict[str, str]] = None):
        table = SPEECH_CORRECTIONS if corrections is None else corrections
        # Replacements are lowercased too, the output is matched against lowercased triggers
        self._rules: List[Tuple[Pattern[str], str]] = [
            (re.compile(re.escape(wrong), re.IGNORECASE), correct.lower())
            for wrong, correct in table.items()
        ]

    def normalize(self, raw: str) -> str:
        """Return the corrected, lowercased transcript.

        Rules run in table order over the whole text, so the output of one
        correction can be rewritten again by a later one.
        """
        text = (raw or "").lower().strip()
        for pattern, correct in self._rules:
            # Callable replacement keeps the target literal (no group refs)
            text = pattern.sub(lambda _m, value=correct: value, text)
        return text


_default_normalizer = TranscriptNormalizer()


def normalize(raw: str) -> str:
    """Normalize with the built-in correction table"""
    return _default_normalizer.normalize(raw)
