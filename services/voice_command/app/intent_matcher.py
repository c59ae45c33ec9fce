"""Tiered intent matching for voice command transcripts"""

from typing import Dict, List, Optional, Tuple

import structlog

from .models import Intent, IntentMatch, MatchTier
from .normalizer import TranscriptNormalizer
from .patterns import DEFAULT_TRANSLATE_LANGUAGE, VOICE_LANGUAGES, iter_patterns

logger = structlog.get_logger(__name__)

FUZZY_THRESHOLD = 0.6
FUZZY_MIN_TOKEN_LENGTH = 3
SHARED_PREFIX_MIN = 3


def word_similarity(word: str, pattern: str) -> float:
    """Score two words: equal 1.0, containment 0.8, shared 3+ char prefix 0.6"""
    if word == pattern:
        return 1.0
    if pattern in word or word in pattern:
        return 0.8

    shared = 0
    for a, b in zip(word, pattern):
        if a != b:
            break
        shared += 1

    if shared >= SHARED_PREFIX_MIN:
        return 0.6
    return 0.0


class IntentMatcher:
    """Maps a transcript to one intent using exact, phrase and fuzzy tiers.

    Tiers run in that order and the first tier with any hit wins. Inside a
    tier the catalog order decides, not a score.
    """

    def __init__(
        self,
        normalizer: Optional[TranscriptNormalizer] = None,
        patterns: Optional[List[Tuple[Intent, str]]] = None,
        languages: Optional[Dict[str, str]] = None,
    ):
        self.normalizer = normalizer or TranscriptNormalizer()
        self.patterns = patterns if patterns is not None else iter_patterns()
        self.languages = languages if languages is not None else VOICE_LANGUAGES
        self.total_detections = 0

    def detect_intent(self, text: str) -> IntentMatch:
        """Detect the intent of a raw transcript"""
        normalized = self.normalizer.normalize(text)
        words = normalized.split()
        self.total_detections += 1

        hit = (
            self._match_exact(words)
            or self._match_phrase(normalized)
            or self._match_fuzzy(words)
        )
        if hit is None:
            logger.debug("No intent matched", normalized=normalized)
            return IntentMatch(intent=Intent.UNKNOWN, normalized=normalized)

        intent, pattern, tier = hit
        logger.debug(
            "Intent matched",
            intent=intent.value,
            tier=tier.value,
            pattern=pattern,
            normalized=normalized,
        )

        params: Dict[str, str] = {}
        if intent == Intent.TRANSLATE:
            params = self._resolve_language(normalized)

        return IntentMatch(
            intent=intent,
            params=params,
            tier=tier,
            matched_pattern=pattern,
            normalized=normalized,
        )

    def _match_exact(self, words: List[str]) -> Optional[Tuple[Intent, str, MatchTier]]:
        tokens = set(words)
        for intent, pattern in self.patterns:
            if pattern in tokens:
                return intent, pattern, MatchTier.EXACT
        return None

    def _match_phrase(self, normalized: str) -> Optional[Tuple[Intent, str, MatchTier]]:
        # Agglutinative and transliterated input has no reliable word boundaries
        for intent, pattern in self.patterns:
            if pattern and pattern in normalized:
                return intent, pattern, MatchTier.PHRASE
        return None

    def _match_fuzzy(self, words: List[str]) -> Optional[Tuple[Intent, str, MatchTier]]:
        for word in words:
            if len(word) < FUZZY_MIN_TOKEN_LENGTH:
                continue
            for intent, pattern in self.patterns:
                if word_similarity(word, pattern) >= FUZZY_THRESHOLD:
                    return intent, pattern, MatchTier.FUZZY
        return None

    def _resolve_language(self, normalized: str) -> Dict[str, str]:
        """Pick the translation target named in the transcript, Hindi if none"""
        language = next(
            (name for name in self.languages if name in normalized),
            DEFAULT_TRANSLATE_LANGUAGE,
        )
        return {
            "language": language,
            "language_code": self.languages.get(language, VOICE_LANGUAGES[DEFAULT_TRANSLATE_LANGUAGE]),
        }
